"""
どこで: `common` の型定義。
何を: Vec2/Vec3 などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
RGBA = tuple[float, float, float, float]


def as_vec3(value: object) -> Vec3:
    """長さ 2/3 の数値列を `Vec3` に正規化する（2 要素なら Z=0 を補う）。"""
    try:
        seq = tuple(float(v) for v in value)  # type: ignore[union-attr]
    except TypeError as e:
        raise ValueError(f"Vec3 に変換できません: {value!r}") from e
    if len(seq) == 2:
        return (seq[0], seq[1], 0.0)
    if len(seq) != 3:
        raise ValueError(f"Vec3 は長さ 2 または 3 である必要があります: {value!r}")
    return (seq[0], seq[1], seq[2])


__all__ = ["Vec2", "Vec3", "RGBA", "as_vec3"]
