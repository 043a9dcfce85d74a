"""
どこで: `engine.core.geometry`。
何を: ポリライン集合 `Geometry`。prefab（目盛り・針）の形状、ノードのワールド形状、
      Renderer へ渡す 1 フレームぶんの形状をすべてこの型で表す。
なぜ: 形状の生成（shapes）・配置（scene）・転送（render）の境界で変換を挟まずに済ませるため。

データモデル:
- `coords`  float32 (N, 3): 全頂点を連結した配列。
- `offsets` int32 (M+1,):   i 本目の線は `coords[offsets[i]:offsets[i+1]]`。先頭は 0、末尾は N。
- 空は `coords.shape == (0, 3)`, `offsets == [0]`。

例（時目盛り 1 本 = 閉じた長方形の 5 点）:

    coords  = [[-w, -h, 0], [w, -h, 0], [w, h, 0], [-w, h, 0], [-w, -h, 0]]
    offsets = [0, 5]

変換（`transform` / `concat_all`）はすべて新しいインスタンスを返す。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from common.types import Vec3

NumberLike = float | int
LineLike = np.ndarray | Sequence[NumberLike] | Sequence[Sequence[NumberLike]]


def _validated(coords: np.ndarray, offsets: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """dtype/連続性を揃え、`offsets` の不変条件を検証する。"""
    c = np.ascontiguousarray(coords, dtype=np.float32)
    if c.ndim != 2 or c.shape[1] != 3:
        raise ValueError(f"coords は形状 (N, 3) である必要があります: {c.shape}")
    o = np.ascontiguousarray(offsets, dtype=np.int32)
    if o.ndim != 1 or o.size == 0:
        raise ValueError("offsets は 1 要素以上の 1 次元配列である必要があります")
    if o[0] != 0 or o[-1] != c.shape[0]:
        raise ValueError(f"offsets は 0 で始まり N={c.shape[0]} で終わる必要があります: {o[[0, -1]]}")
    if np.any(np.diff(o) < 0):
        raise ValueError("offsets は単調非減少である必要があります")
    return c, o


def _as_line(line: LineLike) -> np.ndarray:
    """1 本の線を (K, 3) float32 に整形する（(K,2) は Z=0、(3K,) は XYZ の並び）。"""
    arr = np.asarray(line, dtype=np.float32)
    if arr.ndim == 1:
        if arr.size % 3 != 0:
            raise ValueError(f"1 次元入力の長さは 3 の倍数である必要があります: {arr.size}")
        return arr.reshape(-1, 3)
    if arr.ndim == 2 and arr.shape[1] == 3:
        return arr
    if arr.ndim == 2 and arr.shape[1] == 2:
        return np.hstack([arr, np.zeros((arr.shape[0], 1), dtype=np.float32)])
    raise ValueError(f"座標配列の形状が不正です: {arr.shape}")


class Geometry:
    """ポリライン集合（不変として扱う）。"""

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        self.coords, self.offsets = _validated(coords, offsets)

    @classmethod
    def empty(cls) -> "Geometry":
        return cls(np.empty((0, 3), dtype=np.float32), np.zeros(1, dtype=np.int32))

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """座標列の集まりから生成する。

        Raises
        ------
        ValueError
            いずれかの線が (K,2) / (K,3) / (3K,) のどれにも当てはまらない場合。
        """
        arrays = [_as_line(line) for line in lines]
        if not arrays:
            return cls.empty()
        offsets = np.zeros(len(arrays) + 1, dtype=np.int64)
        np.cumsum([a.shape[0] for a in arrays], out=offsets[1:])
        return cls(np.concatenate(arrays, axis=0), offsets)

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def transform(
        self,
        matrix: np.ndarray,
        translation: Vec3 = (0.0, 0.0, 0.0),
    ) -> "Geometry":
        """3x3 線形変換 → 平行移動を適用する（純関数）。

        各頂点 `p` を `R @ p + translation` に写す。
        シーングラフのワールド配置（回転行列 + 位置）はこの経路を通る。
        """
        mat = np.asarray(matrix, dtype=np.float64)
        if mat.shape != (3, 3):
            raise ValueError(f"matrix は形状 (3, 3) である必要があります: {mat.shape}")
        if self.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        out = self.coords.astype(np.float64) @ mat.T + np.asarray(translation, dtype=np.float64)
        return Geometry(out.astype(np.float32), self.offsets.copy())

    @classmethod
    def concat_all(cls, parts: Iterable["Geometry"]) -> "Geometry":
        """複数ジオメトリを 1 回の結合でまとめる（フレーム毎のシーン収集用）。"""
        items = [g for g in parts if not g.is_empty]
        if not items:
            return cls.empty()
        coords = np.concatenate([g.coords for g in items], axis=0)
        offsets = [np.array([0], dtype=np.int64)]
        shift = 0
        for g in items:
            offsets.append(g.offsets[1:].astype(np.int64) + shift)
            shift += g.coords.shape[0]
        return cls(coords, np.concatenate(offsets))

    def __len__(self) -> int:
        """ポリライン本数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1) if self.offsets.size > 0 else 0

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines}, {self.coords.dtype}/{self.offsets.dtype})"
