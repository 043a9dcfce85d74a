"""
どこで: `engine.core` の姿勢表現。
何を: 不変な単位クォータニオン `Quaternion` と、Z 軸回転・look-rotation・ひねり抽出などの生成関数。
なぜ: 特定の描画 API に依存せず、シーンノードの回転を最小限の型で表すため。

規約:
- 成分順は `(x, y, z, w)`、右手系。
- 角度引数は度数法（`from_euler_z`）。内部計算は `math`（float64）で行う。
- `look_rotation(forward, up)` はローカル +Z を `forward` に、ローカル +Y を `up` 側へ向ける。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from common.types import Vec3

from . import transform_utils as vec


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    # ── ファクトリ ───────────────────
    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_euler_z(cls, degrees: float) -> "Quaternion":
        """Z 軸（文字盤の法線）回りに `degrees` 度回転するクォータニオン。"""
        half = math.radians(float(degrees)) * 0.5
        return cls(0.0, 0.0, math.sin(half), math.cos(half))

    @classmethod
    def from_matrix(cls, m: np.ndarray) -> "Quaternion":
        """3x3 回転行列から変換する（トレースの符号で分岐する標準手法）。"""
        m = np.asarray(m, dtype=np.float64)
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            w = 0.25 * s
            x = (m[2, 1] - m[1, 2]) / s
            y = (m[0, 2] - m[2, 0]) / s
            z = (m[1, 0] - m[0, 1]) / s
        elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            s = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0
            w = (m[2, 1] - m[1, 2]) / s
            x = 0.25 * s
            y = (m[0, 1] + m[1, 0]) / s
            z = (m[0, 2] + m[2, 0]) / s
        elif m[1, 1] > m[2, 2]:
            s = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0
            w = (m[0, 2] - m[2, 0]) / s
            x = (m[0, 1] + m[1, 0]) / s
            y = 0.25 * s
            z = (m[1, 2] + m[2, 1]) / s
        else:
            s = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0
            w = (m[1, 0] - m[0, 1]) / s
            x = (m[0, 2] + m[2, 0]) / s
            y = (m[1, 2] + m[2, 1]) / s
            z = 0.25 * s
        return cls(float(x), float(y), float(z), float(w)).normalized()

    @classmethod
    def look_rotation(cls, forward: Vec3, up: Vec3 = (0.0, 1.0, 0.0)) -> "Quaternion":
        """ローカル +Z を `forward` へ向ける回転。

        `up` が `forward` と平行な場合は、直交する補助軸で代替する。

        例外:
            ValueError: `forward` が長さ 0。
        """
        f = vec.normalize(forward)
        right = vec.cross(up, f)
        if vec.length(right) < vec.EPSILON:
            alt_up: Vec3 = (1.0, 0.0, 0.0) if abs(f[0]) < 0.9 else (0.0, 1.0, 0.0)
            right = vec.cross(alt_up, f)
        r = vec.normalize(right)
        u = vec.cross(f, r)
        m = np.array(
            [
                [r[0], u[0], f[0]],
                [r[1], u[1], f[1]],
                [r[2], u[2], f[2]],
            ],
            dtype=np.float64,
        )
        return cls.from_matrix(m)

    # ── 演算 ───────────────────────
    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalized(self) -> "Quaternion":
        """単位化したコピー。長さ 0 の場合は恒等回転を返す。"""
        n = self.norm()
        if n < vec.EPSILON:
            return Quaternion.identity()
        return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)

    def twist_z(self) -> "Quaternion":
        """x/y 成分を 0 にして単位化し、Z 軸回りの成分だけを残す。"""
        return Quaternion(0.0, 0.0, self.z, self.w).normalized()

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """合成（`self * other` は other → self の順に回す）。"""
        ax, ay, az, aw = self.x, self.y, self.z, self.w
        bx, by, bz, bw = other.x, other.y, other.z, other.w
        return Quaternion(
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        )

    def to_matrix(self) -> np.ndarray:
        """3x3 回転行列（float64）。"""
        q = self.normalized()
        x, y, z, w = q.x, q.y, q.z, q.w
        return np.array(
            [
                [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
                [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
                [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
            ],
            dtype=np.float64,
        )

    def rotate_vector(self, v: Vec3) -> Vec3:
        out = self.to_matrix() @ np.asarray(v, dtype=np.float64)
        return (float(out[0]), float(out[1]), float(out[2]))

    def z_angle_deg(self) -> float:
        """ローカル +X を回した先の XY 平面上の方位角 [deg]（`[0, 360)` に正規化）。"""
        m = self.to_matrix()
        deg = math.degrees(math.atan2(m[1, 0], m[0, 0])) % 360.0
        # -0.0 や丸めで 360 に張り付いた値を 0 に寄せる
        return 0.0 if math.isclose(deg, 360.0, abs_tol=1e-9) else deg

    @property
    def is_identity(self) -> bool:
        return self == Quaternion.identity()


__all__ = ["Quaternion"]
