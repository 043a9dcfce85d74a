"""
どこで: `shapes.ticks`（目盛り prefab）。
何を: 時目盛り `hour_tick`（ローカル +Y 方向に長い棒）と分目盛り `minute_tick`（小さな正方形）。
なぜ: 文字盤の静的マーカーを Geometry として登録し、設定から名前で差し替え可能にするため。

向き:
- `hour_tick` は look-rotation のひねり（Z 回り θ−90°）で配置されるため、
  ローカル +Y がそのまま放射方向になる。
- `minute_tick` は回転なしで置かれる前提で、向きを持たない形にしている。
"""

from __future__ import annotations

import numpy as np

from engine.core.geometry import Geometry

from .registry import shape


def _rect(width: float, height: float) -> np.ndarray:
    """原点中心の閉じた長方形（5 点、始点を末尾に複製）。"""
    hw, hh = 0.5 * float(width), 0.5 * float(height)
    return np.array(
        [[-hw, -hh, 0.0], [hw, -hh, 0.0], [hw, hh, 0.0], [-hw, hh, 0.0], [-hw, -hh, 0.0]],
        dtype=np.float32,
    )


@shape
def hour_tick(length: float = 0.6, width: float = 0.12) -> Geometry:
    """時目盛り。

    引数:
        length: 放射方向（ローカル +Y）の長さ。
        width: 周方向の幅。
    """
    if length <= 0 or width <= 0:
        raise ValueError(f"hour_tick の寸法は正である必要があります: {(length, width)}")
    return Geometry.from_lines([_rect(width, length)])


@shape
def minute_tick(size: float = 0.1) -> Geometry:
    """分目盛り（一辺 `size` の正方形）。"""
    if size <= 0:
        raise ValueError(f"minute_tick の size は正である必要があります: {size}")
    return Geometry.from_lines([_rect(size, size)])

