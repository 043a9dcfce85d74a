"""
どこで: `shapes.hands`（針 prefab）。
何を: 時針・分針・秒針の輪郭ポリラインを生成する。
なぜ: 回転 0° で 12 時方向（ローカル +Y）を指す形に統一し、回転角だけで表示を決められるようにするため。
"""

from __future__ import annotations

import numpy as np

from engine.core.geometry import Geometry

from .registry import shape


def _hand_outline(length: float, width: float, tail: float) -> np.ndarray:
    """軸を原点に置いた先細りの針（閉ポリライン）。"""
    if length <= 0 or width <= 0 or tail < 0:
        raise ValueError(f"針の寸法が不正です: length={length}, width={width}, tail={tail}")
    hw = 0.5 * width
    pts = [
        (0.0, -tail),
        (hw, 0.0),
        (hw * 0.4, length),
        (-hw * 0.4, length),
        (-hw, 0.0),
        (0.0, -tail),
    ]
    return np.array([[x, y, 0.0] for x, y in pts], dtype=np.float32)


@shape
def hours_hand(length: float = 2.4, width: float = 0.28, tail: float = 0.3) -> Geometry:
    return Geometry.from_lines([_hand_outline(length, width, tail)])


@shape
def minutes_hand(length: float = 3.4, width: float = 0.2, tail: float = 0.4) -> Geometry:
    return Geometry.from_lines([_hand_outline(length, width, tail)])


@shape
def seconds_hand(length: float = 4.0, tail: float = 0.6, hub: float = 0.12) -> Geometry:
    """秒針（1 本線 + 軸の小円）。"""
    if length <= 0 or tail < 0 or hub <= 0:
        raise ValueError(f"秒針の寸法が不正です: length={length}, tail={tail}, hub={hub}")
    stem = np.array([[0.0, -tail, 0.0], [0.0, length, 0.0]], dtype=np.float32)
    t = np.linspace(0.0, 2.0 * np.pi, 17, dtype=np.float32)
    ring = np.stack([np.cos(t) * hub, np.sin(t) * hub, np.zeros_like(t)], axis=1)
    return Geometry.from_lines([stem, ring])
