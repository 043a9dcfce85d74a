"""
どこで: `api` 入口（高レベル公開 API）。
何を: 時計ランナー `run_clock`・時計コンポーネント・prefab 登録デコレータ `shape` を再輸出。
なぜ: 利用者が単一名前空間から時計の組み立て→実行まで完結できるようにするため。

Usage:
    from api import run_clock
    run_clock(fps=30)
"""

from clockface import AnalogClock, ClockAssets, ClockLayout, FixedTimeSource
from engine.core.geometry import Geometry
from shapes.registry import shape as shape

from .clock import run_clock
from .clock import run_clock as run

__all__ = [
    "run_clock",
    "run",
    "shape",
    "AnalogClock",
    "ClockAssets",
    "ClockLayout",
    "FixedTimeSource",
    "Geometry",
]

__version__ = "2025.10"
