"""
どこで: `clockface` パッケージ（時計ドメイン層）。
何を: 文字盤ビルダー・針ビルダー/回転更新・時刻ソース・アセット束・時計コンポーネントを公開。
なぜ: ランナー（`api`）とテストが単一の名前空間から時計を組み立てられるようにするため。
"""

from .assets import ClockAssets
from .component import AnalogClock
from .errors import (
    ClockAlreadyInitializedError,
    ClockError,
    ClockNotInitializedError,
    MissingAssetError,
)
from .face import FaceBuilder, cartesian_to_polar, polar_to_cartesian
from .hands import HandAngles, HandsBuilder, hand_angles, hand_rotations
from .layout import ClockLayout
from .time_source import FixedTimeSource, parse_time_of_day, system_time_of_day, time_of_day_seconds

__all__ = [
    "AnalogClock",
    "ClockAssets",
    "ClockLayout",
    "FaceBuilder",
    "HandsBuilder",
    "HandAngles",
    "hand_angles",
    "hand_rotations",
    "polar_to_cartesian",
    "cartesian_to_polar",
    "FixedTimeSource",
    "parse_time_of_day",
    "system_time_of_day",
    "time_of_day_seconds",
    "ClockError",
    "MissingAssetError",
    "ClockNotInitializedError",
    "ClockAlreadyInitializedError",
]
