"""
どこで: `clockface.hands`（針ビルダーと回転更新）。
何を: 時刻 → 針角度の式、針ノードの生成、毎フレームの回転適用。
なぜ: 回転を時刻だけの純関数にし、同じ時刻なら何度呼んでも同じ姿勢になるようにするため。

角度式（度、文字盤の法線 = Z 軸回り）:
- 秒針 = 6° × その日の経過秒（小数）
- 分針 = 6° × その日の経過分（小数）
- 時針 = 30° × その日の経過時間（小数）

角度は 1 日の中で単調増加し、折り返さない（時針は 1 日で 720°）。姿勢としては 360° 周期。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from engine.core.quaternion import Quaternion
from engine.core.scene import Scene, SceneNode

from .assets import ClockAssets
from .layout import ClockLayout

logger = logging.getLogger(__name__)

SECONDS_TO_DEGREES = 6.0  # 360° / 60 秒
MINUTES_TO_DEGREES = 6.0  # 360° / 60 分
HOURS_TO_DEGREES = 30.0  # 360° / 12 時間


class HandAngles(NamedTuple):
    hours: float
    minutes: float
    seconds: float


class HandRotations(NamedTuple):
    hours: Quaternion
    minutes: Quaternion
    seconds: Quaternion


def hand_angles(time_of_day: float) -> HandAngles:
    """経過秒 `time_of_day` から 3 本の針角度 [deg] を返す。"""
    total_seconds = float(time_of_day)
    return HandAngles(
        hours=HOURS_TO_DEGREES * (total_seconds / 3600.0),
        minutes=MINUTES_TO_DEGREES * (total_seconds / 60.0),
        seconds=SECONDS_TO_DEGREES * total_seconds,
    )


def hand_rotations(time_of_day: float) -> HandRotations:
    angles = hand_angles(time_of_day)
    return HandRotations(
        hours=Quaternion.from_euler_z(angles.hours),
        minutes=Quaternion.from_euler_z(angles.minutes),
        seconds=Quaternion.from_euler_z(angles.seconds),
    )


@dataclass
class ClockHands:
    hours: SceneNode
    minutes: SceneNode
    seconds: SceneNode

    def __iter__(self) -> Iterator[SceneNode]:
        yield self.hours
        yield self.minutes
        yield self.seconds


def apply_rotations(hands: ClockHands, time_of_day: float) -> HandAngles:
    """3 本の針の回転だけを書き換える。位置や他の状態には触れない。"""
    rot = hand_rotations(time_of_day)
    hands.seconds.rotation = rot.seconds
    hands.hours.rotation = rot.hours
    hands.minutes.rotation = rot.minutes
    return hand_angles(time_of_day)


class HandsBuilder:
    """針を中心に生成し、与えられた時刻の向きに合わせる（1 度だけ呼ぶ想定）。"""

    def __init__(self, layout: ClockLayout | None = None) -> None:
        self.layout = layout if layout is not None else ClockLayout()

    def build(self, scene: Scene, assets: ClockAssets, time_of_day: float) -> ClockHands:
        """秒針 → 時針 → 分針の順に生成し、直ちに `time_of_day` の回転を適用する。

        `assets` は検証済みであること。
        """
        assert assets.seconds_hand is not None
        assert assets.hours_hand is not None
        assert assets.minutes_hand is not None
        lay = self.layout
        seconds = scene.instantiate(
            assets.seconds_hand, lay.hand_position(lay.seconds_depth), name="seconds_hand"
        )
        hours = scene.instantiate(
            assets.hours_hand, lay.hand_position(lay.hours_depth), name="hours_hand"
        )
        minutes = scene.instantiate(
            assets.minutes_hand, lay.hand_position(lay.minutes_depth), name="minutes_hand"
        )
        hands = ClockHands(hours=hours, minutes=minutes, seconds=seconds)
        apply_rotations(hands, time_of_day)
        return hands


__all__ = [
    "SECONDS_TO_DEGREES",
    "MINUTES_TO_DEGREES",
    "HOURS_TO_DEGREES",
    "HandAngles",
    "HandRotations",
    "hand_angles",
    "hand_rotations",
    "ClockHands",
    "apply_rotations",
    "HandsBuilder",
]
