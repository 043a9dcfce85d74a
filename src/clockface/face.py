"""
どこで: `clockface.face`（文字盤ビルダー）。
何を: 極座標 → 直交座標の変換と、時目盛り 12 本・分目盛り 48 本の配置。
なぜ: 起動時に 1 度だけ静的マーカーを生成し、以後は変更しないため。

配置規則:
- 時目盛り: 0° から 30° 刻みで 12 本、半径 `hour_radius`。向きは「中心への look-rotation の
  Z 回りひねり」で、角度 θ の目盛りは Z 回りに θ−90° 回る（ローカル +Y が放射方向）。
- 分目盛り: 6° 刻みの 60 候補のうち、時目盛りと重なる 5 ステップ毎（30° の倍数）を除いた 48 本、
  半径 `minute_radius`、回転なし。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from common.types import Vec3
from engine.core import transform_utils as vec
from engine.core.quaternion import Quaternion
from engine.core.scene import Scene, SceneNode

from .assets import ClockAssets
from .layout import ClockLayout

logger = logging.getLogger(__name__)

HOUR_TICK_COUNT = 12
HOUR_TICK_STEP_DEG = 30.0  # 360° / 12 時間
MINUTE_STEP_COUNT = 60
MINUTE_TICK_STEP_DEG = 6.0  # 360° / 60 分
MINUTE_STEPS_PER_HOUR_TICK = int(HOUR_TICK_STEP_DEG // MINUTE_TICK_STEP_DEG)

FACE_NORMAL: Vec3 = (0.0, 0.0, 1.0)


def polar_to_cartesian(radius: float, angle_rad: float) -> Vec3:
    """`(r cos θ, r sin θ, 0)` を返す。"""
    return (radius * math.cos(angle_rad), radius * math.sin(angle_rad), 0.0)


def cartesian_to_polar(point: Vec3) -> tuple[float, float]:
    """XY 成分から `(r, θ)` を返す（θ は `[0, 2π)`、Z は無視）。"""
    x, y = float(point[0]), float(point[1])
    return math.hypot(x, y), math.atan2(y, x) % math.tau


def overlaps_hour_tick(step: int) -> bool:
    """分ステップ `step` が時目盛りの位置（30° の倍数）と重なるか。"""
    return step % MINUTE_STEPS_PER_HOUR_TICK == 0


def hour_tick_angles() -> list[float]:
    """時目盛りの配置角 [deg]。"""
    return [HOUR_TICK_STEP_DEG * i for i in range(HOUR_TICK_COUNT)]


def minute_tick_angles() -> list[float]:
    """分目盛りの配置角 [deg]（時目盛りと重なる位置を除く 48 個）。"""
    return [
        MINUTE_TICK_STEP_DEG * j for j in range(MINUTE_STEP_COUNT) if not overlaps_hour_tick(j)
    ]


def hour_tick_rotation(position: Vec3, center: Vec3) -> Quaternion:
    """目盛り位置から中心を向く look-rotation を作り、Z 回りの成分だけを残す。

    look-rotation 単体では x/y 成分がライブラリの軸規約に左右されるため、
    それらを 0 にして文字盤の法線回りの回転へ制限する。
    """
    direction = vec.sub(center, position)
    return Quaternion.look_rotation(direction, FACE_NORMAL).twist_z()


@dataclass
class FaceTicks:
    hours: list[SceneNode] = field(default_factory=list)
    minutes: list[SceneNode] = field(default_factory=list)

    def all(self) -> list[SceneNode]:
        return [*self.hours, *self.minutes]


class FaceBuilder:
    """静的な目盛りを生成する（1 度だけ呼ぶ想定）。"""

    def __init__(self, layout: ClockLayout | None = None) -> None:
        self.layout = layout if layout is not None else ClockLayout()

    def _place(self, radius: float, angle_deg: float) -> Vec3:
        return vec.add(self.layout.center, polar_to_cartesian(radius, math.radians(angle_deg)))

    def build_hour_ticks(self, scene: Scene, assets: ClockAssets) -> list[SceneNode]:
        assert assets.hour_tick is not None
        nodes: list[SceneNode] = []
        for i, angle in enumerate(hour_tick_angles()):
            position = self._place(self.layout.hour_radius, angle)
            rotation = hour_tick_rotation(position, self.layout.center)
            nodes.append(
                scene.instantiate(
                    assets.hour_tick,
                    position,
                    rotation,
                    assets.hours_parent,
                    name=f"hour_tick_{i:02d}",
                )
            )
        return nodes

    def build_minute_ticks(self, scene: Scene, assets: ClockAssets) -> list[SceneNode]:
        assert assets.minute_tick is not None
        nodes: list[SceneNode] = []
        for angle in minute_tick_angles():
            step = int(round(angle / MINUTE_TICK_STEP_DEG))
            position = self._place(self.layout.minute_radius, angle)
            nodes.append(
                scene.instantiate(
                    assets.minute_tick,
                    position,
                    Quaternion.identity(),
                    assets.minutes_parent,
                    name=f"minute_tick_{step:02d}",
                )
            )
        return nodes

    def build(self, scene: Scene, assets: ClockAssets) -> FaceTicks:
        """時目盛り → 分目盛りの順に生成する。`assets` は検証済みであること。"""
        ticks = FaceTicks(
            hours=self.build_hour_ticks(scene, assets),
            minutes=self.build_minute_ticks(scene, assets),
        )
        logger.debug("face built: %d hour ticks, %d minute ticks", len(ticks.hours), len(ticks.minutes))
        return ticks


__all__ = [
    "HOUR_TICK_COUNT",
    "HOUR_TICK_STEP_DEG",
    "MINUTE_STEP_COUNT",
    "MINUTE_TICK_STEP_DEG",
    "polar_to_cartesian",
    "cartesian_to_polar",
    "overlaps_hour_tick",
    "hour_tick_angles",
    "minute_tick_angles",
    "hour_tick_rotation",
    "FaceTicks",
    "FaceBuilder",
]
