"""
どこで: `clockface.component`。
何を: 文字盤・針の生成（初期化）と、毎フレームの回転更新をまとめたアナログ時計 `AnalogClock`。
なぜ: 「初期化を 1 度 → 状態を持たない更新を繰り返す」ライフサイクルを明示し、
      初期化前の更新を構造的に拒否するため。

ライフサイクル:
1) `initialize(time_of_day=None)` — アセット検証（欠落は `MissingAssetError`）→ 目盛り → 針。
2) `update(time_of_day)` — 針 3 本の回転だけを再計算。未初期化なら `ClockNotInitializedError`。
3) `tick(dt)` — `Tickable`。時刻ソースを読んで `update()` に渡す（`dt` は使わない）。
4) `teardown()` — 生成したノードを破棄して未初期化状態へ戻す。

使用例:
    scene = Scene()
    assets = ClockAssets.from_names(
        hours_parent=scene.create_anchor("hours"),
        minutes_parent=scene.create_anchor("minutes"),
    )
    clock = AnalogClock(scene, assets, time_source=FixedTimeSource(parse_time_of_day("03:00:00")))
    clock.initialize()
    clock.update(3 * 3600 + 30)
"""

from __future__ import annotations

import logging

from engine.core.scene import Scene

from .assets import ClockAssets
from .errors import ClockAlreadyInitializedError, ClockNotInitializedError
from .face import FaceBuilder, FaceTicks
from .hands import ClockHands, HandAngles, HandsBuilder, apply_rotations, hand_angles
from .layout import ClockLayout
from .time_source import TimeOfDay, TimeSource, system_time_of_day, time_of_day_seconds

logger = logging.getLogger(__name__)


class AnalogClock:
    """アナログ時計コンポーネント（`Tickable`）。"""

    def __init__(
        self,
        scene: Scene,
        assets: ClockAssets,
        *,
        layout: ClockLayout | None = None,
        time_source: TimeSource | None = None,
    ) -> None:
        self.scene = scene
        self.assets = assets
        self.layout = layout if layout is not None else ClockLayout()
        self.time_source: TimeSource = time_source if time_source is not None else system_time_of_day
        self._face: FaceTicks | None = None
        self._hands: ClockHands | None = None
        self._angles: HandAngles | None = None

    # ---- 状態 ----
    @property
    def is_ready(self) -> bool:
        return self._hands is not None

    @property
    def face(self) -> FaceTicks:
        if self._face is None:
            raise ClockNotInitializedError("文字盤はまだ生成されていません（initialize() が必要）")
        return self._face

    @property
    def hands(self) -> ClockHands:
        if self._hands is None:
            raise ClockNotInitializedError("針はまだ生成されていません（initialize() が必要）")
        return self._hands

    @property
    def angles(self) -> HandAngles | None:
        """最後に適用した針角度（未初期化なら None）。"""
        return self._angles

    # ---- ライフサイクル ----
    def initialize(self, time_of_day: TimeOfDay | None = None) -> HandAngles:
        """文字盤と針を生成し、針を `time_of_day`（省略時は時刻ソース）の向きに合わせる。

        例外:
            MissingAssetError: prefab/アンカーのいずれかが欠けている（何も生成しない）。
            ClockAlreadyInitializedError: 既に初期化済み。

        生成の途中で失敗した場合は、それまでに生成したノードを破棄してから例外を再送出する
        （未初期化のまま残るので再試行できる）。
        """
        if self.is_ready:
            raise ClockAlreadyInitializedError("AnalogClock は既に初期化されています")
        self.assets.validate()
        seconds = self._resolve_time(time_of_day)

        existing = {id(n) for n in self.scene.iter_nodes()}
        try:
            face = FaceBuilder(self.layout).build(self.scene, self.assets)
            hands = HandsBuilder(self.layout).build(self.scene, self.assets, seconds)
        except Exception:
            self._discard_spawned(existing)
            raise
        self._face, self._hands = face, hands
        self._angles = hand_angles(seconds)
        logger.info(
            "clock initialized: %d hour ticks, %d minute ticks, 3 hands at t=%.3fs",
            len(self._face.hours),
            len(self._face.minutes),
            seconds,
        )
        return self._angles

    def update(self, time_of_day: TimeOfDay) -> HandAngles:
        """針 3 本の回転を `time_of_day` から再計算して適用する（冪等）。

        例外:
            ClockNotInitializedError: `initialize()` 前に呼ばれた。
        """
        if self._hands is None:
            raise ClockNotInitializedError("update() の前に initialize() を呼んでください")
        self._angles = apply_rotations(self._hands, time_of_day_seconds(time_of_day))
        return self._angles

    def tick(self, dt: float) -> None:
        self.update(self.time_source())

    def teardown(self) -> None:
        """生成したノードを破棄する（未初期化なら no-op）。アンカーは呼び出し側の所有物。"""
        if self._face is not None:
            for node in self._face.all():
                self.scene.destroy(node)
        if self._hands is not None:
            for node in self._hands:
                self.scene.destroy(node)
        self._face = None
        self._hands = None
        self._angles = None
        logger.debug("clock torn down")

    def _discard_spawned(self, existing: set[int]) -> None:
        spawned = [n for n in self.scene.iter_nodes() if id(n) not in existing]
        for node in spawned:
            self.scene.destroy(node)
        logger.warning("clock initialize failed; discarded %d partially spawned nodes", len(spawned))

    def _resolve_time(self, time_of_day: TimeOfDay | None) -> float:
        if time_of_day is None:
            return time_of_day_seconds(self.time_source())
        return time_of_day_seconds(time_of_day)


__all__ = ["AnalogClock"]
