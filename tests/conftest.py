"""共通フィクスチャ。

- 乱数シード固定
- 小さな Geometry 試料
- アンカー付きのシーンと、既定アセットで組み立てた時計
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from clockface import AnalogClock, ClockAssets, FixedTimeSource
from common import settings
from engine.core.geometry import Geometry
from engine.core.scene import Scene


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def geom_empty() -> Geometry:
    return Geometry.from_lines([])


@pytest.fixture()
def geom_line2() -> Geometry:
    pts = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], dtype=np.float32)
    return Geometry.from_lines([pts])


@pytest.fixture()
def geom_two_lines() -> Geometry:
    a = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], dtype=np.float32)
    b = np.array([[0.0, 1.0, 0.0], [1.0, 1.0, 0.0], [2.0, 1.0, 0.0]], dtype=np.float32)
    return Geometry.from_lines([a, b])


@pytest.fixture()
def scene() -> Scene:
    return Scene()


@pytest.fixture()
def assets(scene: Scene) -> ClockAssets:
    """ビルトイン shape とアンカー 2 つを揃えた検証済み前提のアセット。"""
    return ClockAssets.from_names(
        hours_parent=scene.create_anchor("hours"),
        minutes_parent=scene.create_anchor("minutes"),
    )


@pytest.fixture()
def fixed_time() -> FixedTimeSource:
    return FixedTimeSource(0.0)


@pytest.fixture()
def clock(scene: Scene, assets: ClockAssets, fixed_time: FixedTimeSource) -> AnalogClock:
    """未初期化の時計（時刻は `fixed_time` から読む）。"""
    return AnalogClock(scene, assets, time_source=fixed_time)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`PXC_*` を消した状態で設定を読み直し、終了時にも読み直す。"""
    for name in ("PXC_LOG_LEVEL", "PXC_FPS", "PXC_DEBUG_SCENE"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
