"""
どこで: `api.clock_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/ウィンドウサイズ/表示範囲の解決と、設定からのシーン・時計の組み立て。
なぜ: `api.clock` を薄く保ち、テスト容易性と再利用性を上げるため。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from clockface import AnalogClock, ClockAssets, ClockLayout
from clockface.time_source import TimeSource
from common import settings
from engine.core.scene import Scene
from util.utils import config_section

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60
DEFAULT_WINDOW_SIZE = (600, 600)
VIEW_MARGIN = 1.0


def resolve_fps(
    requested_fps: int | None, cfg: Mapping[str, Any] | None = None, *, default: int = DEFAULT_FPS
) -> int:
    """FPS を解決して 1 以上の int を返す。

    優先順: 明示指定 > `PXC_FPS` > 設定 `canvas_controller.fps` > 既定値。
    数値化できない/<=0 の値は既定へ落とす。
    """
    if requested_fps is not None:
        try:
            return max(1, int(requested_fps))
        except (TypeError, ValueError):
            logger.warning("invalid fps %r; falling back to %d", requested_fps, default)
            return max(1, int(default))
    env_fps = settings.get().FPS
    if env_fps is not None:
        return max(1, int(env_fps))
    ccfg = config_section(cfg, "canvas_controller")
    try:
        v = int(ccfg.get("fps", default))
    except (TypeError, ValueError):
        return max(1, int(default))
    return v if v > 0 else max(1, int(default))


def resolve_window_size(
    requested: int | tuple[int, int] | None, cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """ウィンドウサイズ [px] を解決する（int は正方形）。

    例外:
        ValueError: 非正の値や長さの合わない指定。
    """
    src: Any = requested
    if src is None:
        src = config_section(cfg, "canvas").get("window_size", DEFAULT_WINDOW_SIZE)
    if isinstance(src, (int, float)) and not isinstance(src, bool):
        w = h = int(src)
    else:
        try:
            w, h = int(src[0]), int(src[1])
        except (TypeError, ValueError, IndexError) as e:
            raise ValueError(f"invalid window_size: {src!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"window_size must be positive, got: {(w, h)}")
    return w, h


def view_half_extent(layout: ClockLayout, margin: float = VIEW_MARGIN) -> float:
    """文字盤全体が収まる表示半径（ワールド単位）。"""
    return max(layout.hour_radius, layout.minute_radius) + float(margin)


def build_clock(
    cfg: Mapping[str, Any] | None = None,
    *,
    time_source: TimeSource | None = None,
) -> AnalogClock:
    """設定 `clock.layout` / `clock.assets` からシーン・アンカー・アセットを組み立てる（未初期化）。"""
    scene = Scene()
    layout = ClockLayout.from_config(config_section(cfg, "clock", "layout"))
    hours_parent = scene.create_anchor("hours", layout.center)
    minutes_parent = scene.create_anchor("minutes", layout.center)
    assets = ClockAssets.from_names(
        config_section(cfg, "clock", "assets"),
        hours_parent=hours_parent,
        minutes_parent=minutes_parent,
    )
    return AnalogClock(scene, assets, layout=layout, time_source=time_source)


__all__ = [
    "DEFAULT_FPS",
    "DEFAULT_WINDOW_SIZE",
    "resolve_fps",
    "resolve_window_size",
    "view_half_extent",
    "build_clock",
]
