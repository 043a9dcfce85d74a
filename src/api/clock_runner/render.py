"""
どこで: `api.clock_runner.render`
何を: RenderWindow/ModernGL/LineRenderer の初期化と背景/線色の決定。
なぜ: `api.clock` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import moderngl

from engine.core.scene import Scene
from util.color import contrasting_line_color, normalize_color
from util.utils import config_section

logger = logging.getLogger(__name__)


def _resolve_color(value: Any, fallback: Any, label: str) -> tuple[float, float, float, float]:
    try:
        return normalize_color(value)
    except ValueError as e:
        logger.warning("invalid %s %r (%s); using %r", label, value, e, fallback)
        return normalize_color(fallback)


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    scene: Scene,
    projection_matrix,
    background: Any = None,
    line_color: Any = None,
    cfg: Mapping[str, Any] | None = None,
):
    """ウィンドウ/ModernGL/LineRenderer を生成し、色を決定して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, line_renderer, bg_rgba, line_rgba)
    """
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import LineRenderer

    canvas_cfg = config_section(cfg, "canvas")

    # 背景色の決定（指定 → 設定 → 白）
    bg_src = background if background is not None else canvas_cfg.get("background_color")
    bg_rgba = _resolve_color(bg_src if bg_src is not None else (1.0, 1.0, 1.0, 1.0), "#FFFFFF", "background")
    rendering_window = RenderWindow(window_width, window_height, bg_color=bg_rgba)  # type: ignore[abstract]

    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    # 線色の決定（指定 → 設定 → 背景輝度から自動）
    lc_src = line_color if line_color is not None else canvas_cfg.get("line_color")
    auto = contrasting_line_color(bg_rgba)
    line_rgba = _resolve_color(lc_src, auto, "line_color") if lc_src is not None else auto

    line_renderer = LineRenderer(
        mgl_context=mgl_ctx,
        projection_matrix=projection_matrix,
        scene=scene,
        line_color=line_rgba,
    )
    return rendering_window, mgl_ctx, line_renderer, bg_rgba, line_rgba


__all__ = ["create_window_and_renderer"]
