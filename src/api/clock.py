"""
どこで: `api.clock`（実行ランナー）。
何を: 設定からアナログ時計を組み立てて初期化し、pyglet のフレームループで回転更新と描画を駆動する。
なぜ: 「初期化を完了してから更新ループを登録する」順序をランナー側で保証し、少ない記述で時計を表示するため。

実行フロー（概要）:
1) 設定解決: `util.utils.load_config()` を読み、FPS/ウィンドウサイズを確定。
2) 組み立て: `Scene` にアンカー 2 つを作り、`clock.assets` の shape 名から prefab を生成。
3) 初期化: `AnalogClock.initialize()`（欠落アセットはここで `MissingAssetError`）。
   `init_only=True` ならここで時計を返し、pyglet/ModernGL は import しない。
4) ウィンドウ/GL: `RenderWindow` と `LineRenderer` を生成。
5) フレーム駆動: `FrameClock([clock, renderer])` を `pyglet.clock.schedule_interval` に登録。
   `ESC` でウィンドウを閉じ、GL リソースを解放して時計を破棄する。

ロギング:
- `common.logging.setup_default_logging()` を 1 度だけ適用（既存ハンドラがあれば何もしない）。
"""

from __future__ import annotations

import logging
from typing import Any

from clockface import AnalogClock
from clockface.time_source import TimeOfDay, TimeSource
from common.logging import setup_default_logging
from util.utils import load_config

from .clock_runner.utils import build_clock, resolve_fps, resolve_window_size, view_half_extent

logger = logging.getLogger(__name__)


def run_clock(
    *,
    fps: int | None = None,
    window_size: int | tuple[int, int] | None = None,
    background: str | tuple[float, ...] | None = None,
    line_color: str | tuple[float, ...] | None = None,
    time_source: TimeSource | None = None,
    start_time: TimeOfDay | None = None,
    init_only: bool = False,
    config: dict[str, Any] | None = None,
) -> AnalogClock:
    """アナログ時計を表示する。

    Parameters
    ----------
    fps : int | None
        回転更新/描画レート。None で `PXC_FPS` → 設定 → 60 の順に解決。
    window_size : int | tuple[int, int] | None
        ウィンドウサイズ [px]。None で設定 `canvas.window_size`（既定 600x600）。
    background, line_color : str | tuple | None
        RGBA (0–1) または `#RRGGBB[AA]`。None で設定/自動。
    time_source : Callable[[], float] | None
        経過秒を返す時刻ソース。None でシステム時刻。
    start_time : TimeOfDay | None
        初期化時刻の明示指定（None なら `time_source` を読む）。
    init_only : bool, default False
        True で初期化まで行い、ウィンドウを作らずに時計を返す。
    config : dict | None
        設定辞書。None で `load_config()`。

    Returns
    -------
    AnalogClock
        初期化済みの時計（ループ終了後は破棄済み）。
    """
    setup_default_logging()
    cfg = config if config is not None else load_config()

    fps = resolve_fps(fps, cfg)
    window_width, window_height = resolve_window_size(window_size, cfg)

    clock = build_clock(cfg, time_source=time_source)
    clock.initialize(start_time)

    if init_only:
        return clock

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.render.renderer import build_projection

    from .clock_runner.render import create_window_and_renderer

    proj = build_projection(view_half_extent(clock.layout), window_width / window_height)
    rendering_window, _mgl_ctx, line_renderer, _bg, _line = create_window_and_renderer(
        window_width,
        window_height,
        scene=clock.scene,
        projection_matrix=proj,
        background=background,
        line_color=line_color,
        cfg=cfg,
    )
    rendering_window.add_draw_callback(line_renderer.draw)
    # 最初の on_draw までに初期姿勢を転送しておく
    line_renderer.tick(0.0)

    # 時計の回転更新 → GPU 転送の順
    frame_clock = FrameClock([clock, line_renderer])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)
    logger.info("running clock at %d fps (%dx%d)", fps, window_width, window_height)

    @rendering_window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            rendering_window.close()

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        pyglet.clock.unschedule(frame_clock.tick)
        line_renderer.release()
        setattr(on_close, "_closed", True)
        pyglet.app.exit()

    pyglet.app.run()
    logger.info("clock stopped after %d frames", frame_clock.frames)
    clock.teardown()
    return clock


__all__ = ["run_clock"]
