"""
どこで: `engine.core` のウィンドウ層（pyglet）。
何を: 背景クリア → 登録済み描画関数の呼び出しだけを行う時計用ウィンドウ `RenderWindow`。
なぜ: Renderer や時計コンポーネントを pyglet のイベントモデルから切り離すため。

MSAA 付きの GL 設定が得られない環境では、既定設定で開き直す。
"""

import logging
from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor

logger = logging.getLogger(__name__)

DrawCallback = Callable[[], None]


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
        caption: str = "Pyxiclock",
    ):
        # 細い線のジャギーを抑えるため 4x MSAA を優先
        msaa = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        try:
            super().__init__(width=width, height=height, caption=caption, config=msaa)
        except pyglet.window.NoSuchConfigException:
            logger.warning("MSAA config unavailable; falling back to the default GL config")
            super().__init__(width=width, height=height, caption=caption)
        self.bg_color = bg_color
        self._draw_callbacks: list[DrawCallback] = []

    def add_draw_callback(self, func: DrawCallback) -> None:
        """`on_draw` で登録順に呼ぶ描画関数を追加する。"""
        self._draw_callbacks.append(func)

    def on_draw(self):
        glClearColor(*self.bg_color)
        self.clear()
        for draw in self._draw_callbacks:
            draw()
