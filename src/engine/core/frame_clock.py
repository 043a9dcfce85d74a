"""
どこで: `engine.core` のフレームドライバ。
何を: 時計コンポーネントとレンダラを登録順に `tick(dt)` する `FrameClock`。
なぜ: 「針の回転更新 → GPU 転送」の順序を 1 箇所で固定し、ループ側（pyglet）は 1 関数を登録するだけにするため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self.frames = 0

    def tick(self, dt: float | None = None) -> None:
        """1 フレーム進める。`dt` 省略時は前回呼び出しからの実時間を使う。"""
        now = time.perf_counter()
        if dt is None:
            dt = now - self._last_time
        self._last_time = now

        for t in self._tickables:
            t.tick(dt)
        self.frames += 1
