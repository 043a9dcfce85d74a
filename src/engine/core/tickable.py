"""
どこで: `engine.core`。
何を: `FrameClock` が毎フレーム呼ぶ `tick(dt)` の型（Protocol）。
なぜ: `AnalogClock` と `LineRenderer` が共通の基底クラスを持たずに同じループへ載れるようにするため。
"""

from typing import Protocol


class Tickable(Protocol):
    def tick(self, dt: float) -> None:
        """前回から `dt` 秒後の状態に更新する（時計は `dt` を使わず時刻ソースを読む）。"""
