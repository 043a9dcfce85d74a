"""
どこで: `clockface.errors`。
何を: 時計コンポーネントの例外階層。
なぜ: 資産の欠落や初期化順序の誤りを、描画ループに入る前に明示的に失敗させるため。
"""

from __future__ import annotations


class ClockError(Exception):
    """時計コンポーネントの基底例外。"""


class MissingAssetError(ClockError, KeyError):
    """必須の prefab/アンカーが未指定、または名前解決できない。"""

    def __init__(self, missing: list[str] | tuple[str, ...], detail: str | None = None) -> None:
        self.missing = tuple(missing)
        msg = f"必須アセットがありません: {', '.join(self.missing)}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError は repr を返すため、メッセージをそのまま出す
        return str(self.args[0]) if self.args else ""


class ClockNotInitializedError(ClockError, RuntimeError):
    """`initialize()` 前に回転更新が呼ばれた。"""


class ClockAlreadyInitializedError(ClockError, RuntimeError):
    """`initialize()` が 2 回呼ばれた（`teardown()` を挟めば再初期化可能）。"""


__all__ = [
    "ClockError",
    "MissingAssetError",
    "ClockNotInitializedError",
    "ClockAlreadyInitializedError",
]
