"""
どこで: `common.logging`
何を: ランナー/CLI が起動時に 1 度だけ呼ぶ `setup_default_logging()`。
なぜ: 各モジュールは `logging.getLogger(__name__)` だけを使い、出力先と書式の決定を入口に寄せるため。

- レベル未指定時は `PXC_LOG_LEVEL`（`common.settings`）に従う。
- アプリや pytest が既にルートへハンドラを付けていれば何もしない。
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)


__all__ = ["setup_default_logging", "LOG_FORMAT"]
