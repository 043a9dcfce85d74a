"""
どこで: `common.env`
何を: `PXC_*` 環境変数を int/bool/str として読む小さなパーサ。
なぜ: 不正値や空文字を既定値へ落とす規則を 1 箇所にまとめ、`common.settings` からだけ使うため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off"})


def _raw(name: str) -> Optional[str]:
    """前後空白を除いた値。未設定/空文字は None。"""
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数として読む。解釈できなければ `default`、`min_value` 未満は下限に丸める。"""
    raw = _raw(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(value, min_value) if min_value is not None else value


def env_bool(name: str, default: bool = False) -> bool:
    """`0/1`（任意の整数）と `true/false/yes/no/on/off` を受理する。"""
    raw = _raw(name)
    if raw is None:
        return bool(default)
    lowered = raw.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    try:
        return int(lowered) != 0
    except ValueError:
        return bool(default)


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = _raw(name)
    return default if raw is None else raw


__all__ = ["env_int", "env_bool", "env_str"]
