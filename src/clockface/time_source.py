"""
どこで: `clockface.time_source`。
何を: 各種の時刻表現を「深夜 0 時からの経過秒（小数）」へ正規化し、時刻ソース（システム/固定）を提供。
なぜ: 回転更新を `update(time_of_day)` の純関数として扱い、テストでは固定時刻を注入できるようにするため。

注意:
- タイムゾーンは扱わない。`datetime` はそのローカル表現の時・分・秒をそのまま使う。
- 値域は `[0, 86400)`。範囲外は `ValueError`。
"""

from __future__ import annotations

import re
from datetime import datetime, time, timedelta
from typing import Callable, Union

SECONDS_PER_DAY = 86_400.0

TimeOfDay = Union[datetime, time, timedelta, float, int]
TimeSource = Callable[[], float]

_HMS_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?\s*$")


def time_of_day_seconds(value: TimeOfDay) -> float:
    """時刻を深夜 0 時からの経過秒（小数、サブ秒精度）に変換する。

    Parameters
    ----------
    value : datetime | time | timedelta | float | int
        - `datetime`/`time`: 時・分・秒・マイクロ秒を使用。
        - `timedelta`: 0 時からの経過として扱う。
        - 数値: 秒として扱う。

    Raises
    ------
    TypeError
        未対応の型（`bool` を含む）。
    ValueError
        結果が `[0, 86400)` の外。
    """
    if isinstance(value, datetime):
        value = value.time()
    if isinstance(value, time):
        return (
            value.hour * 3600.0
            + value.minute * 60.0
            + value.second
            + value.microsecond / 1_000_000.0
        )
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = float(value)
    else:
        raise TypeError(f"時刻として解釈できない型です: {type(value)!r}")
    if not 0.0 <= seconds < SECONDS_PER_DAY:
        raise ValueError(f"時刻は [0, {SECONDS_PER_DAY:.0f}) 秒の範囲である必要があります: {seconds}")
    return seconds


def parse_time_of_day(text: str) -> float:
    """`"HH:MM"`, `"HH:MM:SS"`, `"HH:MM:SS.ffffff"` を経過秒に変換する（CLI 用）。"""
    m = _HMS_RE.match(text)
    if m is None:
        raise ValueError(f"時刻の書式が不正です（HH:MM[:SS[.ffffff]]）: {text!r}")
    hh, mm, ss, frac = m.groups()
    h, mi, s = int(hh), int(mm), int(ss or 0)
    if h > 23 or mi > 59 or s > 59:
        raise ValueError(f"時刻が範囲外です: {text!r}")
    micro = int((frac or "0").ljust(6, "0"))
    return time_of_day_seconds(time(h, mi, s, micro))


def system_time_of_day() -> float:
    """ホストの現在ローカル時刻（経過秒）。"""
    return time_of_day_seconds(datetime.now())


class FixedTimeSource:
    """明示的に進める時刻ソース（決定的な実行・テスト用）。"""

    def __init__(self, value: TimeOfDay = 0.0) -> None:
        self._seconds = time_of_day_seconds(value)

    def __call__(self) -> float:
        return self._seconds

    @property
    def seconds(self) -> float:
        return self._seconds

    def set(self, value: TimeOfDay) -> None:
        self._seconds = time_of_day_seconds(value)

    def advance(self, seconds: float) -> float:
        """`seconds` 進めて（1 日で折り返して）新しい値を返す。"""
        wrapped = (self._seconds + float(seconds)) % SECONDS_PER_DAY
        # 負のごく小さな値は丸めで SECONDS_PER_DAY ちょうどになる
        self._seconds = 0.0 if wrapped >= SECONDS_PER_DAY else wrapped
        return self._seconds


__all__ = [
    "SECONDS_PER_DAY",
    "TimeOfDay",
    "TimeSource",
    "time_of_day_seconds",
    "parse_time_of_day",
    "system_time_of_day",
    "FixedTimeSource",
]
