"""
どこで: `api.__main__`（CLI 入口）。
何を: `python -m api` でアナログ時計を起動する。
なぜ: 設定ファイルを書かずに FPS/サイズ/固定時刻を試せるようにするため。

例:
    python -m api --fps 30 --size 800
    python -m api --at 03:00:00               # 03:00 で静止
    python -m api --init-only --at 10:10      # 初期化のみ（ヘッドレス確認）
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from clockface import ClockError, FixedTimeSource, parse_time_of_day
from common.logging import setup_default_logging

logger = logging.getLogger(__name__)


def _time_arg(text: str) -> float:
    try:
        return parse_time_of_day(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pyxiclock", description="Analog clock rendered with pyglet/ModernGL")
    p.add_argument("--fps", type=int, default=None, help="update/draw rate (default: config or 60)")
    p.add_argument("--size", type=int, default=None, help="square window size in px")
    p.add_argument("--background", default=None, help="background color, e.g. #FFFFFF")
    p.add_argument("--line-color", default=None, help="line color, e.g. #000000")
    p.add_argument("--at", type=_time_arg, default=None, metavar="HH:MM[:SS]", help="show a fixed time instead of the wall clock")
    p.add_argument("--init-only", action="store_true", help="initialize and exit without a window")
    p.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING (default: PXC_LOG_LEVEL)")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    from .clock import run_clock

    time_source = FixedTimeSource(args.at) if args.at is not None else None
    try:
        clock = run_clock(
            fps=args.fps,
            window_size=args.size,
            background=args.background,
            line_color=args.line_color,
            time_source=time_source,
            init_only=args.init_only,
        )
    except ClockError as e:
        logger.error("%s", e)
        return 2
    if args.init_only and clock.angles is not None:
        a = clock.angles
        print(f"hours={a.hours:.3f} minutes={a.minutes:.3f} seconds={a.seconds:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
