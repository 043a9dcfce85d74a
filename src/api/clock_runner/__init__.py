"""
内部ヘルパ群（API 非公開）。

どこで: `api.clock_runner`
何を: `api.clock` の補助（設定解決の純粋関数/ウィンドウ・レンダラ初期化）を分離する。
なぜ: `run_clock` 本体を薄く保ち、設定解決をウィンドウなしでテストできるようにするため。
"""

from __future__ import annotations

__all__: list[str] = []
