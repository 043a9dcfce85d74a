"""
どこで: `common` パッケージ。
何を: 型エイリアス・環境変数/設定・ロギング・レジストリ基底などの軽量ユーティリティ。
なぜ: 上位層（engine/shapes/clockface/api）から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
