"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Runner
    FPS: int | None = None

    # Scene
    DEBUG_SCENE: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `PXC_FPS` は 1 以上に丸める（未設定なら None のまま設定ファイルへ委譲）。
    """
    _settings.LOG_LEVEL = (env_str("PXC_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.FPS = env_int("PXC_FPS", None, min_value=1)
    _settings.DEBUG_SCENE = env_bool("PXC_DEBUG_SCENE", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
