"""
どこで: `common.base_registry`
何を: 名前 → オブジェクトの登録簿 `BaseRegistry`（キー正規化付き）。
なぜ: 設定ファイルに書かれた prefab 名（`hourTick` / `hour-tick` / `hour_tick`）を同じ登録に解決するため。
"""

import re
from typing import Any, Callable

_CAMEL_WORD = re.compile(r"(.)([A-Z][a-z]+)")
_CAMEL_TAIL = re.compile(r"([a-z0-9])([A-Z])")


class BaseRegistry:
    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """キーを snake_case に揃える（ハイフンは `_`、大文字を含めばキャメル分解）。

        例外:
            TypeError: 文字列でない。
            ValueError: 空文字。
        """
        if not isinstance(name, str):
            raise TypeError(f"レジストリキーは str である必要があります: {name!r}")
        key = name.strip().replace("-", "_")
        if not key:
            raise ValueError("レジストリキーは空であってはなりません")
        if key.lower() == key:
            return key
        return _CAMEL_TAIL.sub(r"\1_\2", _CAMEL_WORD.sub(r"\1_\2", key)).lower()

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """登録用デコレータを返す。`name` 省略時は `obj.__name__` を使う。

        同じキーへ別オブジェクトを登録すると ValueError（同一オブジェクトの再登録は許容）。
        """

        def decorator(obj: Any) -> Any:
            key = self.normalize_key(name or obj.__name__)
            current = self._registry.get(key)
            if current is not None and current is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        key = self.normalize_key(name)
        try:
            return self._registry[key]
        except KeyError:
            raise KeyError(f"'{name}' は登録されていません") from None

    def list_all(self) -> list[str]:
        return list(self._registry)

    def is_registered(self, name: str) -> bool:
        return self.normalize_key(name) in self._registry
