"""
どこで: `shapes.registry`
何を: prefab 生成関数（`Geometry` を返す関数）の登録簿と `@shape` デコレータ。
なぜ: `clock.assets` に書かれた名前から目盛り/針の形状を生成できるようにするため。

書き方:
    @shape                 # 関数名で登録
    @shape("long_tick")    # 明示名で登録
    @shape(name="dot")
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from common.base_registry import BaseRegistry
from engine.core.geometry import Geometry

ShapeFn = Callable[..., Geometry]

_shape_registry = BaseRegistry()


def _register(fn: Any, name: str | None) -> ShapeFn:
    if not inspect.isfunction(fn):
        raise TypeError(f"@shape は関数のみ登録可能です: got {fn!r}")
    return _shape_registry.register(name)(fn)


def shape(arg: Any | None = None, /, name: str | None = None):
    """prefab 生成関数を登録する（`@shape` / `@shape()` / `@shape("名前")`）。

    例外:
        TypeError: 関数以外を登録しようとした。
        ValueError: 同名で別の関数が登録済み。
    """
    if inspect.isfunction(arg) and name is None:
        return _register(arg, None)
    resolved = arg if isinstance(arg, str) else name
    return lambda fn: _register(fn, resolved)


def get_shape(name: str) -> ShapeFn:
    """登録済みの生成関数（未登録は KeyError）。"""
    return _shape_registry.get(name)


def build_shape(name: str, **params: Any) -> Geometry:
    """名前で prefab を生成する。

    例外:
        KeyError: 未登録の名前。
        TypeError: 生成関数が `Geometry` 以外を返した。
    """
    out = get_shape(name)(**params)
    if not isinstance(out, Geometry):
        raise TypeError(f"shape '{name}' は Geometry を返す必要があります: got {type(out)!r}")
    return out


def list_shapes() -> list[str]:
    return sorted(_shape_registry.list_all())


def is_shape_registered(name: str) -> bool:
    return _shape_registry.is_registered(name)


__all__ = [
    "shape",
    "get_shape",
    "build_shape",
    "list_shapes",
    "is_shape_registered",
]
