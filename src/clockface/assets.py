"""
どこで: `clockface.assets`。
何を: 時計が必要とする 5 種の prefab と 2 つの配置アンカーを束ねる `ClockAssets`。
なぜ: 外部設定で与えられる参照を 1 箇所で検証し、欠落を初期化前に `MissingAssetError` で知らせるため。

設定例（`clock.assets`）:

    clock:
      assets:
        hour_tick: hour_tick
        minute_tick: {shape: minute_tick, size: 0.08}
        hours_hand: hours_hand
        minutes_hand: minutes_hand
        seconds_hand: seconds_hand
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from engine.core.geometry import Geometry
from engine.core.scene import SceneNode
from shapes import build_shape

from .errors import MissingAssetError

PREFAB_FIELDS = ("hour_tick", "minute_tick", "hours_hand", "minutes_hand", "seconds_hand")
ANCHOR_FIELDS = ("hours_parent", "minutes_parent")

DEFAULT_PREFAB_NAMES: dict[str, str] = {name: name for name in PREFAB_FIELDS}


@dataclass
class ClockAssets:
    hour_tick: Geometry | None = None
    minute_tick: Geometry | None = None
    hours_hand: Geometry | None = None
    minutes_hand: Geometry | None = None
    seconds_hand: Geometry | None = None
    hours_parent: SceneNode | None = None
    minutes_parent: SceneNode | None = None

    def missing(self) -> list[str]:
        """未指定（None）または破棄済みアンカーのフィールド名。"""
        out: list[str] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                out.append(f.name)
            elif f.name in ANCHOR_FIELDS and not value.alive:
                out.append(f.name)
        return out

    def validate(self) -> None:
        """7 つの参照がすべて揃っていることを確認する。

        例外:
            MissingAssetError: 1 つでも欠けている場合（欠落名をすべて列挙）。
            TypeError: prefab が `Geometry` でない場合。
        """
        absent = self.missing()
        if absent:
            raise MissingAssetError(absent)
        for name in PREFAB_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, Geometry):
                raise TypeError(f"{name} は Geometry である必要があります: got {type(value)!r}")

    @classmethod
    def from_names(
        cls,
        names: Mapping[str, Any] | None = None,
        *,
        hours_parent: SceneNode | None = None,
        minutes_parent: SceneNode | None = None,
    ) -> "ClockAssets":
        """shape 名（または `{shape: 名前, **params}`）から prefab を生成する。

        - 指定のないフィールドは同名のビルトイン shape を使う。
        - 値に `None` を明示したフィールドは未指定のまま残す（検証で失敗する）。

        例外:
            MissingAssetError: shape 名が未登録の場合。
            ValueError: 指定形式が不正な場合。
        """
        merged: dict[str, Any] = dict(DEFAULT_PREFAB_NAMES)
        if names:
            unknown = sorted(set(names) - set(PREFAB_FIELDS))
            if unknown:
                raise ValueError(f"未知のアセット名です: {', '.join(unknown)}")
            merged.update(names)

        prefabs: dict[str, Geometry | None] = {}
        unresolved: list[str] = []
        for field_name in PREFAB_FIELDS:
            spec = merged[field_name]
            if spec is None:
                prefabs[field_name] = None
                continue
            shape_name, params = _split_spec(field_name, spec)
            try:
                prefabs[field_name] = build_shape(shape_name, **params)
            except KeyError:
                unresolved.append(f"{field_name}={shape_name!r}")
        if unresolved:
            raise MissingAssetError(unresolved, "未登録の shape")
        return cls(**prefabs, hours_parent=hours_parent, minutes_parent=minutes_parent)


def _split_spec(field_name: str, spec: Any) -> tuple[str, dict[str, Any]]:
    if isinstance(spec, str):
        return spec, {}
    if isinstance(spec, Mapping):
        params = dict(spec)
        shape_name = params.pop("shape", field_name)
        if not isinstance(shape_name, str):
            raise ValueError(f"{field_name}.shape は文字列である必要があります: {shape_name!r}")
        return shape_name, params
    raise ValueError(f"{field_name} の指定は shape 名か辞書である必要があります: {spec!r}")


__all__ = ["ClockAssets", "PREFAB_FIELDS", "ANCHOR_FIELDS", "DEFAULT_PREFAB_NAMES"]
