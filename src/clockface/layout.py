"""
どこで: `clockface.layout`。
何を: 文字盤の幾何定数（中心・目盛り半径・針の奥行きオフセット）を保持する `ClockLayout`。
なぜ: 定数を 1 箇所にまとめ、設定ファイル（`clock.layout`）から上書きできるようにするため。

奥行き:
- 視点は -Z 側にあり、Z が小さいほど手前。秒針 → 分針 → 時針 の順に奥へ置き、重なりを避ける。
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from common.types import Vec3, as_vec3


@dataclass(frozen=True)
class ClockLayout:
    center: Vec3 = (0.0, 0.0, 0.0)
    hour_radius: float = 4.0
    minute_radius: float = 4.5
    seconds_depth: float = 0.1
    minutes_depth: float = 0.2
    hours_depth: float = 0.3

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_vec3(self.center))
        if self.hour_radius <= 0 or self.minute_radius <= 0:
            raise ValueError(
                f"目盛り半径は正である必要があります: hour={self.hour_radius}, minute={self.minute_radius}"
            )
        if not self.seconds_depth < self.minutes_depth < self.hours_depth:
            raise ValueError(
                "針の奥行きは seconds < minutes < hours である必要があります: "
                f"{self.seconds_depth}, {self.minutes_depth}, {self.hours_depth}"
            )

    @classmethod
    def from_config(cls, section: Mapping[str, Any] | None) -> "ClockLayout":
        """`clock.layout` セクションから生成する（未知キーは無視、欠落キーは既定値）。"""
        if not section:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in section.items():
            if key not in known:
                continue
            kwargs[key] = as_vec3(value) if key == "center" else float(value)
        return cls(**kwargs)

    def hand_position(self, depth: float) -> Vec3:
        """中心から奥行き `depth` だけずらした針の位置。"""
        cx, cy, cz = self.center
        return (cx, cy, cz + depth)


__all__ = ["ClockLayout"]
