from __future__ import annotations

import pytest

from clockface import ClockAssets, ClockLayout, MissingAssetError
from clockface.assets import PREFAB_FIELDS
from engine.core.geometry import Geometry
from engine.core.scene import Scene


def test_from_names_defaults_to_builtin_shapes(assets: ClockAssets) -> None:
    assert assets.missing() == []
    assets.validate()
    for name in PREFAB_FIELDS:
        assert isinstance(getattr(assets, name), Geometry)


def test_from_names_accepts_shape_params(scene: Scene) -> None:
    a = ClockAssets.from_names(
        {"minute_tick": {"shape": "minute_tick", "size": 0.2}, "hour_tick": "hour_tick"},
        hours_parent=scene.create_anchor("hours"),
        minutes_parent=scene.create_anchor("minutes"),
    )
    assert a.minute_tick is not None
    xs = a.minute_tick.coords[:, 0]
    assert float(xs.max() - xs.min()) == pytest.approx(0.2)


def test_from_names_unknown_shape_raises_missing_asset() -> None:
    with pytest.raises(MissingAssetError) as excinfo:
        ClockAssets.from_names({"seconds_hand": "no_such_shape"})
    assert "seconds_hand" in str(excinfo.value)


def test_from_names_unknown_field_raises() -> None:
    with pytest.raises(ValueError):
        ClockAssets.from_names({"alarm_hand": "seconds_hand"})


def test_from_names_explicit_none_stays_missing() -> None:
    a = ClockAssets.from_names({"hours_hand": None})
    assert "hours_hand" in a.missing()
    assert "hours_parent" in a.missing()


def test_from_names_bad_spec_type_raises() -> None:
    with pytest.raises(ValueError):
        ClockAssets.from_names({"hour_tick": 42})


def test_validate_rejects_non_geometry_prefab(assets: ClockAssets) -> None:
    assets.hour_tick = "hour_tick"  # type: ignore[assignment]
    with pytest.raises(TypeError):
        assets.validate()


def test_layout_defaults() -> None:
    lay = ClockLayout()
    assert lay.center == (0.0, 0.0, 0.0)
    assert (lay.hour_radius, lay.minute_radius) == (4.0, 4.5)
    assert lay.seconds_depth < lay.minutes_depth < lay.hours_depth
    assert lay.hand_position(lay.hours_depth) == (0.0, 0.0, 0.3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"hour_radius": 0.0},
        {"minute_radius": -1.0},
        {"seconds_depth": 0.5},
        {"minutes_depth": 0.3, "hours_depth": 0.3},
        {"center": (1.0,)},
    ],
)
def test_layout_validation(kwargs) -> None:  # noqa: ANN001
    with pytest.raises(ValueError):
        ClockLayout(**kwargs)


def test_layout_from_config_ignores_unknown_keys() -> None:
    lay = ClockLayout.from_config({"center": [1, 2], "hour_radius": 3, "color": "red"})
    assert lay.center == (1.0, 2.0, 0.0)
    assert lay.hour_radius == 3.0
    assert lay.minute_radius == 4.5
    assert ClockLayout.from_config(None) == ClockLayout()
