from __future__ import annotations

import logging

import numpy as np
import pytest

from common import settings
from engine.core.geometry import Geometry
from engine.core.quaternion import Quaternion
from engine.core.scene import Scene


def test_create_anchor_and_instantiate_under_parent(scene: Scene, geom_line2: Geometry) -> None:
    anchor = scene.create_anchor("group")
    node = scene.instantiate(geom_line2, (1.0, 0.0, 0.0), parent=anchor, name="obj")
    assert anchor.is_anchor
    assert not node.is_anchor
    assert node.parent is anchor
    assert anchor.children == [node]
    assert scene.find("obj") is node
    assert len(scene) == 2


def test_instantiate_defaults_to_root_and_identity(scene: Scene, geom_line2: Geometry) -> None:
    node = scene.instantiate(geom_line2)
    assert node.parent is scene.root
    assert node.rotation.is_identity
    assert node.position == (0.0, 0.0, 0.0)


def test_instantiate_rejects_non_geometry(scene: Scene) -> None:
    with pytest.raises(TypeError):
        scene.instantiate([[0.0, 0.0, 0.0]])  # type: ignore[arg-type]


def test_world_geometry_rotates_then_translates(scene: Scene, geom_line2: Geometry) -> None:
    node = scene.instantiate(geom_line2, (0.0, 0.0, 0.5), Quaternion.from_euler_z(90.0))
    world = node.world_geometry()
    np.testing.assert_allclose(world.coords, [[0.0, 0.0, 0.5], [0.0, 1.0, 0.5]], atol=1e-6)
    # prefab は共有・不変
    np.testing.assert_allclose(geom_line2.coords[1], [1.0, 0.0, 0.0])


def test_parent_pose_is_not_composed(scene: Scene, geom_line2: Geometry) -> None:
    anchor = scene.create_anchor("offset", (10.0, 0.0, 0.0))
    node = scene.instantiate(geom_line2, (0.0, 0.0, 0.0), parent=anchor)
    np.testing.assert_allclose(node.world_geometry().coords[0], [0.0, 0.0, 0.0])


def test_destroy_removes_subtree(scene: Scene, geom_line2: Geometry) -> None:
    anchor = scene.create_anchor("group")
    a = scene.instantiate(geom_line2, parent=anchor)
    b = scene.instantiate(geom_line2, parent=anchor)
    scene.destroy(anchor)
    assert not anchor.alive and not a.alive and not b.alive
    assert len(scene) == 0
    # 二重破棄は no-op
    scene.destroy(anchor)


def test_destroy_root_raises(scene: Scene) -> None:
    with pytest.raises(ValueError):
        scene.destroy(scene.root)


def test_instantiate_under_destroyed_parent_raises(scene: Scene, geom_line2: Geometry) -> None:
    anchor = scene.create_anchor("gone")
    scene.destroy(anchor)
    with pytest.raises(ValueError):
        scene.instantiate(geom_line2, parent=anchor)


def test_to_geometry_concatenates_all_nodes(scene: Scene, geom_line2: Geometry, geom_two_lines: Geometry) -> None:
    anchor = scene.create_anchor("group")
    scene.instantiate(geom_line2, parent=anchor)
    scene.instantiate(geom_two_lines, (0.0, 0.0, 1.0))
    g = scene.to_geometry()
    assert g.n_lines == 3
    assert g.n_vertices == 7


def test_clear_keeps_root(scene: Scene, geom_line2: Geometry) -> None:
    scene.instantiate(geom_line2)
    scene.create_anchor("a")
    scene.clear()
    assert len(scene) == 0
    assert scene.root.alive
    assert scene.to_geometry().is_empty


def test_debug_scene_logs_instantiation(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, geom_line2: Geometry
) -> None:
    monkeypatch.setenv("PXC_DEBUG_SCENE", "1")
    settings.reload_from_env()
    try:
        sc = Scene()
        with caplog.at_level(logging.DEBUG, logger="engine.core.scene"):
            sc.instantiate(geom_line2, name="probe")
        assert any("probe" in r.getMessage() for r in caplog.records)
    finally:
        monkeypatch.delenv("PXC_DEBUG_SCENE", raising=False)
        settings.reload_from_env()
