from __future__ import annotations

import numpy as np
import pytest

pytest.importorskip("moderngl")

from engine.core.geometry import Geometry  # noqa: E402
from engine.core.scene import Scene  # noqa: E402
from engine.render.line_mesh import LineMesh  # noqa: E402
from engine.render.renderer import PRIMITIVE_RESTART_INDEX, LineRenderer  # noqa: E402


class _DummyVAO:
    def __init__(self) -> None:
        self.render_calls: list[tuple[int, int]] = []
        self.released = False

    def render(self, mode: int, count: int) -> None:
        self.render_calls.append((mode, count))

    def release(self) -> None:
        self.released = True


class _DummyGpu:
    def __init__(self) -> None:
        self.index_count = 0
        self.upload_calls: list[tuple[np.ndarray, np.ndarray]] = []
        self.vao = _DummyVAO()

    def upload(self, verts: np.ndarray, inds: np.ndarray) -> None:
        self.index_count = int(len(inds))
        self.upload_calls.append((verts.copy(), inds.copy()))


def _make_renderer(scene: Scene) -> tuple[LineRenderer, _DummyGpu]:
    # __init__ を通さず、テストに必要な属性だけを手動で設定する
    renderer = LineRenderer.__new__(LineRenderer)
    renderer.scene = scene
    renderer._last_counts = (0, 0)
    dummy_gpu = _DummyGpu()
    renderer.gpu = dummy_gpu  # type: ignore[assignment]
    return renderer, dummy_gpu


def test_tick_uploads_current_scene(scene: Scene, geom_two_lines: Geometry) -> None:
    scene.instantiate(geom_two_lines)
    renderer, gpu = _make_renderer(scene)
    renderer.tick(0.016)
    assert len(gpu.upload_calls) == 1
    assert gpu.index_count == 7
    assert renderer.get_last_counts() == (5, 2)


def test_tick_with_empty_scene_skips_upload(scene: Scene) -> None:
    renderer, gpu = _make_renderer(scene)
    renderer.tick(0.016)
    assert gpu.upload_calls == []
    assert gpu.index_count == 0
    renderer.draw()
    assert gpu.vao.render_calls == []


def test_draw_renders_line_strip(scene: Scene, geom_line2: Geometry) -> None:
    import moderngl

    scene.instantiate(geom_line2)
    renderer, gpu = _make_renderer(scene)
    renderer.tick(0.0)
    renderer.draw()
    assert gpu.vao.render_calls == [(moderngl.LINE_STRIP, 3)]


def test_tick_reflects_hand_rotation(clock) -> None:  # noqa: ANN001
    clock.initialize(0.0)
    renderer, gpu = _make_renderer(clock.scene)
    renderer.tick(0.0)
    first = gpu.upload_calls[-1][0].copy()
    clock.update(15.0)
    renderer.tick(0.0)
    second = gpu.upload_calls[-1][0]
    # 目盛りは動かず、針の頂点だけが変わる
    assert first.shape == second.shape
    assert not np.allclose(first, second)
    n_ticks = sum(n.prefab.n_vertices for n in clock.face.all())
    np.testing.assert_allclose(first[:n_ticks], second[:n_ticks])


class _DummyBuffer:
    def __init__(self, size: int) -> None:
        self.size = size
        self.data = b""
        self.released = False

    def orphan(self) -> None:
        self.data = b""

    def write(self, data: bytes) -> None:
        self.data = data

    def release(self) -> None:
        self.released = True


class _DummyCtx:
    def __init__(self) -> None:
        self.buffers: list[_DummyBuffer] = []
        self.vaos: list[_DummyVAO] = []

    def buffer(self, reserve: int = 0, dynamic: bool = False) -> _DummyBuffer:
        buf = _DummyBuffer(reserve)
        self.buffers.append(buf)
        return buf

    def simple_vertex_array(self, program, vbo, attr, index_buffer=None):  # noqa: ANN001
        vao = _DummyVAO()
        self.vaos.append(vao)
        return vao


def test_line_mesh_grows_buffers_and_rebuilds_vao() -> None:
    ctx = _DummyCtx()
    mesh = LineMesh(ctx, program=None, initial_reserve=64)
    assert ctx.primitive_restart_index == PRIMITIVE_RESTART_INDEX  # type: ignore[attr-defined]
    small_v = np.zeros((2, 3), dtype=np.float32)  # 24 bytes
    small_i = np.array([0, 1, PRIMITIVE_RESTART_INDEX], dtype=np.uint32)
    mesh.upload(small_v, small_i)
    assert len(ctx.vaos) == 1
    assert mesh.index_count == 3

    big_v = np.zeros((100, 3), dtype=np.float32)
    big_i = np.arange(101, dtype=np.uint32)
    mesh.upload(big_v, big_i)
    assert len(ctx.vaos) == 2
    assert ctx.vaos[0].released
    assert mesh.vbo.size >= big_v.nbytes
    assert mesh.vbo.data == big_v.tobytes()

    mesh.release()
    assert mesh.vbo.released and mesh.ibo.released
