"""
どこで: `engine.render` の高レベル描画。
何を: シーングラフのワールド形状を頂点/インデックスへ変換し、ModernGL に転送して線を描画。
なぜ: 毎フレームのアップロード/描画/リソース寿命を一箇所に集約し、描画処理を単純化するため。

視点:
- カメラは -Z 側から +Z 方向を向く。Z が小さいほど手前（秒針が最前面）。
- そのため画面の X はワールド X の反転になり、Z 軸正回転は時計回りに見える。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import moderngl as mgl
import numpy as np

from common.types import RGBA
from engine.core.geometry import Geometry
from engine.core.scene import Scene

from ..core.tickable import Tickable

PRIMITIVE_RESTART_INDEX = 0xFFFFFFFF

logger = logging.getLogger(__name__)


class LineRenderer(Tickable):
    """
    Scene から毎フレームのワールド形状を集め、GPU に送り込む作業を管理。
    """

    def __init__(
        self,
        mgl_context: Any,
        projection_matrix: np.ndarray,
        scene: Scene,
        line_color: RGBA = (0.0, 0.0, 0.0, 1.0),
    ):
        self.ctx = mgl_context
        self.scene = scene

        # 遅延 import（moderngl のない環境でも renderer モジュールの関数だけは使えるように）
        from .line_mesh import LineMesh
        from .shader import Shader

        self.line_program = Shader.create_shader(mgl_context)
        self.line_program["projection"].write(np.asarray(projection_matrix, dtype="f4").tobytes())
        self.set_line_color(line_color)

        self.gpu = LineMesh(
            ctx=mgl_context,
            program=self.line_program,
            primitive_restart_index=PRIMITIVE_RESTART_INDEX,
        )
        self._last_counts: tuple[int, int] = (0, 0)

    def tick(self, dt: float) -> None:
        """現在のシーン姿勢を GPU へ転送する（描画は `draw()`）。"""
        self._upload_geometry(self.scene.to_geometry())

    def draw(self) -> None:
        if self.gpu.index_count > 0:
            self.gpu.vao.render(mgl.LINE_STRIP, self.gpu.index_count)

    def set_line_color(self, rgba: Sequence[float]) -> None:
        r, g, b, a = (float(c) for c in rgba)
        self.line_program["color"].value = (r, g, b, a)

    def release(self) -> None:
        self.gpu.release()
        self.line_program.release()

    def get_last_counts(self) -> tuple[int, int]:
        """直近に転送した (頂点数, 線本数)。"""
        return self._last_counts

    def _upload_geometry(self, geometry: Geometry) -> None:
        if geometry.is_empty:
            self.gpu.index_count = 0
            self._last_counts = (0, 0)
            return
        vertices, indices = geometry_to_vertices_indices(geometry, PRIMITIVE_RESTART_INDEX)
        self.gpu.upload(vertices, indices)
        self._last_counts = (geometry.n_vertices, geometry.n_lines)


def geometry_to_vertices_indices(
    geometry: Geometry,
    primitive_restart_index: int,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Geometry を VBO/IBO 用の配列に変換する。
    各ポリラインの頂点 index を並べ、線の終端ごとに primitive restart を挟む。
    """
    coords = geometry.coords
    offsets = geometry.offsets

    num_lines = len(offsets) - 1
    total_verts = len(coords)
    total_inds = total_verts + num_lines

    indices = np.empty(total_inds, dtype=np.uint32)
    # 再始動位置（各ライン終端の直後）: offsets[1:] + 行番号
    restart_pos = offsets[1:].astype(np.int64) + np.arange(num_lines, dtype=np.int64)
    mask = np.zeros(total_inds, dtype=bool)
    mask[restart_pos] = True
    indices[~mask] = np.arange(total_verts, dtype=np.uint32)
    indices[mask] = np.uint32(primitive_restart_index)
    return coords, indices


def build_projection(half_extent: float, aspect: float = 1.0) -> np.ndarray:
    """文字盤中心を原点とする正射影行列（ModernGL 用の転置済み）を返す。

    - 短辺方向に `half_extent` ワールド単位が収まる。
    - 視点は -Z 側（X 反転）。Z は `[-half_extent, half_extent]` を NDC に写す。
    """
    if half_extent <= 0 or aspect <= 0:
        raise ValueError(f"half_extent/aspect は正である必要があります: {half_extent}, {aspect}")
    half_w = half_extent * max(1.0, aspect)
    half_h = half_extent * max(1.0, 1.0 / aspect)
    proj = np.array(
        [
            [-1.0 / half_w, 0, 0, 0],
            [0, 1.0 / half_h, 0, 0],
            [0, 0, 1.0 / half_extent, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


__all__ = ["LineRenderer", "geometry_to_vertices_indices", "build_projection", "PRIMITIVE_RESTART_INDEX"]
