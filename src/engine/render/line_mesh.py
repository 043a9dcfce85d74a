"""
どこで: `engine.render` の GPU バッファ層。
何を: 時計 1 面ぶんの頂点（VBO）とインデックス（IBO）を保持し、毎フレーム書き換える `LineMesh`。
なぜ: 針の回転でフレーム毎に頂点が変わるため、バッファの再確保を容量超過時だけに抑えたいから。

メモ:
- 目盛り 60 本 + 針 3 本は数百頂点なので、既定の予約量で再確保は起きない。
- prefab を大きく差し替えた場合のみ `_ensure_capacity` が VBO/IBO と VAO を作り直す。
"""

from __future__ import annotations

from typing import Any

import numpy as np

DEFAULT_RESERVE_BYTES = 64 * 1024


class LineMesh:
    """LINE_STRIP + primitive restart で描くための VBO/IBO/VAO 一式。"""

    def __init__(
        self,
        ctx: Any,
        program: Any,
        initial_reserve: int = DEFAULT_RESERVE_BYTES,
        primitive_restart_index: int = 0xFFFFFFFF,
    ):
        self.ctx = ctx
        self.program = program
        self.initial_reserve = int(initial_reserve)
        self.primitive_restart_index = primitive_restart_index

        self.vbo = ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.ibo = ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.vao = self._build_vao()
        self.index_count = 0

        ctx.primitive_restart = True  # type: ignore[attr-defined]
        ctx.primitive_restart_index = primitive_restart_index  # type: ignore[attr-defined]

    def _build_vao(self) -> Any:
        return self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert", index_buffer=self.ibo)

    def _regrow(self, buf: Any, needed: int) -> Any:
        buf.release()
        return self.ctx.buffer(reserve=max(needed, self.initial_reserve), dynamic=True)

    def _ensure_capacity(self, vbo_bytes: int, ibo_bytes: int) -> None:
        grown = False
        if vbo_bytes > self.vbo.size:
            self.vbo = self._regrow(self.vbo, vbo_bytes)
            grown = True
        if ibo_bytes > self.ibo.size:
            self.ibo = self._regrow(self.ibo, ibo_bytes)
            grown = True
        if grown:
            # 古い VAO は差し替え前のバッファを参照している
            self.vao.release()
            self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray, indices: np.ndarray) -> None:
        """頂点 (N,3) float32 とインデックス uint32 を書き込む。"""
        self._ensure_capacity(vertices.nbytes, indices.nbytes)
        for buf, data in ((self.vbo, vertices), (self.ibo, indices)):
            buf.orphan()
            buf.write(data.tobytes())
        self.index_count = int(len(indices))

    def release(self) -> None:
        for res in (self.vao, self.vbo, self.ibo):
            res.release()


__all__ = ["LineMesh", "DEFAULT_RESERVE_BYTES"]
