"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 線分頂点用 VBO/VAO の確保・更新・解放を担当する LineMesh。
なぜ: GPU 転送の詳細をレンダラから切り離し、再確保と VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class LineMesh:
    """
    2D 頂点（float32 x2）を GPU へ送り、`LINES` で描画する。
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 1 ストライプ分の線分なら数 KB で足りる。超えたら自動拡張。
        initial_reserve: int = 64 * 1024,
    ):
        """
        ctx: ModernGL コンテキスト。
        program: `Shader.create_shader` のプログラム（入力属性 `in_vert`）。
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()
        self.vertex_count: int = 0

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(self.program, [(self.vbo, "2f", "in_vert")])

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, vbo_size: int) -> None:
        """データが大きくなったら VBO を再確保し、VAO を張り直す。"""
        if vbo_size <= self.vbo.size:
            return
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.initial_reserve), dynamic=True)
        self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """(N, 2) float32 の頂点列を GPU へ送る。2 頂点で 1 線分。"""
        verts = np.ascontiguousarray(vertices, dtype=np.float32).reshape(-1, 2)
        self._ensure_capacity(verts.nbytes)
        self.vbo.orphan()
        self.vbo.write(verts.tobytes())
        self.vertex_count = int(len(verts))

    def render(self, mode: int) -> None:
        if self.vertex_count > 0:
            self.vao.render(mode, vertices=self.vertex_count)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）。"""
        self.vbo.release()
        self.vao.release()
