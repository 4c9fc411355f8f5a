"""
どこで: `engine.render` の高レベル描画。
何を: フレーム間で内容を保持するオフスクリーンキャンバス（FBO）へ線分を描き、毎フレーム画面へ転送する `CanvasRenderer`。
なぜ: ダブルバッファのウィンドウは前フレームを保持しないため、累積描画を前提とするアニメーションには保持型キャンバスが必要。

座標系は中心原点・y 下向き・論理ピクセル単位。`DrawSurface` Protocol を満たす。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import moderngl as mgl
import numpy as np

from util.color import normalize_color

from .line_mesh import LineMesh
from .shader import Shader

logger = logging.getLogger(__name__)


def build_centered_projection(width: float, height: float) -> np.ndarray:
    """中心原点・y 下向きの論理ピクセル座標を NDC へ写す正射影（ModernGL 用に転置済み）。

    幅/高さが 0 の縮退時はゼロ除算を避けるため 1 として扱う。
    """
    w = float(width) if width > 0 else 1.0
    h = float(height) if height > 0 else 1.0
    proj = np.array(
        [
            [2 / w, 0, 0, 0],
            [0, -2 / h, 0, 0],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


class CanvasRenderer:
    """
    保持型キャンバスへの線分描画と画面への提示を管理。
    `clear()` を呼ぶまで描いた内容は残り続ける。
    """

    def __init__(
        self,
        mgl_context: Any,
        width: int,
        height: int,
        *,
        pixel_size: tuple[int, int] | None = None,
        samples: int = 4,
    ):
        """
        mgl_context: ウィンドウに紐づく ModernGL コンテキスト。
        width/height: 論理ピクセルサイズ（座標系と線幅の基準）。
        pixel_size: FBO の実ピクセルサイズ（HiDPI 用）。None なら論理サイズ。
        samples: キャンバスの MSAA サンプル数（コンテキスト上限に丸める）。
        """
        self.ctx = mgl_context
        self.program = Shader.create_shader(mgl_context)
        self.gpu = LineMesh(ctx=mgl_context, program=self.program)
        self._samples = max(0, min(int(samples), int(getattr(mgl_context, "max_samples", 0))))
        self._fbo: Any = None
        self._attachment: Any = None
        self.size: tuple[int, int] = (0, 0)
        self.segments_drawn: int = 0
        self.resize(width, height, pixel_size)

    # --------------------------------------------------------------------- #
    # キャンバス                                                            #
    # --------------------------------------------------------------------- #
    def resize(self, width: int, height: int, pixel_size: tuple[int, int] | None = None) -> None:
        """論理サイズを更新し、キャンバス FBO を作り直す（内容は破棄される）。"""
        self.size = (int(width), int(height))
        pw, ph = pixel_size if pixel_size is not None else self.size
        pw, ph = max(1, int(pw)), max(1, int(ph))

        self._release_canvas()
        if self._samples > 0:
            self._attachment = self.ctx.renderbuffer((pw, ph), components=4, samples=self._samples)
        else:
            self._attachment = self.ctx.texture((pw, ph), 4)
        self._fbo = self.ctx.framebuffer(color_attachments=[self._attachment])

        self.program["projection"].write(build_centered_projection(*self.size).tobytes())
        self.program["viewport"].value = (float(max(1, self.size[0])), float(max(1, self.size[1])))
        logger.debug(
            "canvas resized: logical=%dx%d pixels=%dx%d samples=%d",
            self.size[0],
            self.size[1],
            pw,
            ph,
            self._samples,
        )

    def clear(self, color: Sequence[float]) -> None:
        """キャンバス全面を指定色で塗りつぶす。"""
        r, g, b, a = normalize_color(tuple(color))
        self._fbo.use()
        self._fbo.clear(r, g, b, a)

    def draw_segment(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: Sequence[float],
        thickness: float,
    ) -> None:
        """キャンバスへ 1 本の線分を描く。長さ 0 や太さ 0 の線分は描かない。"""
        if thickness <= 0.0 or (start[0] == end[0] and start[1] == end[1]):
            return
        self._fbo.use()
        self.program["color"].value = normalize_color(tuple(color))
        self.program["line_thickness"].value = float(thickness)
        self.gpu.upload(np.array([start, end], dtype=np.float32))
        self.gpu.render(mgl.LINES)
        self.segments_drawn += 1

    def present(self) -> None:
        """キャンバスをウィンドウの既定フレームバッファへ転送する（MSAA はここで解決）。"""
        self.ctx.copy_framebuffer(self.ctx.screen, self._fbo)

    # --------------------------------------------------------------------- #
    # 後始末                                                                #
    # --------------------------------------------------------------------- #
    def _release_canvas(self) -> None:
        if self._fbo is not None:
            self._fbo.release()
            self._fbo = None
        if self._attachment is not None:
            self._attachment.release()
            self._attachment = None

    def release(self) -> None:
        """GPU リソースを解放。"""
        self._release_canvas()
        self.gpu.release()
        self.program.release()


__all__ = ["CanvasRenderer", "build_centered_projection"]
