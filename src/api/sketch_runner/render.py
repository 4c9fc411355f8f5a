"""
どこで: `api.sketch_runner.render`
何を: RenderWindow/ModernGL コンテキスト/CanvasRenderer の初期化。
なぜ: `api.sketch` を薄くし、GL 初期化の責務を分離するため。
"""

from __future__ import annotations

import moderngl

from stripes.constants import BACKGROUND_COLOR


def create_window_and_renderer(width: int, height: int, *, msaa_samples: int = 4):
    """ウィンドウ/ModernGL/CanvasRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, canvas_renderer)
    """
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import CanvasRenderer

    rendering_window = RenderWindow(width, height, bg_color=BACKGROUND_COLOR)  # type: ignore[abstract]

    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    canvas_renderer = CanvasRenderer(
        mgl_ctx,
        rendering_window.width,
        rendering_window.height,
        pixel_size=rendering_window.get_pixel_size(),
        samples=msaa_samples,
    )
    return rendering_window, mgl_ctx, canvas_renderer


__all__ = ["create_window_and_renderer"]
