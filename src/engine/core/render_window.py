"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: リサイズ可能な Pyglet Window と、描画/リサイズコールバックの登録口を提供。
なぜ: レンダラやシーケンサから GUI 依存を切り離し、最小インターフェイスで結線するため。

使用例:
    win = RenderWindow(1280, 800, bg_color=(0.97, 0.95, 0.86, 1.0))
    win.add_draw_callback(renderer.present)
    win.add_resize_callback(loop.on_resize)
    pyglet.app.run()
"""

from __future__ import annotations

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
        caption: str = "hiddenline",
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（論理ピクセル）。
            height: ウィンドウ高さ（論理ピクセル）。
            bg_color: 背景色 RGBA（0.0〜1.0）。キャンバス提示前の塗りに使う。
        """
        # MSAA はオフスクリーンキャンバス側で行うため、既定フレームバッファは単一サンプル
        config = Config(double_buffer=True, vsync=True)
        super().__init__(
            width=width, height=height, caption=caption, resizable=True, config=config
        )
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._resize_callbacks: list[Callable[[int, int], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """`on_draw` 中に呼ぶ描画関数を登録する（登録順に呼ぶ）。"""
        self._draw_callbacks.append(func)

    def add_resize_callback(self, func: Callable[[int, int], None]) -> None:
        """`on_resize` で新しい論理サイズ (width, height) を受け取る関数を登録する。"""
        self._resize_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_resize(self, width: int, height: int):  # Pyglet 既定のイベント名
        # 既定処理（ビューポート更新）を先に行う
        super().on_resize(width, height)
        for cb in self._resize_callbacks:
            cb(int(width), int(height))

    def get_pixel_size(self) -> tuple[int, int]:
        """フレームバッファの実ピクセルサイズ（HiDPI では論理サイズより大きい）。"""
        w, h = self.get_framebuffer_size()
        return int(w), int(h)
