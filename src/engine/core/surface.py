"""
どこで: `engine.core.surface`。
何を: アニメーション中核が要求する描画面の最小インターフェース `DrawSurface`（消去/線分描画）。
なぜ: ストライプ/シーケンサを GPU・ウィンドウから切り離し、テストでは記録用ダミーを差し込めるようにするため。
"""

from __future__ import annotations

from typing import Protocol, Sequence


class DrawSurface(Protocol):
    """中心原点の 2D 描画面。描いた内容は `clear()` まで保持される（累積型）。"""

    def clear(self, color: Sequence[float]) -> None:
        """全面を `color`（RGBA 0–1）で塗りつぶす。"""

    def draw_segment(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: Sequence[float],
        thickness: float,
    ) -> None:
        """`start`→`end` の直線を `color`・太さ `thickness` で描く。"""


__all__ = ["DrawSurface"]
