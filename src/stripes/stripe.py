"""
どこで: `stripes.stripe`。
何を: 共通の成長長/成長速度を持つ線分群 `Stripe` と、その 1 ステップ描画 `render_step`。
なぜ: 「描いてから伸ばす」成長アニメーションの状態を 1 オブジェクトに閉じ込め、完了判定を一元化するため。

描画面は累積型（フレーム間で消去しない）を前提とする。完了済みストライプを
再度 `render_step` しても比率 1 で全長を描き直すだけで、状態は変化しない。
"""

from __future__ import annotations

import math
from typing import Iterable

from engine.core.surface import DrawSurface

from .constants import GROWTH_RATE
from .segment import Segment


class Stripe:
    """同時に伸びる線分群。"""

    def __init__(self, segments: Iterable[Segment], growth_rate: float = GROWTH_RATE):
        self.segments: tuple[Segment, ...] = tuple(segments)
        if not self.segments:
            raise ValueError("Stripe requires at least one segment")
        if growth_rate <= 0:
            raise ValueError(f"growth_rate must be > 0, got {growth_rate}")
        self.growth_rate = float(growth_rate)
        # 全線分で共通（生成器が保証）
        self.growth_length = max(0.0, float(self.segments[0].growth_length))
        self.current_growth = 0.0

    @property
    def is_complete(self) -> bool:
        return self.current_growth >= self.growth_length

    @property
    def ratio(self) -> float:
        """現在の成長比率（0..1）。長さ 0 のストライプは常に 1。"""
        if self.growth_length <= 0.0:
            return 1.0
        return self.current_growth / self.growth_length

    def steps_to_complete(self) -> int:
        """新規状態から完了までに必要な `render_step` 回数。"""
        return int(math.ceil(self.growth_length / self.growth_rate))

    def render_step(self, surface: DrawSurface) -> None:
        """現在の比率で全線分を描き、成長を 1 ステップ進める。"""
        ratio = self.ratio
        for seg in self.segments:
            surface.draw_segment(seg.start, seg.point_at(ratio), seg.color, seg.thickness)

        if not self.is_complete:
            self.current_growth = min(self.current_growth + self.growth_rate, self.growth_length)

    def __len__(self) -> int:
        return len(self.segments)

    def __repr__(self) -> str:
        return (
            f"Stripe(segments={len(self.segments)}, growth={self.current_growth:.1f}/"
            f"{self.growth_length:.1f}, rate={self.growth_rate})"
        )


__all__ = ["Stripe"]
