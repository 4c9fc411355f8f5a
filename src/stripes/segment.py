"""
どこで: `stripes.segment`。
何を: 1 本の線分（始点/終点/太さ/色/成長長）を表す不変データクラス。
なぜ: 生成時に一度だけ計算した値をアニメーション中に書き換えないことを型で保証するため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import RGBA

Point = tuple[float, float]


@dataclass(frozen=True)
class Segment:
    """ストライプを構成する線分。

    `growth_length` は同一ストライプ内の全線分で共通の値を持つ
    （傾斜線では実際の線分長ではなく基準長）。
    """

    start: Point
    end: Point
    thickness: float
    color: RGBA
    growth_length: float

    def point_at(self, ratio: float) -> Point:
        """始点から `ratio`（0..1）だけ進んだ位置を返す。"""
        sx, sy = self.start
        ex, ey = self.end
        return (sx + (ex - sx) * ratio, sy + (ey - sy) * ratio)

    @property
    def delta(self) -> Point:
        return (self.end[0] - self.start[0], self.end[1] - self.start[1])


__all__ = ["Segment", "Point"]
