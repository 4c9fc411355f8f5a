"""
どこで: `stripes.generator`。
何を: 小ストライプ（平行線グループ）と隠し線ストライプの幾何を乱数から生成し、`Stripe` に包んで返す。
なぜ: 構図の全ランダム性をここへ集約し、`numpy.random.Generator` を注入してシード固定の検証を可能にするため。

座標系:
- 原点はキャンバス中心。x ∈ [-W/2, W/2], y ∈ [-H/2, H/2]。
- 長さ/間隔/太さは `scale_factor` 倍（成長速度は非スケール）。
"""

from __future__ import annotations

import math

import numpy as np

from .constants import (
    BACKGROUND_COLOR,
    GROUP_COUNT_RANGE,
    GROUP_LENGTH_RANGE,
    GROUP_SPACING_RANGE,
    GROWTH_RATE,
    HIDDEN_ANGLE_RANGE_DEG,
    HIDDEN_THICKNESS_RANGE,
    HORIZONTAL_PROBABILITY,
    INK_COLOR,
    INK_PROBABILITY,
    REFERENCE_SIZE,
    STROKE_WEIGHTS,
    TILT_ANGLE_DEG,
    TILT_PROBABILITY,
)
from .segment import Segment
from .stripe import Stripe

Extent = tuple[float, float]

_TILT_SLOPE = math.tan(math.radians(TILT_ANGLE_DEG))


def compute_scale_factor(width: float, height: float) -> float:
    """描画領域の平均辺長を基準サイズで割った倍率を返す。

    負の寸法は 0 に丸める（縮退ウィンドウでも例外にしない）。
    """
    w = max(0.0, float(width))
    h = max(0.0, float(height))
    return (w + h) / 2.0 / REFERENCE_SIZE


def _sign(rng: np.random.Generator) -> float:
    return 1.0 if rng.random() > 0.5 else -1.0


def _group_direction(rng: np.random.Generator, length: float) -> tuple[float, float]:
    """基準線分の (dx, dy) を返す。傾斜は水平から 30°、軸方向は水平/垂直。"""
    sign_x = _sign(rng)
    sign_y = _sign(rng)
    if rng.random() < TILT_PROBABILITY:
        return length * sign_x, length * _TILT_SLOPE * sign_y
    if rng.random() < HORIZONTAL_PROBABILITY:
        return length * sign_x, 0.0
    return 0.0, length * sign_y


def generate_group(
    extent: Extent, scale_factor: float, rng: np.random.Generator
) -> Stripe:
    """平行線グループのストライプを生成する。

    Parameters
    ----------
    extent : tuple[float, float]
        描画領域 (width, height)。
    scale_factor : float
        `compute_scale_factor` の値。
    rng : numpy.random.Generator
        乱数源。

    Returns
    -------
    Stripe
        10〜29 本の平行線。全線分が同色・同じ成長長。
    """
    width, height = float(extent[0]), float(extent[1])

    color = INK_COLOR if rng.random() < INK_PROBABILITY else BACKGROUND_COLOR

    x1 = float(rng.uniform(-width / 2.0, width / 2.0))
    y1 = float(rng.uniform(-height / 2.0, height / 2.0))

    length = float(rng.uniform(*GROUP_LENGTH_RANGE)) * scale_factor
    dx, dy = _group_direction(rng, length)

    count = int(rng.integers(GROUP_COUNT_RANGE[0], GROUP_COUNT_RANGE[1]))
    spacing = float(rng.uniform(*GROUP_SPACING_RANGE)) * scale_factor

    # 水平寄りなら y、垂直寄り（または長さ 0）なら x 方向にずらす
    offsets = np.arange(count, dtype=np.float64) * spacing
    shift_y = abs(dx) > abs(dy)
    weights = rng.choice(np.asarray(STROKE_WEIGHTS, dtype=np.float64), size=count) * scale_factor

    segments = []
    for offset, weight in zip(offsets.tolist(), weights.tolist()):
        ox, oy = (0.0, offset) if shift_y else (offset, 0.0)
        segments.append(
            Segment(
                start=(x1 + ox, y1 + oy),
                end=(x1 + dx + ox, y1 + dy + oy),
                thickness=float(weight),
                color=color,
                growth_length=length,
            )
        )
    return Stripe(segments, growth_rate=GROWTH_RATE)


def generate_hidden_line(
    extent: Extent, scale_factor: float, rng: np.random.Generator
) -> Stripe:
    """キャンバスを縦断する太い背景色の 1 本線（消去用）を生成する。

    角度は ±45° の一様乱数。端点は y=±H/2、x=∓H·tan(角度)。
    """
    height = float(extent[1])

    angle = math.radians(float(rng.uniform(*HIDDEN_ANGLE_RANGE_DEG)))
    shift = height * math.tan(angle)
    start = (-shift, -height / 2.0)
    end = (shift, height / 2.0)

    thickness = float(rng.uniform(*HIDDEN_THICKNESS_RANGE)) * scale_factor
    length = math.hypot(end[0] - start[0], end[1] - start[1])

    segment = Segment(
        start=start,
        end=end,
        thickness=thickness,
        color=BACKGROUND_COLOR,
        growth_length=length,
    )
    return Stripe([segment], growth_rate=GROWTH_RATE)


__all__ = ["Extent", "compute_scale_factor", "generate_group", "generate_hidden_line"]
