"""
どこで: `stripes.constants`。
何を: ストライプ生成/アニメーションの固定定数（色・寸法レンジ・確率・速度）。
なぜ: 構図の性質を決める値を一箇所に集め、生成器とシーケンサで共有するため。

寸法は基準キャンバス 800 単位に対する値で、`scale_factor` を掛けて使う（成長速度のみ非スケール）。
"""

from __future__ import annotations

from util.color import normalize_color

RGBA = tuple[float, float, float, float]

# 基準キャンバス（scale_factor = 平均辺長 / REFERENCE_SIZE）
REFERENCE_SIZE: float = 800.0

# 色（0–255 指定を RGBA 0–1 へ正規化）
BACKGROUND_COLOR: RGBA = normalize_color((247, 241, 219))
INK_COLOR: RGBA = normalize_color((0, 0, 0))

# シーケンス
NUM_GROUPS: int = 80
HIDDEN_LINE_POSITION: float = 0.7  # 全グループ数に対する挿入位置の比率

# グループ（小ストライプ）
INK_PROBABILITY: float = 0.6
TILT_PROBABILITY: float = 0.5
HORIZONTAL_PROBABILITY: float = 0.5
TILT_ANGLE_DEG: float = 30.0
GROUP_LENGTH_RANGE: tuple[float, float] = (80.0, 200.0)
GROUP_COUNT_RANGE: tuple[int, int] = (10, 30)  # [low, high)
GROUP_SPACING_RANGE: tuple[float, float] = (3.0, 8.0)
STROKE_WEIGHTS: tuple[float, ...] = (0.4, 0.8, 1.0, 2.0, 3.5)

# 隠し線（大ストライプ）
HIDDEN_ANGLE_RANGE_DEG: tuple[float, float] = (-45.0, 45.0)
HIDDEN_THICKNESS_RANGE: tuple[float, float] = (90.0, 150.0)

# 1 ステップあたりの成長量（キャンバス単位）
GROWTH_RATE: float = 15.0

__all__ = [
    "RGBA",
    "REFERENCE_SIZE",
    "BACKGROUND_COLOR",
    "INK_COLOR",
    "NUM_GROUPS",
    "HIDDEN_LINE_POSITION",
    "INK_PROBABILITY",
    "TILT_PROBABILITY",
    "HORIZONTAL_PROBABILITY",
    "TILT_ANGLE_DEG",
    "GROUP_LENGTH_RANGE",
    "GROUP_COUNT_RANGE",
    "GROUP_SPACING_RANGE",
    "STROKE_WEIGHTS",
    "HIDDEN_ANGLE_RANGE_DEG",
    "HIDDEN_THICKNESS_RANGE",
    "GROWTH_RATE",
]
