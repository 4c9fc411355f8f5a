"""
どこで: `stripes` パッケージ（アニメーションの中核）。
何を: ストライプ幾何の生成（generator）・成長アニメーション単位（Stripe）・逐次駆動（StripeSequencer）を提供。
なぜ: ウィンドウ/GPU から切り離した純粋な状態機械として保ち、描画面を差し替えてテスト可能にするため。
"""

from .generator import compute_scale_factor, generate_group, generate_hidden_line
from .segment import Segment
from .sequencer import SequencerState, StripeSequencer
from .stripe import Stripe

__all__ = [
    "Segment",
    "Stripe",
    "StripeSequencer",
    "SequencerState",
    "compute_scale_factor",
    "generate_group",
    "generate_hidden_line",
]
