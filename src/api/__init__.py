"""
どこで: `api` 入口（高レベル公開 API）。
何を: アニメーション実行 `run_stripes`（別名 `run`）と中核型を再輸出。
なぜ: 利用者が単一名前空間から実行まで完結できるようにするため。

Usage:
    from api import run

    run(seed=42)
"""

from stripes import Segment, Stripe, StripeSequencer

from .sketch import run_stripes as run
from .sketch import run_stripes as run_stripes

__all__ = [
    "run",
    "run_stripes",
    "Segment",
    "Stripe",
    "StripeSequencer",
]
