"""
どこで: `engine.core` の更新インターフェース。
何を: フレーム毎に呼ばれる `tick(dt)` を持つ `Tickable` Protocol。
なぜ: シーケンサのようなフレーム駆動オブジェクトを FrameClock から同じ形で呼ぶため。
"""

from __future__ import annotations

from typing import Protocol


class Tickable(Protocol):
    """1 フレームぶん状態を進めるもの。"""

    def tick(self, dt: float) -> None:
        """前回呼び出しから `dt` 秒経過したとして 1 ステップ進める。"""
