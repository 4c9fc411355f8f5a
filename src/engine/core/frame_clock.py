"""
どこで: `engine.core` の簡易フレームドライバ。
何を: 登録済み `Tickable` を固定順序で呼び、dt とフレーム数を管理する FrameClock。
なぜ: pyglet のスケジューラからは 1 関数だけを呼ばせ、更新順をここで固定するため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """Tickable 列を順に 1 回ずつ進める。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self.frame_count = 0

    def tick(self, dt: float | None = None) -> None:
        # pyglet は dt を渡す。None のときは自前で計測
        if dt is None:
            now = time.perf_counter()
            dt = now - self._last_time
            self._last_time = now

        for t in self._tickables:
            t.tick(dt)
        self.frame_count += 1

    def reset(self) -> None:
        """再生成時にフレーム数と計測基準を戻す。"""
        self.frame_count = 0
        self._last_time = time.perf_counter()
