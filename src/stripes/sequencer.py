"""
どこで: `stripes.sequencer`。
何を: ストライプ列・カーソル・隠し線挿入フラグを所有し、1 フレームずつ描画を進める状態機械 `StripeSequencer`。
なぜ: アニメーション状態をプロセス大域から 1 オブジェクトへ移し、隠し線の一度きりの挿入を明示的な遷移として扱うため。

状態遷移:
    GENERATING --regenerate()--> ANIMATING --(全ストライプ完了)--> FINISHED
    どの状態からでも regenerate() で GENERATING → ANIMATING へ戻る。
"""

from __future__ import annotations

import enum
import logging
import math

import numpy as np

from engine.core.surface import DrawSurface

from .constants import BACKGROUND_COLOR, HIDDEN_LINE_POSITION, NUM_GROUPS
from .generator import compute_scale_factor, generate_group, generate_hidden_line
from .stripe import Stripe

logger = logging.getLogger(__name__)


class SequencerState(enum.Enum):
    GENERATING = "generating"
    ANIMATING = "animating"
    FINISHED = "finished"


class StripeSequencer:
    """ストライプを 1 本ずつ成長させ、所定位置で隠し線を差し込む。

    `tick(dt)` を持つため `FrameClock` に Tickable として登録できる。
    描画面は累積型を前提とし、消去は `regenerate()` 時の 1 回のみ。
    """

    def __init__(
        self,
        surface: DrawSurface,
        *,
        num_groups: int = NUM_GROUPS,
        rng: np.random.Generator | None = None,
    ):
        if num_groups < 0:
            raise ValueError(f"num_groups must be >= 0, got {num_groups}")
        self._surface = surface
        self._rng = rng if rng is not None else np.random.default_rng()
        self.num_groups = int(num_groups)
        self.insertion_index = int(math.floor(HIDDEN_LINE_POSITION * self.num_groups))

        self.stripes: list[Stripe] = []
        self.hidden_line: Stripe | None = None
        self.active_index = 0
        self.special_inserted = False
        self.scale_factor = 0.0
        self.extent: tuple[float, float] = (0.0, 0.0)
        self.state = SequencerState.GENERATING

    # ------------------------------------------------------------------ #
    # 生成                                                               #
    # ------------------------------------------------------------------ #
    def regenerate(self, width: float, height: float) -> None:
        """全状態を破棄し、現在の描画サイズで列を作り直して描画面を背景色で消去する。"""
        self.state = SequencerState.GENERATING
        self.extent = (float(width), float(height))
        self.scale_factor = compute_scale_factor(width, height)

        self.stripes = [
            generate_group(self.extent, self.scale_factor, self._rng)
            for _ in range(self.num_groups)
        ]
        self.hidden_line = generate_hidden_line(self.extent, self.scale_factor, self._rng)
        self.active_index = 0
        self.special_inserted = False

        self._surface.clear(BACKGROUND_COLOR)
        self.state = SequencerState.ANIMATING
        logger.info(
            "regenerated %d stripes for %dx%d (scale=%.3f, hidden line at %d)",
            len(self.stripes),
            int(width),
            int(height),
            self.scale_factor,
            self.insertion_index,
        )

    # ------------------------------------------------------------------ #
    # フレーム進行                                                       #
    # ------------------------------------------------------------------ #
    def advance_frame(self) -> SequencerState:
        """1 フレーム分進め、進行後の状態を返す。"""
        if self.state is SequencerState.GENERATING:
            raise RuntimeError("advance_frame() called before regenerate()")
        if self.state is SequencerState.FINISHED:
            return self.state

        self._splice_hidden_line()

        if self.active_index < len(self.stripes):
            stripe = self.stripes[self.active_index]
            stripe.render_step(self._surface)
            if stripe.is_complete:
                self.active_index += 1
        else:
            self.state = SequencerState.FINISHED
            logger.info("all %d stripes drawn", len(self.stripes))
        return self.state

    def tick(self, dt: float) -> None:
        """Tickable 実装。経過時間は使わず、呼び出し 1 回 = 1 ステップ。"""
        self.advance_frame()

    def _splice_hidden_line(self) -> bool:
        """カーソルが挿入位置に達した最初の 1 回だけ隠し線を列へ差し込む。"""
        if self.special_inserted or self.active_index != self.insertion_index:
            return False
        if self.hidden_line is None:
            return False
        self.stripes.insert(self.active_index, self.hidden_line)
        self.special_inserted = True
        logger.debug("hidden line spliced at %d", self.active_index)
        return True

    # ------------------------------------------------------------------ #
    # 参照用                                                             #
    # ------------------------------------------------------------------ #
    @property
    def is_finished(self) -> bool:
        return self.state is SequencerState.FINISHED

    @property
    def active_stripe(self) -> Stripe | None:
        if 0 <= self.active_index < len(self.stripes):
            return self.stripes[self.active_index]
        return None

    def __len__(self) -> int:
        return len(self.stripes)


__all__ = ["SequencerState", "StripeSequencer"]
