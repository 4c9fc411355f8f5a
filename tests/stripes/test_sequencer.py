from __future__ import annotations

import logging

import numpy as np
import pytest

from stripes.constants import BACKGROUND_COLOR
from stripes.sequencer import SequencerState, StripeSequencer
from tests._utils.dummies import RecordingSurface


def _sequencer(surface: RecordingSurface, seed: int = 3, **kwargs) -> StripeSequencer:
    seq = StripeSequencer(surface, rng=np.random.default_rng(seed), **kwargs)
    seq.regenerate(1280, 800)
    return seq


def _advance_until(seq: StripeSequencer, index: int, limit: int = 100_000) -> None:
    for _ in range(limit):
        if seq.active_index >= index:
            return
        seq.advance_frame()
    raise AssertionError("cursor did not reach target")


def test_initial_state_before_regenerate(surface: RecordingSurface) -> None:
    seq = StripeSequencer(surface)
    assert seq.state is SequencerState.GENERATING
    with pytest.raises(RuntimeError):
        seq.advance_frame()


def test_regenerate_builds_groups_and_clears(surface: RecordingSurface) -> None:
    seq = _sequencer(surface)
    assert seq.state is SequencerState.ANIMATING
    assert len(seq) == 80
    assert seq.insertion_index == 56
    assert seq.hidden_line is not None
    assert seq.hidden_line not in seq.stripes
    assert seq.active_index == 0
    assert seq.special_inserted is False
    assert surface.clears == [BACKGROUND_COLOR]
    assert seq.scale_factor == pytest.approx(1.3)


def test_hidden_line_spliced_once_at_insertion_index(surface: RecordingSurface) -> None:
    seq = _sequencer(surface)
    hidden = seq.hidden_line
    originals = list(seq.stripes)

    _advance_until(seq, 56)
    # 挿入前: 0..55 は通常グループのみ
    assert seq.special_inserted is False
    assert len(seq) == 80
    assert seq.stripes[:56] == originals[:56]

    seq.advance_frame()
    assert seq.special_inserted is True
    assert len(seq) == 81
    assert seq.stripes[56] is hidden
    assert seq.stripes[57:] == originals[56:]

    # 以降のフレームで重複挿入しない
    _advance_until(seq, 60)
    assert len(seq) == 81
    assert sum(1 for s in seq.stripes if s is hidden) == 1


def test_hidden_line_is_rendered_at_cursor_56(surface: RecordingSurface) -> None:
    seq = _sequencer(surface)
    _advance_until(seq, 56)
    surface.reset()
    seq.advance_frame()
    assert seq.active_stripe is seq.hidden_line
    assert len(surface.segments) == 1
    assert surface.segments[0][2] == BACKGROUND_COLOR


def test_runs_to_finished_and_stays_finished(surface: RecordingSurface) -> None:
    seq = _sequencer(surface)
    expected_frames = sum(max(1, s.steps_to_complete()) for s in seq.stripes)
    expected_frames += max(1, seq.hidden_line.steps_to_complete())  # type: ignore[union-attr]

    frames = 0
    while seq.advance_frame() is not SequencerState.FINISHED:
        frames += 1
        assert frames <= expected_frames
    assert frames == expected_frames
    assert seq.active_index == len(seq) == 81
    assert all(s.is_complete for s in seq.stripes)

    drawn = len(surface.segments)
    assert seq.advance_frame() is SequencerState.FINISHED
    assert len(surface.segments) == drawn


def test_regenerate_mid_animation_resets_state(surface: RecordingSurface) -> None:
    seq = _sequencer(surface)
    _advance_until(seq, 60)
    assert seq.special_inserted

    seq.regenerate(640, 480)
    assert seq.active_index == 0
    assert seq.special_inserted is False
    assert seq.state is SequencerState.ANIMATING
    assert len(seq) == 80
    assert all(s.current_growth == 0.0 for s in seq.stripes)
    assert len(surface.clears) == 2
    assert seq.scale_factor == pytest.approx((640 + 480) / 2 / 800)


def test_regenerate_after_finished_resumes(surface: RecordingSurface) -> None:
    seq = _sequencer(surface, num_groups=2)
    while seq.advance_frame() is not SequencerState.FINISHED:
        pass
    seq.regenerate(800, 800)
    assert seq.state is SequencerState.ANIMATING
    assert seq.advance_frame() is SequencerState.ANIMATING


def test_tick_advances_one_frame(surface: RecordingSurface) -> None:
    seq = _sequencer(surface)
    seq.tick(1 / 60)
    assert len(surface.segments) == len(seq.stripes[0])


def test_small_group_count_insertion_index(surface: RecordingSurface) -> None:
    seq = _sequencer(surface, num_groups=10)
    assert seq.insertion_index == 7
    seq_zero = _sequencer(RecordingSurface(), num_groups=0)
    assert seq_zero.insertion_index == 0
    seq_zero.advance_frame()
    assert seq_zero.special_inserted
    assert len(seq_zero) == 1


def test_degenerate_extent_does_not_raise(surface: RecordingSurface) -> None:
    seq = StripeSequencer(surface, rng=np.random.default_rng(0))
    seq.regenerate(0, 0)
    assert seq.scale_factor == 0.0
    frames = 0
    while seq.advance_frame() is not SequencerState.FINISHED:
        frames += 1
    # 長さ 0 のストライプは 1 フレームずつで完了する
    assert frames == 81


def test_regenerate_and_finish_are_logged(surface: RecordingSurface, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="stripes.sequencer"):
        seq = _sequencer(surface, num_groups=1)
        while seq.advance_frame() is not SequencerState.FINISHED:
            pass
    messages = [r.getMessage() for r in caplog.records]
    assert any("regenerated 1 stripes" in m for m in messages)
    assert any("all 2 stripes drawn" in m for m in messages)


def test_negative_group_count_raises(surface: RecordingSurface) -> None:
    with pytest.raises(ValueError):
        StripeSequencer(surface, num_groups=-1)
