from __future__ import annotations

import numpy as np
import pytest

from api.sketch_runner.loop import AnimationLoop
from engine.core.frame_clock import FrameClock
from stripes.sequencer import SequencerState, StripeSequencer
from tests._utils.dummies import FakeScheduler, RecordingSurface


def _make(surface: RecordingSurface, num_groups: int = 3):
    seq = StripeSequencer(surface, num_groups=num_groups, rng=np.random.default_rng(1))
    clock = FrameClock([seq])
    sched = FakeScheduler()
    resized: list[tuple[int, int]] = []
    loop = AnimationLoop(
        clock,
        seq,
        30,
        resize_surface=lambda w, h: resized.append((w, h)),
        schedule=sched.schedule,
        unschedule=sched.unschedule,
    )
    return loop, seq, clock, sched, resized


def _run_to_pause(loop: AnimationLoop, limit: int = 100_000) -> int:
    n = 0
    while loop.running:
        loop.on_tick(1 / 30)
        n += 1
        assert n < limit
    return n


@pytest.mark.integration
def test_start_regenerates_and_schedules(surface: RecordingSurface) -> None:
    loop, seq, _, sched, _ = _make(surface)
    loop.start(800, 600)
    assert seq.state is SequencerState.ANIMATING
    assert loop.running
    assert sched.scheduled == [(loop.on_tick, pytest.approx(1 / 30))]
    assert len(surface.clears) == 1


@pytest.mark.integration
def test_pauses_when_sequence_finishes(surface: RecordingSurface) -> None:
    loop, seq, clock, sched, _ = _make(surface)
    loop.start(800, 600)
    frames = _run_to_pause(loop)
    assert seq.is_finished
    assert sched.unscheduled == [loop.on_tick]
    assert sched.active == 0
    assert clock.frame_count == frames


@pytest.mark.integration
def test_resize_regenerates_and_resumes_after_finish(surface: RecordingSurface) -> None:
    loop, seq, clock, sched, resized = _make(surface)
    loop.start(800, 600)
    _run_to_pause(loop)

    loop.on_resize(1024, 768)
    assert resized == [(1024, 768)]
    assert loop.running
    assert sched.active == 1
    assert seq.state is SequencerState.ANIMATING
    assert seq.active_index == 0
    assert seq.special_inserted is False
    assert seq.extent == (1024.0, 768.0)
    assert clock.frame_count == 0


@pytest.mark.integration
def test_resize_mid_animation_does_not_double_schedule(surface: RecordingSurface) -> None:
    loop, seq, _, sched, _ = _make(surface)
    loop.start(800, 600)
    for _ in range(5):
        loop.on_tick(1 / 30)
    loop.on_resize(640, 480)
    assert sched.active == 1
    assert len(sched.scheduled) == 1
    assert seq.active_index == 0


def test_resize_to_same_size_is_ignored(surface: RecordingSurface) -> None:
    loop, seq, _, _, resized = _make(surface)
    loop.start(800, 600)
    loop.on_tick(1 / 30)
    growth = seq.stripes[0].current_growth
    loop.on_resize(800, 600)
    assert resized == []
    assert seq.stripes[0].current_growth == growth
    assert len(surface.clears) == 1


def test_invalid_fps_raises(surface: RecordingSurface) -> None:
    seq = StripeSequencer(surface)
    sched = FakeScheduler()
    with pytest.raises(ValueError):
        AnimationLoop(FrameClock([seq]), seq, 0, schedule=sched.schedule, unschedule=sched.unschedule)
