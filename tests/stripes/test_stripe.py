from __future__ import annotations

import math

import pytest

from stripes.constants import INK_COLOR
from stripes.segment import Segment
from stripes.stripe import Stripe
from tests._utils.dummies import RecordingSurface


def _stripe(length: float, rate: float = 15.0, copies: int = 1) -> Stripe:
    segs = [
        Segment(
            start=(0.0, float(i)),
            end=(length, float(i)),
            thickness=1.0,
            color=INK_COLOR,
            growth_length=length,
        )
        for i in range(copies)
    ]
    return Stripe(segs, growth_rate=rate)


def test_completes_exactly_on_tenth_step(surface: RecordingSurface) -> None:
    stripe = _stripe(150.0)
    for _ in range(9):
        stripe.render_step(surface)
        assert not stripe.is_complete
    stripe.render_step(surface)
    assert stripe.is_complete
    assert stripe.current_growth == 150.0
    assert stripe.steps_to_complete() == 10


@pytest.mark.parametrize("length", [1.0, 14.0, 15.0, 16.0, 149.9, 200.0, 417.3])
def test_steps_to_complete_matches_ceil(length: float, surface: RecordingSurface) -> None:
    stripe = _stripe(length)
    expected = math.ceil(length / 15.0)
    steps = 0
    while not stripe.is_complete:
        stripe.render_step(surface)
        steps += 1
    assert steps == expected == stripe.steps_to_complete()


def test_complete_state_is_idempotent_and_redraws_full(surface: RecordingSurface) -> None:
    stripe = _stripe(30.0)
    stripe.render_step(surface)
    stripe.render_step(surface)
    assert stripe.is_complete
    surface.reset()

    for _ in range(3):
        stripe.render_step(surface)
        assert stripe.is_complete
        assert stripe.current_growth == 30.0
    # 完了後も毎回全長で描き直す
    assert [s[1] for s in surface.segments] == [(30.0, 0.0)] * 3


def test_draws_partial_segments_by_ratio(surface: RecordingSurface) -> None:
    stripe = _stripe(60.0, copies=3)
    stripe.render_step(surface)  # ratio 0
    stripe.render_step(surface)  # ratio 0.25
    first, second = surface.segments[:3], surface.segments[3:]
    assert all(start == end for start, end, _, _ in first)
    assert [end for _, end, _, _ in second] == [(15.0, 0.0), (15.0, 1.0), (15.0, 2.0)]
    assert all(color == INK_COLOR and thickness == 1.0 for _, _, color, thickness in second)


def test_growth_invariant_holds(surface: RecordingSurface) -> None:
    stripe = _stripe(47.0, rate=10.0)
    for _ in range(10):
        stripe.render_step(surface)
        assert 0.0 <= stripe.current_growth <= stripe.growth_length
        assert stripe.is_complete == (stripe.current_growth >= stripe.growth_length)


def test_zero_length_stripe_is_complete_and_draws_at_full_ratio(surface: RecordingSurface) -> None:
    stripe = _stripe(0.0)
    assert stripe.is_complete
    assert stripe.ratio == 1.0
    assert stripe.steps_to_complete() == 0
    stripe.render_step(surface)
    assert len(surface.segments) == 1


def test_empty_stripe_raises() -> None:
    with pytest.raises(ValueError):
        Stripe([])


def test_non_positive_rate_raises() -> None:
    with pytest.raises(ValueError):
        _stripe(10.0, rate=0.0)
