"""Progressive scan scheduling."""

import math

import numpy as np
import pytest

from pymandel.cache import EscapeCache
from pymandel.scheduler import ScanScheduler
from pymandel.surface import FrameBuffer

from conftest import FakeClock, RecordingSurface


def row_major(width, height):
    return [(x, y) for y in range(height) for x in range(width)]


def test_full_pass_in_one_call(recording_surface):
    """An unbounded call draws every pixel once, in row-major order."""
    scheduler = ScanScheduler(recording_surface)

    visited = scheduler.advance(math.inf)

    assert visited == 12
    assert recording_surface.writes == row_major(4, 3)
    assert scheduler.budget == 2
    assert scheduler.passes_completed == 1
    assert scheduler.cursor == (0, 0)


def test_call_stops_at_end_of_pass(recording_surface):
    """A finished pass ends the call, it does not roll into the next pass."""
    scheduler = ScanScheduler(recording_surface)

    scheduler.advance(math.inf)
    scheduler.advance(math.inf)

    assert recording_surface.writes == row_major(4, 3) * 2
    assert scheduler.budget == 3


def test_suspends_and_resumes_on_next_pixel(recording_surface, fake_clock):
    """Running out of time halts the whole scan; the next call picks up exactly after."""
    scheduler = ScanScheduler(recording_surface, check_interval=5, clock=fake_clock)

    assert scheduler.advance(0.5) == 5
    assert scheduler.cursor == (1, 1)
    assert scheduler.budget == 1

    assert scheduler.advance(0.5) == 5
    assert scheduler.cursor == (2, 2)
    assert scheduler.budget == 1

    assert scheduler.advance(0.5) == 2
    assert scheduler.cursor == (0, 0)
    assert scheduler.budget == 2

    assert recording_surface.writes == row_major(4, 3)


def test_budget_increments_once_per_grid_of_visits():
    """width*height visits spread over many calls complete exactly one pass."""
    surface = RecordingSurface(7, 5)
    scheduler = ScanScheduler(surface, check_interval=3, clock=FakeClock())

    total = 0
    while total < 7 * 5:
        total += scheduler.advance(0.5)

    assert total == 35
    assert scheduler.budget == 2
    assert scheduler.cursor == (0, 0)
    assert len(set(surface.writes)) == len(surface.writes) == 35


def test_clock_read_only_every_check_interval(recording_surface, fake_clock):
    """The clock is read once at the start and then every check_interval pixels."""
    scheduler = ScanScheduler(recording_surface, check_interval=5, clock=fake_clock)

    scheduler.advance(math.inf)

    assert fake_clock.reads == 3


def test_suspension_on_last_pixel_completes_pass(fake_clock):
    """Running out of time on the final pixel still finishes the pass."""
    surface = FrameBuffer(3, 2)
    scheduler = ScanScheduler(surface, check_interval=6, clock=fake_clock)

    assert scheduler.advance(0.5) == 6
    assert scheduler.budget == 2
    assert scheduler.cursor == (0, 0)


def test_escaped_pixels_are_cached_not_escaped_are_not():
    """Only confirmed escapes go in the cache."""
    surface = FrameBuffer(4, 4)
    cache = EscapeCache()
    scheduler = ScanScheduler(surface, cache=cache)

    scheduler.advance(math.inf)

    # (0, 0) samples -2 - 1.125i, which escapes on iteration 0
    assert cache.lookup(0, 0) == 0
    # (2, 2) samples the origin
    assert cache.lookup(2, 2) is None
    assert tuple(surface.pixels[2, 2]) == (255, 255, 255)
    assert tuple(surface.pixels[0, 0]) == (0, 0, 0)


def test_cache_hit_skips_evaluation():
    """A cached value is used as-is for its pixel."""
    surface = FrameBuffer(4, 4)
    cache = EscapeCache()
    cache.record(2, 2, 0)
    scheduler = ScanScheduler(surface, cache=cache)

    scheduler.advance(math.inf)

    # The origin would be white if it had been evaluated
    assert tuple(surface.pixels[2, 2]) == (0, 0, 0)


def test_later_passes_refine_with_higher_budget():
    """Every pass redraws the frame against the new budget."""
    surface = FrameBuffer(16, 9)
    scheduler = ScanScheduler(surface)

    scheduler.advance(math.inf)
    first = surface.pixels.copy()
    for _ in range(5):
        scheduler.advance(math.inf)

    assert scheduler.budget == 7
    assert not np.array_equal(first, surface.pixels)
    # Gray everywhere
    assert np.array_equal(surface.pixels[..., 0], surface.pixels[..., 1])
    assert np.array_equal(surface.pixels[..., 1], surface.pixels[..., 2])


def test_progress(recording_surface, fake_clock):
    """progress is the fraction of the current pass already drawn."""
    scheduler = ScanScheduler(recording_surface, check_interval=3, clock=fake_clock)
    assert scheduler.progress == 0.0
    scheduler.advance(0.5)
    assert scheduler.progress == pytest.approx(0.25)


def test_reset(recording_surface):
    """reset puts the cursor back at the start with a budget of 1."""
    scheduler = ScanScheduler(recording_surface, check_interval=1, clock=FakeClock())
    scheduler.advance(math.inf)
    scheduler.advance(0.5)
    assert scheduler.cursor == (1, 0)

    scheduler.reset()

    assert scheduler.cursor == (0, 0)
    assert scheduler.budget == 1
    assert scheduler.passes_completed == 0


def test_invalid_parameters(recording_surface):
    """Bad construction parameters are rejected."""
    with pytest.raises(ValueError):
        ScanScheduler(recording_surface, check_interval=0)
    with pytest.raises(ValueError):
        ScanScheduler(recording_surface, power=0.5)
    with pytest.raises(ValueError):
        ScanScheduler(recording_surface, power=float("nan"))
