"""Resumable, time-budgeted scan over every pixel of the frame buffer.

Each call to ``ScanScheduler.advance`` draws pixels in row-major order,
starting where the previous call stopped, and returns once either the pass
is finished or its time budget is spent. A finished pass raises the global
iteration budget by one, so every pass refines the image further.
"""

import math
import time
from typing import Optional

from .cache import EscapeCache
from .color import color_for
from .coords import DEFAULT_VIEWPORT, Viewport, to_complex_point
from .escape import Escaped, evaluate

# One display frame at 60 Hz, in seconds
FRAME_BUDGET = 0.016

# Pixels drawn between two reads of the clock
TIME_CHECK_INTERVAL = 1000


class ScanScheduler:
    """Owns the scan cursor and the iteration budget of a render session.

    The cursor is kept as a linear index ``y * width + x`` so that a single
    ``break`` suspends the whole traversal: the next call resumes on the
    exact pixel after the last one drawn, never partway through a later row.
    """

    def __init__(self, surface, viewport: Viewport = DEFAULT_VIEWPORT,
                 cache: Optional[EscapeCache] = None, power: float = 2,
                 check_interval: int = TIME_CHECK_INTERVAL,
                 clock=time.perf_counter):
        if check_interval < 1:
            raise ValueError(f"check_interval must be >= 1, got {check_interval}")
        if not math.isfinite(power) or power < 1:
            raise ValueError(f"power must be >= 1, got {power}")

        self.surface = surface
        self.viewport = viewport
        self.cache = cache if cache is not None else EscapeCache()
        self.power = power
        self.check_interval = check_interval
        self.clock = clock

        self.budget = 1
        self.passes_completed = 0
        self._position = 0

    @property
    def cursor(self) -> tuple[int, int]:
        """``(x, y)`` of the next pixel to draw."""
        y, x = divmod(self._position, self.surface.width)
        return x, y

    @property
    def progress(self) -> float:
        """Fraction of the current pass already drawn."""
        return self._position / (self.surface.width * self.surface.height)

    def reset(self):
        self._position = 0
        self.budget = 1
        self.passes_completed = 0

    def advance(self, max_duration: float = FRAME_BUDGET) -> int:
        """Draw pixels until the pass ends or ``max_duration`` seconds elapse.

        The clock is only read every ``check_interval`` pixels, so a call can
        overrun ``max_duration`` by up to that many pixel evaluations.

        Returns:
            Number of pixels drawn by this call
        """
        width = self.surface.width
        height = self.surface.height
        total = width * height

        start = self.clock()
        position = self._position
        visited = 0

        while position < total:
            y, x = divmod(position, width)
            iterations = self._iterations_at(x, y, width, height)
            self.surface.write_pixel(x, y, color_for(iterations, self.budget))
            position += 1
            visited += 1

            if visited % self.check_interval == 0:
                if self.clock() - start > max_duration:
                    break

        if position >= total:
            self.budget += 1
            self.passes_completed += 1
            position = 0

        self._position = position
        return visited

    def _iterations_at(self, x: int, y: int, width: int, height: int) -> int:
        """Escape iteration of a pixel, or the current budget if it stays bounded."""
        cached = self.cache.lookup(x, y)
        if cached is not None:
            return cached

        zx, zy = to_complex_point(x, y, width, height, self.viewport)
        result = evaluate(complex(zx, zy), self.power, self.budget)
        if isinstance(result, Escaped):
            self.cache.record(x, y, result.iteration)
            return result.iteration
        return self.budget
