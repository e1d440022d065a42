"""Render session state shared across frames."""

import time
from typing import Iterable

from .cache import EscapeCache
from .coords import DEFAULT_VIEWPORT, Viewport
from .scheduler import FRAME_BUDGET, TIME_CHECK_INTERVAL, ScanScheduler
from .surface import FrameBuffer, Quit, Resized


class ProgressiveRenderer:
    """Bundles the frame buffer, escape cache and scan scheduler.

    The driver calls ``update`` once per displayed frame and presents
    ``surface`` afterwards. All state survives between calls; a resize is the
    only thing that throws it away.
    """

    def __init__(self, width: int, height: int,
                 viewport: Viewport = DEFAULT_VIEWPORT, power: float = 2,
                 check_interval: int = TIME_CHECK_INTERVAL,
                 clock=time.perf_counter):
        self.viewport = viewport
        self.surface = FrameBuffer(width, height)
        self.cache = EscapeCache()
        self.scheduler = ScanScheduler(
            self.surface, viewport, self.cache,
            power=power, check_interval=check_interval, clock=clock,
        )

    @property
    def budget(self) -> int:
        return self.scheduler.budget

    def on_resize(self, width: int, height: int):
        """Start over on a fresh buffer of the new size.

        Cached escapes are keyed by pixel, and pixels now sample different
        points, so the cache goes too. Sizes below 1 are clamped to 1.
        """
        width = max(int(width), 1)
        height = max(int(height), 1)
        self.surface.resize(width, height)
        self.scheduler.reset()
        self.cache.clear()

    def update(self, events: Iterable = (), max_duration: float = FRAME_BUDGET) -> bool:
        """Handle pending events, then advance the scan by one frame's worth.

        Returns:
            False if a ``Quit`` event was seen (nothing is drawn), else True
        """
        for event in events:
            if isinstance(event, Quit):
                return False
            if isinstance(event, Resized):
                self.on_resize(event.width, event.height)

        self.scheduler.advance(max_duration)
        return True
