"""Progressive escape-time (Mandelbrot/multibrot) renderer."""

from .cache import EscapeCache
from .color import color_for
from .coords import DEFAULT_VIEWPORT, Viewport, to_complex_point
from .escape import EscapeResult, Escaped, NotEscaped, evaluate
from .renderer import ProgressiveRenderer
from .scheduler import FRAME_BUDGET, TIME_CHECK_INTERVAL, ScanScheduler
from .surface import FrameBuffer, Quit, Resized

__all__ = [
    "DEFAULT_VIEWPORT",
    "EscapeCache",
    "EscapeResult",
    "Escaped",
    "FRAME_BUDGET",
    "FrameBuffer",
    "NotEscaped",
    "ProgressiveRenderer",
    "Quit",
    "Resized",
    "ScanScheduler",
    "TIME_CHECK_INTERVAL",
    "Viewport",
    "color_for",
    "evaluate",
    "to_complex_point",
]
