"""Saving rendered frames to image files, and rendering without a window."""

import math
from pathlib import Path

from PIL import Image

from .coords import DEFAULT_VIEWPORT, Viewport
from .renderer import ProgressiveRenderer
from .surface import FrameBuffer


def to_image(surface: FrameBuffer) -> Image.Image:
    """Copy the frame buffer into an RGB Pillow image."""
    return Image.fromarray(surface.pixels.copy())


def save_snapshot(surface: FrameBuffer, path) -> Path:
    """Write the frame buffer to ``path``; the format follows the extension."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_image(surface).save(path)
    return path


def render_passes(width: int, height: int, passes: int,
                  viewport: Viewport = DEFAULT_VIEWPORT,
                  power: float = 2) -> FrameBuffer:
    """Run ``passes`` complete scans and return the resulting frame buffer.

    The last pass is drawn with an iteration budget of ``passes``.
    """
    if passes < 1:
        raise ValueError(f"passes must be >= 1, got {passes}")

    mandel = ProgressiveRenderer(width, height, viewport=viewport, power=power)
    while mandel.scheduler.passes_completed < passes:
        mandel.update(max_duration=math.inf)
    return mandel.surface
