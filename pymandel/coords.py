"""Mapping from pixel coordinates to points in the complex plane."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """Rectangle of the complex plane shown on the surface.

    ``xa``/``xb`` bound the real axis and ``ya``/``yb`` the imaginary axis.
    Pixel (0, 0) maps to ``(xa, ya)``.
    """
    xa: float = -2.0
    xb: float = 2.0
    ya: float = -1.125
    yb: float = 1.125

    def __post_init__(self):
        if self.xa == self.xb or self.ya == self.yb:
            raise ValueError(f"Degenerate viewport: {self}")


DEFAULT_VIEWPORT = Viewport()


def to_complex_point(x: int, y: int, width: int, height: int,
                     viewport: Viewport = DEFAULT_VIEWPORT) -> tuple[float, float]:
    """Return the ``(zx, zy)`` point that pixel ``(x, y)`` samples."""
    zx = x * (viewport.xb - viewport.xa) / width + viewport.xa
    zy = y * (viewport.yb - viewport.ya) / height + viewport.ya
    return zx, zy
