"""Pixel buffer the renderer draws into, and the coarse window events."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Quit:
    """The user asked to close the window."""


@dataclass(frozen=True)
class Resized:
    """The window now has a new client size."""
    width: int
    height: int


class FrameBuffer:
    """Width x height RGB image held as a ``uint8`` numpy array.

    ``pixels`` is indexed ``[y, x]``, which is also the layout Pillow's
    ``Image.fromarray`` expects. The pygame driver transposes it when
    presenting.
    """

    def __init__(self, width: int, height: int):
        self.pixels = self._allocate(width, height)

    @staticmethod
    def _allocate(width: int, height: int) -> np.ndarray:
        if width < 1 or height < 1:
            raise ValueError(f"Frame buffer size must be positive, got {width}x{height}")
        return np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def write_pixel(self, x: int, y: int, rgb: tuple[int, int, int]):
        self.pixels[y, x] = rgb

    def resize(self, width: int, height: int):
        """Replace the buffer with a black one of the new size."""
        self.pixels = self._allocate(width, height)
