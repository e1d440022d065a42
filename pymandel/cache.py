"""Memo of escape iterations for pixels that are known to escape."""

from typing import Optional


class EscapeCache:
    """Maps ``(x, y)`` pixel coordinates to their escape iteration.

    Only escaped pixels belong here. A point's escape iteration never changes
    as the iteration budget grows, so an entry stays valid until the pixel
    grid itself changes (see ``ProgressiveRenderer.on_resize``). Non-escaping
    pixels must not be recorded: a higher budget may still let them escape.
    """

    def __init__(self):
        self._escaped: dict[tuple[int, int], int] = {}

    def lookup(self, x: int, y: int) -> Optional[int]:
        return self._escaped.get((x, y))

    def record(self, x: int, y: int, iteration: int):
        if iteration < 0:
            raise ValueError(f"Escape iteration must be >= 0, got {iteration}")
        self._escaped[(x, y)] = iteration

    def clear(self):
        self._escaped.clear()

    def __len__(self) -> int:
        return len(self._escaped)

    def __contains__(self, key) -> bool:
        return key in self._escaped
