"""Escape-time evaluation of the multibrot recurrence z -> z^power + c."""

from dataclasses import dataclass
from typing import Union

ESCAPE_RADIUS = 2.0


@dataclass(frozen=True)
class Escaped:
    """The point left the escape radius on ``iteration`` (0-based)."""
    iteration: int


@dataclass(frozen=True)
class NotEscaped:
    """The point stayed bounded for the whole iteration budget."""


EscapeResult = Union[Escaped, NotEscaped]


def evaluate(z0: complex, power: float = 2, budget: int = 1) -> EscapeResult:
    """Iterate the recurrence for ``z0`` at most ``budget`` times.

    The starting value doubles as the constant ``c``, so the first iterate
    is ``z0**power + z0``. The escape iteration of a point does not depend
    on ``budget``: raising the budget only turns some ``NotEscaped`` results
    into ``Escaped`` ones.

    Args:
        z0: Point of the complex plane to test
        power: Exponent of the recurrence (2 for the classic Mandelbrot set)
        budget: Maximum number of iterations

    Returns:
        ``Escaped(i)`` with ``0 <= i < budget``, or ``NotEscaped()``
    """
    z = c = complex(z0)
    for i in range(budget):
        try:
            z = z ** power + c
        except OverflowError:
            # Only reachable for |z| > 1 and a huge exponent
            return Escaped(i)
        if abs(z) > ESCAPE_RADIUS:
            return Escaped(i)
    return NotEscaped()
