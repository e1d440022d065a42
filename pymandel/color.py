"""Grayscale coloring of escape iteration counts."""


def color_for(iteration: int, budget: int) -> tuple[int, int, int]:
    """Map ``iteration`` out of ``budget`` to an RGB gray.

    Quick escapes are dark; pixels that reach the budget are white.
    """
    v = (iteration * 255) // budget
    return v, v, v
