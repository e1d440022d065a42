"""Grayscale color mapping."""

from pymandel.color import color_for


def test_zero_iterations_is_black():
    """Immediate escapes are black whatever the budget."""
    for budget in (1, 2, 7, 255, 1000):
        assert color_for(0, budget) == (0, 0, 0)


def test_full_budget_is_white():
    """Reaching the budget gives white."""
    for budget in (1, 2, 7, 255, 1000):
        assert color_for(budget, budget) == (255, 255, 255)


def test_intensity_uses_integer_division():
    """Intermediate values are truncated and equal on every channel."""
    assert color_for(1, 2) == (127, 127, 127)
    assert color_for(1, 3) == (85, 85, 85)
