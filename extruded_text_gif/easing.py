"""
Easing curves for the zoom/rotate cycle.
"""

import math


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - ((-2 * t + 2) ** 2) / 2


def loop_cycle(t: float) -> float:
    """Map linear time [0, 1] onto a smooth 0 -> 1 -> 0 ping-pong."""
    return 0.5 * (1 - math.cos(2 * math.pi * t))
