"""
Colour helpers: HSV conversion and linear blending.

Colours are plain RGBA tuples of 8-bit ints. Every channel computation
truncates toward zero, the same way a float-to-byte cast does.
"""

import math
from typing import Tuple

Color = Tuple[int, int, int, int]


def clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Blend ``a`` toward ``b`` per channel (R, G, B, A) by ``t`` in [0, 1]."""
    t = clamp01(t)
    return tuple(int(ca + (cb - ca) * t) for ca, cb in zip(a, b))


def hsv_to_rgb(h: float, s: float, v: float) -> Color:
    """
    Convert HSV to an opaque RGBA colour.

    Parameters:
    -----------
    h : float
        Hue in degrees; values outside [0, 360) wrap around.
    s, v : float
        Saturation and value in [0, 1].
    """
    h = math.fmod(h, 360.0)
    sector = int(h / 60.0)
    hi = sector % 6
    f = h / 60.0 - sector

    v = v * 255.0
    V = int(v)
    p = int(v * (1 - s))
    q = int(v * (1 - f * s))
    t = int(v * (1 - (1 - f) * s))

    if hi == 0:
        return (V, t, p, 255)
    if hi == 1:
        return (q, V, p, 255)
    if hi == 2:
        return (p, V, t, 255)
    if hi == 3:
        return (p, q, V, 255)
    if hi == 4:
        return (t, p, V, 255)
    return (V, p, q, 255)
