"""
Per-frame animation parameters.

Scale and rotation ride a cosine ping-pong so the first and last frames
match; hue sweeps linearly over the whole sequence and does not wrap back,
so there is a hue cut where the GIF loops.
"""

from dataclasses import dataclass

from .color import Color, hsv_to_rgb
from .config import (
    ROTATION_MIN,
    ROTATION_RANGE,
    SCALE_MIN,
    SCALE_RANGE,
    SIDE_HUE_SHIFT,
    SIDE_VALUE,
)
from .easing import ease_in_out_quad, ease_in_out_sine, loop_cycle


@dataclass(frozen=True)
class FrameParams:
    """Animation state for one frame index."""
    index: int
    t: float            # linear time in [0, 1]
    cycle: float        # 0 -> 1 -> 0
    zoom_ease: float
    rotate_ease: float
    scale: float        # [0.9, 1.1]
    rotation: float     # degrees, [-10, 10]
    hue: float          # degrees, [0, 360)
    face_color: Color
    side_color: Color


def compute_frame_params(index: int, frame_count: int) -> FrameParams:
    """Compute ``FrameParams`` for ``index`` in ``[0, frame_count)``."""
    if frame_count < 2:
        raise ValueError(f"frame_count must be >= 2, got {frame_count}")
    if not 0 <= index < frame_count:
        raise ValueError(f"frame index {index} outside [0, {frame_count})")

    t = index / (frame_count - 1)
    cycle = loop_cycle(t)

    zoom_ease = ease_in_out_sine(cycle)
    rotate_ease = ease_in_out_quad(cycle)

    scale = SCALE_MIN + SCALE_RANGE * zoom_ease
    rotation = ROTATION_MIN + ROTATION_RANGE * rotate_ease

    hue = (index / frame_count) * 360.0
    face_color = hsv_to_rgb(hue, 1.0, 1.0)
    side_color = hsv_to_rgb((hue + SIDE_HUE_SHIFT) % 360.0, 1.0, SIDE_VALUE)

    return FrameParams(
        index=index,
        t=t,
        cycle=cycle,
        zoom_ease=zoom_ease,
        rotate_ease=rotate_ease,
        scale=scale,
        rotation=rotation,
        hue=hue,
        face_color=face_color,
        side_color=side_color,
    )

