"""
Configuration for extruded text GIF generation.

Design constants live here so the rendering code never re-derives magic
numbers. ``AnimationConfig`` is the per-run, immutable parameter set.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


# Typography
FONT_SIZE = 72
FONT_FAMILIES = ("Arial", "Helvetica", "Liberation Sans", "DejaVu Sans")
FONT_WEIGHT = "bold"
FONT_ENV_KEYS = ("TEXT_GIF_FONT", "FONT_PATH")

# Canvas
BACKGROUND_COLOR: Tuple[int, int, int] = (248, 248, 255)  # ghost white
PADDING_X_FONT_FACTOR = 1.2
PADDING_X_DEPTH_FACTOR = 2.0
PADDING_Y_FONT_FACTOR = 2.0
PADDING_Y_DEPTH_FACTOR = 3.0
VERTICAL_NUDGE = 10

# Motion
SCALE_MIN = 0.9
SCALE_RANGE = 0.2
ROTATION_MIN = -10.0
ROTATION_RANGE = 20.0

# Colour cycle
SIDE_HUE_SHIFT = 300.0
SIDE_VALUE = 0.6
EXTRUSION_DARKEN = 0.25
BLACK: Tuple[int, int, int, int] = (0, 0, 0, 255)

# GIF container
FRAME_DELAY_CS = 6  # centiseconds, i.e. 60 ms
LOOP_COUNT = 0      # repeat forever

# CLI defaults
DEFAULT_TEXT = "Hello!"
DEFAULT_OUTPUT = "output.gif"
DEFAULT_FRAMES = 48
DEFAULT_DEPTH = 16


@dataclass(frozen=True)
class AnimationConfig:
    """Parameters of a single GIF generation run."""
    text: str = DEFAULT_TEXT
    output_path: str = DEFAULT_OUTPUT
    frame_count: int = DEFAULT_FRAMES
    depth: int = DEFAULT_DEPTH

    def __post_init__(self) -> None:
        # t = i / (frame_count - 1)
        if self.frame_count < 2:
            raise ValueError(f"frame_count must be >= 2, got {self.frame_count}")
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")


def font_path_from_env() -> Optional[str]:
    """Return the first font path set through the environment, if any."""
    for key in FONT_ENV_KEYS:
        value = os.environ.get(key)
        if value:
            return value
    return None
