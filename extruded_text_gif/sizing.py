"""
Canvas sizing.

The canvas is measured once per run from the text's bounding box plus
padding that grows with the extrusion depth, leaving headroom for the
scale/rotation animation.
"""

import math
from dataclasses import dataclass
from typing import Optional

from PIL import ImageFont

from .config import (
    FONT_SIZE,
    PADDING_X_DEPTH_FACTOR,
    PADDING_X_FONT_FACTOR,
    PADDING_Y_DEPTH_FACTOR,
    PADDING_Y_FONT_FACTOR,
)
from .fonts import load_font


@dataclass(frozen=True)
class TextBounds:
    """Ink bounding box relative to the left end of the baseline."""
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def mid_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def mid_y(self) -> float:
        return (self.top + self.bottom) / 2


@dataclass(frozen=True)
class CanvasSize:
    width: int
    height: int


def measure_text(font: ImageFont.FreeTypeFont, text: str) -> TextBounds:
    """Measure ``text`` with the baseline-left anchor used for drawing."""
    left, top, right, bottom = font.getbbox(text, anchor="ls")
    return TextBounds(left, top, right, bottom)


def canvas_size_for_bounds(bounds: TextBounds, depth: int, font_size: int = FONT_SIZE) -> CanvasSize:
    padding_x = int(font_size * PADDING_X_FONT_FACTOR + depth * PADDING_X_DEPTH_FACTOR)
    padding_y = int(font_size * PADDING_Y_FONT_FACTOR + depth * PADDING_Y_DEPTH_FACTOR)

    width = int(math.ceil(bounds.width)) + padding_x
    height = int(math.ceil(bounds.height)) + padding_y
    return CanvasSize(width, height)


def compute_canvas_size(
    text: str,
    depth: int,
    font: Optional[ImageFont.FreeTypeFont] = None
) -> CanvasSize:
    """
    Size the output canvas for ``text`` extruded ``depth`` pixels.

    Loads the bold sans-serif font when none is given, so this raises
    ``FontResolutionError`` if the typeface is unavailable.
    """
    if font is None:
        font = load_font()
    return canvas_size_for_bounds(measure_text(font, text), depth)
