"""
Extruded text frame rendering.

Text is drawn in its own un-transformed "text space" layer, centred on the
layer origin, with ``depth`` darkened copies stacked behind the face
(painter's algorithm, back to front). The layer is then mapped onto the
canvas with one affine warp: translate to the canvas centre, scale, rotate.
"""

import logging
import math
from typing import Tuple

import cv2
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .color import lerp_color
from .config import (
    BACKGROUND_COLOR,
    BLACK,
    EXTRUSION_DARKEN,
    VERTICAL_NUDGE,
    AnimationConfig,
)
from .sizing import CanvasSize, measure_text
from .timing import FrameParams, compute_frame_params

logger = logging.getLogger(__name__)

# Extra pixels around the text layer so antialiased edges survive the warp
LAYER_MARGIN = 4


class ExtrudedTextRenderer:
    """Rasterises frames of the extruded text animation."""

    def __init__(
        self,
        config: AnimationConfig,
        canvas_size: CanvasSize,
        font: ImageFont.FreeTypeFont,
        background: Tuple[int, int, int] = BACKGROUND_COLOR
    ):
        self.config = config
        self.canvas_size = canvas_size
        self.font = font
        self.background = background

        # Text, font and size never change between frames, so measure once
        self.bounds = measure_text(font, config.text)
        self.text_offset = (-self.bounds.mid_x, -self.bounds.mid_y)

        half_w = int(math.ceil(self.bounds.width / 2)) + config.depth + LAYER_MARGIN
        half_h = int(math.ceil(self.bounds.height / 2)) + config.depth + LAYER_MARGIN
        self.layer_size = (2 * half_w, 2 * half_h)
        self.layer_origin = (float(half_w), float(half_h))

    def draw_extruded_text(self, draw: ImageDraw.ImageDraw, params: FrameParams) -> None:
        """Draw the extrusion layers, then the face, onto a text-space layer."""
        depth = self.config.depth
        text = self.config.text
        x = self.layer_origin[0] + self.text_offset[0]
        y = self.layer_origin[1] + self.text_offset[1]

        for d in range(depth, 0, -1):
            color = lerp_color(params.side_color, BLACK, EXTRUSION_DARKEN * (d / depth))
            draw.text((x + d, y + d), text, font=self.font, fill=color[:3], anchor="ls")

        draw.text((x, y), text, font=self.font, fill=params.face_color[:3], anchor="ls")

    def transform_matrix(self, params: FrameParams) -> np.ndarray:
        """
        Affine map from text-space layer pixels to canvas pixels.

        Equivalent to translate(centre) -> scale(s) -> rotate(deg) on a
        canvas, where positive degrees turn clockwise on screen.
        """
        cx = self.canvas_size.width / 2
        cy = self.canvas_size.height / 2 + VERTICAL_NUDGE

        # OpenCV angles are counter-clockwise on screen
        M = cv2.getRotationMatrix2D(self.layer_origin, -params.rotation, params.scale)
        M[0, 2] += cx - self.layer_origin[0]
        M[1, 2] += cy - self.layer_origin[1]
        return M

    def render(self, params: FrameParams) -> np.ndarray:
        """Render one opaque RGB frame for ``params``."""
        with Image.new("RGB", self.layer_size, self.background) as layer:
            draw = ImageDraw.Draw(layer)
            self.draw_extruded_text(draw, params)
            layer_array = np.array(layer)

        frame = cv2.warpAffine(
            layer_array,
            self.transform_matrix(params),
            (self.canvas_size.width, self.canvas_size.height),
            flags=cv2.INTER_LINEAR,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=self.background,
        )
        frame.setflags(write=False)
        return frame

    def render_frame(self, index: int) -> np.ndarray:
        """Render frame ``index`` of the configured animation."""
        params = compute_frame_params(index, self.config.frame_count)
        logger.debug(
            "Frame %d: t=%.3f scale=%.3f rotation=%.2f hue=%.1f",
            index, params.t, params.scale, params.rotation, params.hue
        )
        return self.render(params)
