"""
End-to-end GIF generation: size the canvas, render every frame in order,
assemble and write the GIF.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .assembler import GifAssembler
from .config import (
    DEFAULT_DEPTH,
    DEFAULT_FRAMES,
    DEFAULT_OUTPUT,
    DEFAULT_TEXT,
    FRAME_DELAY_CS,
    LOOP_COUNT,
    AnimationConfig,
)
from .fonts import load_font
from .renderer import ExtrudedTextRenderer
from .sizing import compute_canvas_size

logger = logging.getLogger(__name__)


def build_assembler(config: AnimationConfig, font_path: Optional[str] = None) -> GifAssembler:
    """Render all frames of ``config`` into a ready-to-encode assembler."""
    font = load_font(font_path)
    canvas_size = compute_canvas_size(config.text, config.depth, font)
    logger.debug("Canvas size: %dx%d", canvas_size.width, canvas_size.height)

    renderer = ExtrudedTextRenderer(config, canvas_size, font)
    assembler = GifAssembler()

    for i in range(config.frame_count):
        assembler.append_frame(renderer.render_frame(i))
        if (i + 1) % 10 == 0 or i == config.frame_count - 1:
            logger.debug("Rendered frame %d/%d", i + 1, config.frame_count)

    for i in range(len(assembler)):
        assembler.set_frame_delay(i, FRAME_DELAY_CS)
    assembler.set_loop_count(LOOP_COUNT)
    return assembler


def render_animation(config: AnimationConfig, font_path: Optional[str] = None) -> Path:
    """Generate the GIF described by ``config`` and return the written path."""
    assembler = build_assembler(config, font_path)
    return assembler.save(config.output_path)


def generate_gif(
    text: str = DEFAULT_TEXT,
    output_path: Union[str, Path] = DEFAULT_OUTPUT,
    frame_count: int = DEFAULT_FRAMES,
    depth: int = DEFAULT_DEPTH,
    font_path: Optional[str] = None
) -> Path:
    """
    Render ``text`` as a looping, extruded, colour-cycling GIF.

    Raises ``ValueError`` for invalid parameters and a ``TextGifError``
    subclass when the font, encoding or file write fails.
    """
    config = AnimationConfig(
        text=text,
        output_path=str(output_path),
        frame_count=frame_count,
        depth=depth,
    )
    return render_animation(config, font_path)
