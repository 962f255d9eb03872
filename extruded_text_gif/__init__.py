"""
Extruded text GIF generation.

Renders a short string as a looping, pseudo-3D extruded GIF whose hue,
rotation and scale cycle from frame to frame.
"""

from .assembler import GifAssembler
from .color import hsv_to_rgb, lerp_color
from .config import AnimationConfig
from .easing import ease_in_out_quad, ease_in_out_sine
from .errors import EncodingError, FileWriteError, FontResolutionError, TextGifError
from .fonts import load_font, resolve_font_path
from .generator import generate_gif, render_animation
from .renderer import ExtrudedTextRenderer
from .sizing import CanvasSize, TextBounds, compute_canvas_size, measure_text
from .timing import FrameParams, compute_frame_params

__all__ = [
    'AnimationConfig',
    'CanvasSize',
    'EncodingError',
    'ExtrudedTextRenderer',
    'FileWriteError',
    'FontResolutionError',
    'FrameParams',
    'GifAssembler',
    'TextBounds',
    'TextGifError',
    'compute_canvas_size',
    'compute_frame_params',
    'ease_in_out_quad',
    'ease_in_out_sine',
    'generate_gif',
    'hsv_to_rgb',
    'lerp_color',
    'load_font',
    'measure_text',
    'render_animation',
    'resolve_font_path',
]
