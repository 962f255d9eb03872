"""
Bold sans-serif font resolution.

The lookup order is: an explicit path, the ``TEXT_GIF_FONT`` / ``FONT_PATH``
environment variables, then matplotlib's font manager (which always ships
DejaVu Sans Bold). There is no bitmap fallback; failure is fatal.
"""

import logging
import os
from typing import Optional

from matplotlib import font_manager
from PIL import ImageFont

from .config import FONT_FAMILIES, FONT_SIZE, FONT_WEIGHT, font_path_from_env
from .errors import FontResolutionError

logger = logging.getLogger(__name__)


def resolve_font_path(font_path: Optional[str] = None) -> str:
    """Return a filesystem path to the bold sans-serif font file."""
    candidate = font_path or font_path_from_env()
    if candidate:
        if not os.path.isfile(candidate):
            raise FontResolutionError(f"Font file not found: {candidate}")
        return candidate

    prop = font_manager.FontProperties(family=list(FONT_FAMILIES), weight=FONT_WEIGHT)
    try:
        found = font_manager.findfont(prop, fallback_to_default=False)
    except ValueError as exc:
        raise FontResolutionError(
            f"No {FONT_WEIGHT} font found for families {', '.join(FONT_FAMILIES)}"
        ) from exc

    logger.debug("Resolved font via font manager: %s", found)
    return found


def load_font(font_path: Optional[str] = None, size: int = FONT_SIZE) -> ImageFont.FreeTypeFont:
    """Load the bold sans-serif typeface at ``size`` pixels."""
    path = resolve_font_path(font_path)
    try:
        font = ImageFont.truetype(path, size)
    except OSError as exc:
        raise FontResolutionError(f"Cannot load font {path}: {exc}") from exc

    logger.debug("Loaded font %s at %dpx", path, size)
    return font
