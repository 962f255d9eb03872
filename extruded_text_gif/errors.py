"""
Errors raised while generating an extruded text GIF.

All of them are fatal for a run: nothing is retried and no partial file is
left behind.
"""


class TextGifError(Exception):
    """Base class for generation failures."""


class FontResolutionError(TextGifError):
    """The bold sans-serif typeface could not be found or loaded."""


class EncodingError(TextGifError):
    """Frames could not be converted or encoded as a GIF."""


class FileWriteError(TextGifError):
    """The encoded GIF could not be written to the output path."""
