"""
Animated GIF assembly and encoding.

Frames are accumulated in order with a per-frame delay (centiseconds) and a
loop count, then encoded frame by frame through Pillow's GIF plugin. Every
frame gets its own local colour table and graphic control block, so the
output always holds exactly one GIF frame per appended frame, identical
neighbours included. Writing goes through a temporary file in the target
directory that is renamed over the output only after the whole GIF has been
written.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
from PIL import GifImagePlugin, Image

from .config import FRAME_DELAY_CS, LOOP_COUNT
from .errors import EncodingError, FileWriteError

logger = logging.getLogger(__name__)

# Pillow expresses GIF delays in milliseconds, the container in 1/100 s
MS_PER_CS = 10
GIF_TRAILER = b";"


def to_palette_image(frame: np.ndarray) -> Image.Image:
    """Quantise an RGB frame to an adaptive 256-colour palette image."""
    return Image.fromarray(frame).convert("P", palette=Image.Palette.ADAPTIVE)


class GifAssembler:
    """Ordered frame accumulator for a looping GIF."""

    def __init__(self, default_delay: int = FRAME_DELAY_CS, loop_count: int = LOOP_COUNT):
        self.default_delay = default_delay
        self.loop_count = loop_count
        self.frames: List[np.ndarray] = []
        self.delays: List[int] = []

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def frame_size(self) -> Optional[tuple]:
        """(width, height) shared by all frames, or None while empty."""
        if not self.frames:
            return None
        height, width = self.frames[0].shape[:2]
        return (width, height)

    def append_frame(self, frame: np.ndarray, delay: Optional[int] = None) -> None:
        """Append an RGB ``uint8`` frame; every frame must share one size."""
        frame = np.asarray(frame)
        if frame.ndim != 3 or frame.shape[2] != 3 or frame.dtype != np.uint8:
            raise EncodingError(
                f"Expected an (H, W, 3) uint8 frame, got shape {frame.shape} dtype {frame.dtype}"
            )
        if self.frames and frame.shape != self.frames[0].shape:
            raise EncodingError(
                f"Frame shape {frame.shape} does not match {self.frames[0].shape}"
            )

        self.frames.append(frame)
        self.delays.append(self.default_delay if delay is None else delay)

    def remove_frame(self, index: int) -> None:
        del self.frames[index]
        del self.delays[index]

    def set_frame_delay(self, index: int, value: int) -> None:
        if value < 0:
            raise ValueError(f"Frame delay must be >= 0, got {value}")
        self.delays[index] = value

    def set_loop_count(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"Loop count must be >= 0, got {count}")
        self.loop_count = count

    def encode(self) -> bytes:
        """Encode all frames as GIF bytes.

        The first frame also supplies the logical screen, the global colour
        table and the NETSCAPE2.0 loop block.
        """
        if not self.frames:
            raise EncodingError("Cannot encode a GIF without frames")

        chunks: List[bytes] = []
        try:
            for index, (frame, delay) in enumerate(zip(self.frames, self.delays)):
                image = to_palette_image(frame)
                if index == 0:
                    header, _ = GifImagePlugin.getheader(image, info={"loop": self.loop_count})
                    chunks.extend(header)
                chunks.extend(
                    GifImagePlugin.getdata(image, duration=delay * MS_PER_CS, include_color_table=True)
                )
            chunks.append(GIF_TRAILER)
            data = b"".join(chunks)
        except Exception as exc:
            raise EncodingError(f"GIF encoding failed: {exc}") from exc

        logger.debug("Encoded %d frames into %d bytes", len(self.frames), len(data))
        return data

    def save(self, output_path: Union[str, Path]) -> Path:
        """Encode and atomically write the GIF to ``output_path``."""
        data = self.encode()
        target = Path(output_path)
        directory = target.parent

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=str(directory)
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, target)
        except OSError as exc:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise FileWriteError(f"Cannot write {target}: {exc}") from exc

        logger.info("Wrote %s (%d frames, %d bytes)", target, len(self.frames), len(data))
        return target
