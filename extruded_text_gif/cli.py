"""
Command line entry point.

Usage:
  extruded-text-gif "Hello!" --output hello.gif --frames 48 --depth 16

Option names match case-insensitively, also in the --name=value form.
Malformed --frames/--depth values are ignored and the default is kept.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    DEFAULT_DEPTH,
    DEFAULT_FRAMES,
    DEFAULT_OUTPUT,
    DEFAULT_TEXT,
    AnimationConfig,
)
from .errors import TextGifError
from .generator import render_animation

logger = logging.getLogger(__name__)

OPTION_FLAGS = ("--output", "-o", "--frames", "-f", "--depth", "-d", "--log-level")


def parse_int(value: Optional[str], default: int) -> int:
    """Parse ``value`` as an int, keeping ``default`` when it is not one."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        logger.debug("Ignoring non-integer value %r", value)
        return default


def normalize_flag(arg: str) -> str:
    """Lower-case a known option name, including the ``--name=value`` form."""
    name, sep, value = arg.partition("=")
    if name.lower() in OPTION_FLAGS:
        return name.lower() + sep + value
    return arg


def normalize_flags(argv: List[str]) -> List[str]:
    return [normalize_flag(arg) for arg in argv]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="extruded-text-gif",
        description="Render text as an animated, pseudo-3D extruded GIF."
    )
    p.add_argument("text", nargs="?", default=DEFAULT_TEXT, help="Text to render.")
    p.add_argument("--output", "-o", nargs="?", default=None, help=f"Output GIF path (default {DEFAULT_OUTPUT}).")
    p.add_argument("--frames", "-f", nargs="?", default=None, help=f"Number of frames (default {DEFAULT_FRAMES}).")
    p.add_argument("--depth", "-d", nargs="?", default=None, help=f"Extrusion depth in pixels (default {DEFAULT_DEPTH}).")
    p.add_argument("--log-level", default="INFO", type=str.upper,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    argv = sys.argv[1:] if argv is None else argv
    args, unknown = build_parser().parse_known_args(normalize_flags(argv))
    if unknown:
        logger.debug("Ignoring unrecognised arguments: %s", " ".join(unknown))

    args.output = args.output or DEFAULT_OUTPUT
    args.frames = parse_int(args.frames, DEFAULT_FRAMES)
    args.depth = parse_int(args.depth, DEFAULT_DEPTH)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(message)s")

    logger.info("Generating GIF...")
    logger.info(" Text:     %s", args.text)
    logger.info(" Output:   %s", args.output)
    logger.info(" Frames:   %d", args.frames)
    logger.info(" Depth:    %d", args.depth)

    try:
        config = AnimationConfig(
            text=args.text,
            output_path=args.output,
            frame_count=args.frames,
            depth=args.depth,
        )
        render_animation(config)
    except (TextGifError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
