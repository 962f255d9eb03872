"""
Allow ``python -m extruded_text_gif``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
