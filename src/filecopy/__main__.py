"""Allow running the copier with ``python -m filecopy``."""

import sys

from .cli import main

sys.exit(main(prog="filecopy"))
