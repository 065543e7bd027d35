"""Allow running the package with ``python -m sdk_offset_finder``."""

from .main import main

main()
