#!/usr/bin/env python3

"""Application layer: input loading and the interactive shell."""

from .interactive_shell import InteractiveShell
from .sdk_loader import SdkLoader

__all__ = [
    "InteractiveShell",
    "SdkLoader",
]
