#!/usr/bin/env python3

"""Domain models for the SDK offset finder."""

from . import sdk

__all__ = [
    "sdk",
]
