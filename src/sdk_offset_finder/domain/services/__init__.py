#!/usr/bin/env python3

"""Domain services layer."""

from . import indexing, parsing

__all__ = [
    "indexing",
    "parsing",
]
