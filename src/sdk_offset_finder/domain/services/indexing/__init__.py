#!/usr/bin/env python3

"""Offset indexing services."""

from .offset_index import OffsetIndex, build_offset_index, lookup

__all__ = [
    "OffsetIndex",
    "build_offset_index",
    "lookup",
]
