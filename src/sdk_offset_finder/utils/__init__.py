"""Utilities module initialization."""

from .offset_parser import parse_hex_digits, parse_offset_input

__all__ = [
    "parse_hex_digits",
    "parse_offset_input",
]
