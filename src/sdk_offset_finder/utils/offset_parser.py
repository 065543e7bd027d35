#!/usr/bin/env python3

"""Hexadecimal offset parsing.

Used both for offset comments in header dumps (``// 0x1A8``) and for
offsets typed into the interactive shell (``0x1a8`` or ``1a8``).

Python's ``int(text, 16)`` is more permissive than the offset syntax
(it accepts signs, underscores and inner whitespace), so digits are
validated against an explicit pattern first.

Example:
    parse_hex_digits("1A8") -> 424
    parse_offset_input("0x1a8") -> 424
    parse_offset_input("0x") -> None
"""

import re

HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")
HEX_PREFIXES = ("0x", "0X")


def parse_hex_digits(text: str) -> int | None:
    """Parse a bare run of hex digits (no prefix, no sign)."""
    if not HEX_DIGITS_RE.fullmatch(text):
        return None
    return int(text, 16)


def parse_offset_input(text: str) -> int | None:
    """Parse a user supplied offset with an optional ``0x`` prefix.

    Args:
        text: Raw input; surrounding whitespace is ignored

    Returns:
        Parsed offset, or None if the text is not a valid hex offset
    """
    text = text.strip()
    if text.startswith(HEX_PREFIXES):
        text = text[2:]
    return parse_hex_digits(text)
