#!/usr/bin/env python3

"""Unit tests for hexadecimal offset parsing."""

import pytest

from sdk_offset_finder.utils.offset_parser import parse_hex_digits, parse_offset_input


class TestParseHexDigits:
    """Test bare hex digit parsing used for dump offset comments."""

    @pytest.mark.unit
    def test_parse_upper_and_lower_case(self) -> None:
        assert parse_hex_digits("1A8") == 424
        assert parse_hex_digits("1a8") == 424
        assert parse_hex_digits("0") == 0

    @pytest.mark.unit
    def test_parse_large_offset(self) -> None:
        """Offsets have no fixed bit width."""
        assert parse_hex_digits("FFFFFFFFFFFFFFFFFF") == 0xFFFFFFFFFFFFFFFFFF

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "xyz", "1_0", "+10", "-10", "1 0", "0x10"])
    def test_reject_malformed_digits(self, text: str) -> None:
        assert parse_hex_digits(text) is None


class TestParseOffsetInput:
    """Test user supplied offsets from the interactive shell."""

    @pytest.mark.unit
    def test_prefix_is_optional(self) -> None:
        assert parse_offset_input("0x1A8") == 424
        assert parse_offset_input("1a8") == 424
        assert parse_offset_input("0X1a8") == 424

    @pytest.mark.unit
    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_offset_input("  0x10\n") == 16

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["0x", "", "zz", "0x-1", "0xg", "exit"])
    def test_invalid_input_returns_none(self, text: str) -> None:
        assert parse_offset_input(text) is None
