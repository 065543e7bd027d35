#!/usr/bin/env python3

"""Line classification for pseudo-header dumps.

Maps a single trimmed line to exactly one LineKind plus whatever the
line carries (class name, field type/name, offset text). Classification
is stateless; whether a kind is allowed where it appears is decided by
HeaderDumpParser.

Example dump::

    #pragma once
    class CBaseEntity
    {
    public:
        uint32_t m_iHealth; // 0x344
        char pad_0348[8]; // 0x348
        struct
        {
            uint8_t m_bDormant: 1;
        };
    };
"""

import re
from dataclasses import dataclass

from ...models.sdk import LineKind

IDENTIFIER = r"[A-Za-z_]\w*"
QUALIFIED_IDENTIFIER = r"[A-Za-z_][\w:]*"
HEX_DIGITS = r"[0-9A-Fa-f]+"
TRAILING_COMMENT = r"(?:\s*//.*)?"

STRUCTURAL_SKIP_LINES = frozenset(["public:", "private:", "{", "}"])
DIRECTIVE_PREFIXES = ("#pragma", "#include")

FORWARD_DECL_RE = re.compile(rf"^(?:struct|class)\s+{QUALIFIED_IDENTIFIER}\s*;$")
ENUM_OPEN_RE = re.compile(rf"^enum class\b(?:\s+(?P<name>{QUALIFIED_IDENTIFIER}))?")
TYPE_OPEN_RE = re.compile(
    rf"^(?:class|struct)\s+(?P<name>{QUALIFIED_IDENTIFIER})"
    r"(?:\s+final)?"
    r"(?:\s*:\s*[^;{}]+?)?"
    rf"\s*\{{?{TRAILING_COMMENT}$"
)
PADDING_RE = re.compile(
    r"^(?:\[\[[^\]]*\]\]\s*)?"
    rf"[\w:]+(?:\s+[\w:]+)?\s+_*pad_?[0-9A-Fa-f]{{4}}\[(?:0x)?{HEX_DIGITS}\]\s*;"
    rf"\s*//\s*0x{HEX_DIGITS}$"
)
STATIC_ACCESSOR_RE = re.compile(
    rf"^static\s+[^;{{}}]+?&\s*{IDENTIFIER}\s*\([^)]*\)\s*(?:const\s*)?\{{.*\}}\s*;?$"
)
ENUM_VALUE_RE = re.compile(rf"^{IDENTIFIER}\s*=\s*0x{HEX_DIGITS}\s*,?{TRAILING_COMMENT}$")
BITFIELD_RE = re.compile(
    rf"^(?:std::)?u?int(?:8|16)_t\s+{IDENTIFIER}\s*:\s*\d+\s*;{TRAILING_COMMENT}$"
)
FIELD_DECL_RE = re.compile(
    r"^(?P<type>[^;]+?[\s*&])\s*"
    rf"(?P<name>{IDENTIFIER})"
    r"(?P<array>(?:\[[^\]]*\])*)"
    r"\s*;\s*//\s*0x(?P<offset>\S*)$"
)

# Checked in order after the literal kinds; padding and accessors share the
# trailing offset comment convention with plain fields so they come first.
PATTERN_KINDS: tuple[tuple[LineKind, re.Pattern[str]], ...] = (
    (LineKind.PADDING, PADDING_RE),
    (LineKind.STATIC_ACCESSOR, STATIC_ACCESSOR_RE),
    (LineKind.ENUM_VALUE, ENUM_VALUE_RE),
    (LineKind.BITFIELD, BITFIELD_RE),
)


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classifying one line."""

    kind: LineKind
    name: str | None = None
    type_name: str | None = None
    offset_text: str | None = None


class LineClassifier:
    """Classifies pseudo-header lines.

    All methods are static as the patterns are process-wide constants.
    """

    @staticmethod
    def classify(line: str) -> ClassifiedLine:
        """Classify a single line of a header dump.

        Args:
            line: Line text; surrounding whitespace is ignored

        Returns:
            ClassifiedLine with kind UNRECOGNIZED if no pattern matches
        """
        text = line.strip()

        if not text:
            return ClassifiedLine(LineKind.BLANK)
        if text.startswith("//"):
            return ClassifiedLine(LineKind.COMMENT)
        if text.startswith(DIRECTIVE_PREFIXES):
            return ClassifiedLine(LineKind.DIRECTIVE)
        if text in STRUCTURAL_SKIP_LINES:
            return ClassifiedLine(LineKind.STRUCTURAL_SKIP)
        if text == "};":
            return ClassifiedLine(LineKind.REGION_CLOSE)
        if text == "struct":
            return ClassifiedLine(LineKind.BITFIELD_OPEN)
        if FORWARD_DECL_RE.match(text):
            return ClassifiedLine(LineKind.FORWARD_DECL)

        enum_match = ENUM_OPEN_RE.match(text)
        if enum_match:
            return ClassifiedLine(LineKind.ENUM_OPEN, name=enum_match.group("name"))

        type_match = TYPE_OPEN_RE.match(text)
        if type_match:
            return ClassifiedLine(LineKind.TYPE_OPEN, name=type_match.group("name"))

        for kind, pattern in PATTERN_KINDS:
            if pattern.match(text):
                return ClassifiedLine(kind)

        field_match = FIELD_DECL_RE.match(text)
        if field_match:
            # Array dimensions stay with the type: "char m_name[32]" -> char[32]
            type_name = field_match.group("type").strip() + field_match.group("array")
            return ClassifiedLine(
                LineKind.FIELD_DECL,
                name=field_match.group("name"),
                type_name=type_name,
                offset_text=field_match.group("offset"),
            )

        return ClassifiedLine(LineKind.UNRECOGNIZED)


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single line (module-level convenience wrapper)."""
    return LineClassifier.classify(line)
