#!/usr/bin/env python3

"""Line kinds recognized in pseudo-header dumps.

Each kind maps a line of the dump to one grammatical role. The parser
decides whether that role is valid in its current region.
"""

from enum import Enum


class LineKind(Enum):
    """Grammatical role of a single dump line."""

    BLANK = "blank"
    COMMENT = "comment"
    DIRECTIVE = "directive"  # #pragma / #include
    STRUCTURAL_SKIP = "structural_skip"  # public:, private:, {, }
    FORWARD_DECL = "forward_decl"
    REGION_CLOSE = "region_close"  # };
    ENUM_OPEN = "enum_open"
    BITFIELD_OPEN = "bitfield_open"  # bare "struct"
    TYPE_OPEN = "type_open"
    PADDING = "padding"
    STATIC_ACCESSOR = "static_accessor"
    ENUM_VALUE = "enum_value"
    BITFIELD = "bitfield"
    FIELD_DECL = "field_decl"
    UNRECOGNIZED = "unrecognized"


# Kinds accepted as no-ops in every region
NEUTRAL_LINE_KINDS: frozenset[LineKind] = frozenset(
    [
        LineKind.BLANK,
        LineKind.COMMENT,
        LineKind.DIRECTIVE,
        LineKind.STRUCTURAL_SKIP,
        LineKind.FORWARD_DECL,
    ]
)

LINE_KIND_DESCRIPTIONS: dict[LineKind, str] = {
    LineKind.BLANK: "blank line",
    LineKind.COMMENT: "comment",
    LineKind.DIRECTIVE: "preprocessor directive",
    LineKind.STRUCTURAL_SKIP: "access specifier or brace",
    LineKind.FORWARD_DECL: "forward declaration",
    LineKind.REGION_CLOSE: "closing '};'",
    LineKind.ENUM_OPEN: "enum declaration",
    LineKind.BITFIELD_OPEN: "bitfield block",
    LineKind.TYPE_OPEN: "class declaration",
    LineKind.PADDING: "padding field",
    LineKind.STATIC_ACCESSOR: "static accessor",
    LineKind.ENUM_VALUE: "enum value",
    LineKind.BITFIELD: "bitfield",
    LineKind.FIELD_DECL: "field declaration",
    LineKind.UNRECOGNIZED: "unrecognized line",
}


def describe_line_kind(kind: LineKind) -> str:
    """Get a human-readable name for a line kind."""
    return LINE_KIND_DESCRIPTIONS.get(kind, kind.value)
