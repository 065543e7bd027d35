#!/usr/bin/env python3

"""Pseudo-header dump parsing.

This module folds classified lines into an Sdk. The parser tracks which
region it is in (top level, class body, bitfield sub-block of a class
body, enum body) and dispatches on (region, line kind). Any line that is
not valid in the current region aborts the parse with a
HeaderDumpSyntaxError naming the line number and enclosing construct.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from ....infrastructure.logging import get_logger, log_timing
from ....utils.offset_parser import parse_hex_digits
from ...errors import HeaderDumpSyntaxError
from ...models.sdk import (
    NEUTRAL_LINE_KINDS,
    ClassInfo,
    FieldInfo,
    LineKind,
    Sdk,
    describe_line_kind,
)
from .line_classifier import ClassifiedLine, LineClassifier

logger = get_logger(__name__)


class Region(Enum):
    """Region of the dump the parser is currently in."""

    TOP_LEVEL = "top_level"
    CLASS = "class"
    BITFIELD_BLOCK = "bitfield_block"
    ENUM = "enum"


@dataclass(frozen=True)
class ParserState:
    """Current region plus the construct being accumulated.

    ``current_class`` is set in CLASS and BITFIELD_BLOCK regions,
    ``enum_name`` in the ENUM region (when the enum is named).
    """

    region: Region
    current_class: ClassInfo | None = None
    enum_name: str | None = None
    opened_at: int | None = None

    @property
    def construct_name(self) -> str | None:
        if self.current_class is not None:
            return self.current_class.name
        return self.enum_name


TOP_LEVEL = ParserState(Region.TOP_LEVEL)

Handler = Callable[[ParserState, ClassifiedLine, int, list[ClassInfo]], ParserState]


def _describe_context(state: ParserState) -> str:
    if state.region is Region.CLASS:
        return f"in class '{state.construct_name}'"
    if state.region is Region.BITFIELD_BLOCK:
        return f"in bitfield block of class '{state.construct_name}'"
    if state.region is Region.ENUM:
        return f"in enum '{state.enum_name}'" if state.enum_name else "in enum"
    return "at top level"


class HeaderDumpParser:
    """Parses pseudo-header dumps into Sdk objects.

    The transition table is keyed by (region, line kind). Pairs absent
    from the table are grammar errors; their messages come from
    ``_error_cause``.
    """

    def __init__(self, classifier: LineClassifier | None = None) -> None:
        self.classifier = classifier or LineClassifier()
        self._transitions: dict[tuple[Region, LineKind], Handler] = {
            (Region.TOP_LEVEL, LineKind.TYPE_OPEN): self._open_class,
            (Region.TOP_LEVEL, LineKind.ENUM_OPEN): self._open_enum,
            (Region.CLASS, LineKind.BITFIELD_OPEN): self._open_bitfield_block,
            (Region.CLASS, LineKind.REGION_CLOSE): self._close_class,
            (Region.BITFIELD_BLOCK, LineKind.REGION_CLOSE): self._close_bitfield_block,
            (Region.ENUM, LineKind.REGION_CLOSE): self._close_enum,
            (Region.CLASS, LineKind.PADDING): self._ignore,
            (Region.CLASS, LineKind.STATIC_ACCESSOR): self._ignore,
            (Region.ENUM, LineKind.ENUM_VALUE): self._ignore,
            (Region.BITFIELD_BLOCK, LineKind.BITFIELD): self._ignore,
            (Region.CLASS, LineKind.FIELD_DECL): self._add_field,
        }
        for region in Region:
            for kind in NEUTRAL_LINE_KINDS:
                self._transitions[(region, kind)] = self._ignore

    @log_timing
    def parse_file(self, path: Path) -> Sdk:
        """Parse a header dump file.

        Args:
            path: Path to the dump

        Returns:
            Sdk with every class in declaration order

        Raises:
            OSError: If the file cannot be read
            HeaderDumpSyntaxError: On the first grammar violation
        """
        with open(path, encoding="utf-8") as f:
            return self.parse_lines(f)

    def parse_text(self, text: str) -> Sdk:
        """Parse a header dump held in memory."""
        return self.parse_lines(text.splitlines())

    def parse_lines(self, lines: Iterable[str]) -> Sdk:
        """Fold lines into an Sdk.

        Args:
            lines: Lines of the dump, with or without line terminators

        Returns:
            Sdk with every class in declaration order

        Raises:
            HeaderDumpSyntaxError: On the first grammar violation, or if a
                class or enum is still open at end of input
        """
        state = TOP_LEVEL
        completed: list[ClassInfo] = []
        line_number = 0

        for line_number, raw_line in enumerate(lines, 1):
            text = raw_line.strip()
            classified = self.classifier.classify(text)

            if classified.kind is LineKind.FIELD_DECL:
                # Offset text is validated before the region check
                self._validate_field_offset(state, classified, line_number, text)

            handler = self._transitions.get((state.region, classified.kind))
            if handler is None:
                raise HeaderDumpSyntaxError(
                    line_number,
                    self._error_cause(state, classified),
                    construct=state.construct_name,
                    line=text,
                )
            state = handler(state, classified, line_number, completed)

        self._check_end_of_input(state, line_number)

        logger.debug(f"Parsed {len(completed)} classes from {line_number} lines")
        return Sdk(classes=completed)

    @staticmethod
    def _validate_field_offset(
        state: ParserState, classified: ClassifiedLine, line_number: int, text: str
    ) -> None:
        if parse_hex_digits(classified.offset_text or "") is None:
            raise HeaderDumpSyntaxError(
                line_number,
                f"invalid hex offset '0x{classified.offset_text}' for field '{classified.name}'",
                construct=state.construct_name,
                line=text,
            )

    @staticmethod
    def _check_end_of_input(state: ParserState, line_number: int) -> None:
        if state.region is Region.TOP_LEVEL:
            return

        opened_at = state.opened_at or line_number
        if state.region is Region.ENUM:
            name = f" '{state.enum_name}'" if state.enum_name else ""
            cause = f"unterminated enum{name} (opened on line {opened_at})"
        elif state.region is Region.BITFIELD_BLOCK:
            cause = (
                f"unterminated class '{state.construct_name}' (opened on line {opened_at}, "
                "bitfield block still open)"
            )
        else:
            cause = f"unterminated class '{state.construct_name}' (opened on line {opened_at})"
        raise HeaderDumpSyntaxError(opened_at, cause, construct=state.construct_name)

    @staticmethod
    def _error_cause(state: ParserState, classified: ClassifiedLine) -> str:
        """Describe why a line kind is invalid in the current region."""
        kind = classified.kind
        region = state.region
        context = _describe_context(state)

        if kind is LineKind.UNRECOGNIZED:
            return f"unrecognized line {context}"
        if kind is LineKind.TYPE_OPEN:
            if region is Region.ENUM:
                return f"class '{classified.name}' declared {context}"
            return f"nested class '{classified.name}' {context}"
        if kind is LineKind.ENUM_OPEN:
            return f"enum declared {context}"
        if kind is LineKind.BITFIELD_OPEN:
            if region is Region.BITFIELD_BLOCK:
                return f"nested bitfield block {context}"
            return f"bitfield block outside class ({context})"
        if kind is LineKind.REGION_CLOSE:
            return "unexpected close '};' at top level"
        if kind is LineKind.PADDING:
            return f"padding field outside class body ({context})"
        if kind is LineKind.STATIC_ACCESSOR:
            return f"static accessor outside class body ({context})"
        if kind is LineKind.ENUM_VALUE:
            return f"enum value outside enum ({context})"
        if kind is LineKind.BITFIELD:
            return f"bitfield outside bitfield block ({context})"
        if kind is LineKind.FIELD_DECL:
            return f"field '{classified.name}' outside class or inside bitfield block ({context})"
        return f"unexpected {describe_line_kind(kind)} {context}"

    @staticmethod
    def _ignore(
        state: ParserState, classified: ClassifiedLine, line_number: int, completed: list[ClassInfo]
    ) -> ParserState:
        return state

    @staticmethod
    def _open_class(
        state: ParserState, classified: ClassifiedLine, line_number: int, completed: list[ClassInfo]
    ) -> ParserState:
        assert classified.name is not None
        class_info = ClassInfo(name=classified.name, declaration_line=line_number)
        return ParserState(Region.CLASS, current_class=class_info, opened_at=line_number)

    @staticmethod
    def _open_enum(
        state: ParserState, classified: ClassifiedLine, line_number: int, completed: list[ClassInfo]
    ) -> ParserState:
        return ParserState(Region.ENUM, enum_name=classified.name, opened_at=line_number)

    @staticmethod
    def _open_bitfield_block(
        state: ParserState, classified: ClassifiedLine, line_number: int, completed: list[ClassInfo]
    ) -> ParserState:
        return replace(state, region=Region.BITFIELD_BLOCK)

    @staticmethod
    def _close_bitfield_block(
        state: ParserState, classified: ClassifiedLine, line_number: int, completed: list[ClassInfo]
    ) -> ParserState:
        return replace(state, region=Region.CLASS)

    @staticmethod
    def _close_class(
        state: ParserState, classified: ClassifiedLine, line_number: int, completed: list[ClassInfo]
    ) -> ParserState:
        assert state.current_class is not None
        completed.append(state.current_class)
        logger.debug(
            f"Finalized class {state.current_class.name} "
            f"({len(state.current_class.fields)} fields, line {line_number})"
        )
        return TOP_LEVEL

    @staticmethod
    def _close_enum(
        state: ParserState, classified: ClassifiedLine, line_number: int, completed: list[ClassInfo]
    ) -> ParserState:
        return TOP_LEVEL

    def _add_field(
        self,
        state: ParserState,
        classified: ClassifiedLine,
        line_number: int,
        completed: list[ClassInfo],
    ) -> ParserState:
        assert state.current_class is not None
        assert classified.name is not None
        offset = parse_hex_digits(classified.offset_text or "")
        assert offset is not None
        state.current_class.add_field(
            FieldInfo(name=classified.name, type_name=classified.type_name, offset=offset)
        )
        return state


def parse_header_dump(text: str) -> Sdk:
    """Parse header dump text into an Sdk."""
    return HeaderDumpParser().parse_text(text)
