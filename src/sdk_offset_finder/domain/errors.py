#!/usr/bin/env python3

"""Exceptions raised while building an SDK and its offset index."""

from pathlib import Path


class SdkError(Exception):
    """Base class for all startup failures."""


class SchemaFormatError(SdkError, ValueError):
    """Raised when a JSON schema document has an unexpected shape."""

    def __init__(self, message: str, source: Path | None = None, key_path: str | None = None):
        self.source = source
        self.key_path = key_path
        parts = []
        if source is not None:
            parts.append(str(source))
        if key_path:
            parts.append(key_path)
        prefix = ": ".join(parts)
        super().__init__(f"{prefix}: {message}" if prefix else message)
        self.cause = message


class HeaderDumpSyntaxError(SdkError, ValueError):
    """Raised on the first line of a header dump that breaks the grammar.

    Attributes:
        line_number: 1-based line number of the offending line
        cause: Human-readable description of the violation
        construct: Name of the enclosing class or enum, if known
        line: Text of the offending line, if any
    """

    def __init__(
        self,
        line_number: int,
        cause: str,
        construct: str | None = None,
        line: str | None = None,
    ):
        self.line_number = line_number
        self.cause = cause
        self.construct = construct
        self.line = line
        super().__init__(f"line {line_number}: {cause}")
