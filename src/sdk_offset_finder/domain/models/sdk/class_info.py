#!/usr/bin/env python3

"""Class information model for SDK layouts."""

from dataclasses import dataclass, field

from .field_info import FieldInfo


@dataclass
class ClassInfo:
    """Information about a class or struct.

    Fields keep their declaration order. A class is only appended to while
    it is being parsed; once it is finalized into an ``Sdk`` it is treated
    as read-only.
    """

    name: str
    fields: list[FieldInfo] = field(default_factory=list)
    scope_name: str | None = None
    """Type scope grouping the class (JSON schema inputs only)"""
    declaration_line: int | None = None

    def add_field(self, field_info: FieldInfo) -> None:
        """Append a field in declaration order."""
        self.fields.append(field_info)
