#!/usr/bin/env python3

"""Query-facing field projections."""

from dataclasses import dataclass
from typing import NamedTuple


class NormalizedField(NamedTuple):
    """Input-format independent description of one field."""

    scope_name: str | None
    class_name: str
    field_name: str
    offset: int
    type_name: str | None


@dataclass(frozen=True)
class FieldEntry:
    """A field plus its owning class (and type scope, if any)."""

    name: str
    type_name: str | None
    class_name: str
    scope_name: str | None = None

    @classmethod
    def from_normalized(cls, normalized: NormalizedField) -> "FieldEntry":
        """Project a normalized field into an index entry."""
        return cls(
            name=normalized.field_name,
            type_name=normalized.type_name,
            class_name=normalized.class_name,
            scope_name=normalized.scope_name,
        )
