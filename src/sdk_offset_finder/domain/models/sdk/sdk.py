#!/usr/bin/env python3

"""SDK model: every class recovered from one input."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .class_info import ClassInfo
from .field_entry import NormalizedField


@dataclass
class Sdk:
    """Ordered collection of classes built once per run."""

    classes: list[ClassInfo] = field(default_factory=list)

    def iter_fields(self) -> Iterator[NormalizedField]:
        """Yield every field in class order, then declaration order."""
        for class_info in self.classes:
            for field_info in class_info.fields:
                yield NormalizedField(
                    scope_name=class_info.scope_name,
                    class_name=class_info.name,
                    field_name=field_info.name,
                    offset=field_info.offset,
                    type_name=field_info.type_name,
                )

    @property
    def field_count(self) -> int:
        return sum(len(class_info.fields) for class_info in self.classes)

    def find_class(self, name: str) -> ClassInfo | None:
        """Return the first class with the given name, if any."""
        for class_info in self.classes:
            if class_info.name == name:
                return class_info
        return None
