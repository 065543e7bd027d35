#!/usr/bin/env python3

"""Field information model for SDK layouts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldInfo:
    """Information about a single class field."""

    name: str
    type_name: str | None
    offset: int
