#!/usr/bin/env python3

"""SDK layout domain models."""

from .class_info import ClassInfo
from .field_entry import FieldEntry, NormalizedField
from .field_info import FieldInfo
from .line_kinds import NEUTRAL_LINE_KINDS, LineKind, describe_line_kind
from .sdk import Sdk

__all__ = [
    "ClassInfo",
    "FieldEntry",
    "FieldInfo",
    "LineKind",
    "NEUTRAL_LINE_KINDS",
    "NormalizedField",
    "Sdk",
    "describe_line_kind",
]
