#!/usr/bin/env python3

"""Unit tests for SDK models."""

import pytest

from sdk_offset_finder.domain.models.sdk import (
    ClassInfo,
    FieldEntry,
    FieldInfo,
    LineKind,
    NormalizedField,
    Sdk,
    describe_line_kind,
)


@pytest.mark.unit
class TestSdk:
    """Sdk traversal helpers."""

    def test_iter_fields_follows_class_then_declaration_order(self) -> None:
        sdk = Sdk(
            classes=[
                ClassInfo("A", [FieldInfo("m_a2", "int", 4), FieldInfo("m_a1", "int", 0)], "s"),
                ClassInfo("B", [FieldInfo("m_b", None, 0)]),
            ]
        )
        assert list(sdk.iter_fields()) == [
            NormalizedField("s", "A", "m_a2", 4, "int"),
            NormalizedField("s", "A", "m_a1", 0, "int"),
            NormalizedField(None, "B", "m_b", 0, None),
        ]
        assert sdk.field_count == 3

    def test_find_class(self) -> None:
        sdk = Sdk(classes=[ClassInfo("A"), ClassInfo("B")])
        assert sdk.find_class("B") is sdk.classes[1]
        assert sdk.find_class("C") is None

    def test_field_entry_projection(self) -> None:
        entry = FieldEntry.from_normalized(NormalizedField("s", "A", "m_x", 8, "int"))
        assert entry == FieldEntry(name="m_x", type_name="int", class_name="A", scope_name="s")

    def test_line_kind_descriptions(self) -> None:
        assert describe_line_kind(LineKind.REGION_CLOSE) == "closing '};'"
        assert all(describe_line_kind(kind) for kind in LineKind)
