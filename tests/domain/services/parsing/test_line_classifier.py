#!/usr/bin/env python3

"""Unit tests for pseudo-header line classification."""

import pytest

from sdk_offset_finder.domain.models.sdk import LineKind
from sdk_offset_finder.domain.services.parsing import LineClassifier, classify_line


class TestLiteralLineKinds:
    """Lines recognized by exact text or prefix."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("line", "kind"),
        [
            ("", LineKind.BLANK),
            ("   ", LineKind.BLANK),
            ("// Generated using a dumper", LineKind.COMMENT),
            ("#pragma once", LineKind.DIRECTIVE),
            ("#include <cstdint>", LineKind.DIRECTIVE),
            ("public:", LineKind.STRUCTURAL_SKIP),
            ("private:", LineKind.STRUCTURAL_SKIP),
            ("{", LineKind.STRUCTURAL_SKIP),
            ("}", LineKind.STRUCTURAL_SKIP),
            ("};", LineKind.REGION_CLOSE),
            ("struct", LineKind.BITFIELD_OPEN),
            ("struct CEntityIdentity;", LineKind.FORWARD_DECL),
        ],
    )
    def test_literal_kinds(self, line: str, kind: LineKind) -> None:
        assert LineClassifier.classify(line).kind is kind

    @pytest.mark.unit
    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert classify_line("    };\n").kind is LineKind.REGION_CLOSE


class TestTypeAndEnumOpen:
    """Class, struct and enum headers."""

    @pytest.mark.unit
    def test_class_header_carries_name(self) -> None:
        result = classify_line("class C_BaseEntity")
        assert result.kind is LineKind.TYPE_OPEN
        assert result.name == "C_BaseEntity"

    @pytest.mark.unit
    def test_struct_header_with_base_class(self) -> None:
        result = classify_line("struct CGameSceneNode : public CEntityComponent")
        assert result.kind is LineKind.TYPE_OPEN
        assert result.name == "CGameSceneNode"

    @pytest.mark.unit
    def test_qualified_class_name(self) -> None:
        result = classify_line("class client::Foo")
        assert result.kind is LineKind.TYPE_OPEN
        assert result.name == "client::Foo"

    @pytest.mark.unit
    def test_enum_header_carries_name(self) -> None:
        result = classify_line("enum class EntityFlags : uint32_t")
        assert result.kind is LineKind.ENUM_OPEN
        assert result.name == "EntityFlags"

    @pytest.mark.unit
    def test_enum_keyword_needs_word_boundary(self) -> None:
        assert classify_line("enum classy").kind is LineKind.UNRECOGNIZED

    @pytest.mark.unit
    def test_elaborated_struct_field_is_not_a_header(self) -> None:
        result = classify_line("struct Foo* m_pFoo; // 0x10")
        assert result.kind is LineKind.FIELD_DECL
        assert result.name == "m_pFoo"


class TestBodyLines:
    """Lines found inside class and enum bodies."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        [
            "char pad_0000[16]; // 0x0",
            "uint8_t pad_01A8[0x8]; // 0x1a8",
            "unsigned char pad0010[4]; // 0x10",
            "uint8_t __pad0010[0x8]; // 0x10",
            "[[maybe_unused]] uint8_t __pad0000[0x10]; // 0x0",
        ],
    )
    def test_padding(self, line: str) -> None:
        assert classify_line(line).kind is LineKind.PADDING

    @pytest.mark.unit
    def test_static_accessor(self) -> None:
        line = "static CGlobalVars& Get() { return *reinterpret_cast<CGlobalVars*>(0x1234); }"
        assert classify_line(line).kind is LineKind.STATIC_ACCESSOR

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["FL_ONGROUND = 0x1,", "FL_DUCKING = 0x2", "A=0xFF,"])
    def test_enum_value(self, line: str) -> None:
        assert classify_line(line).kind is LineKind.ENUM_VALUE

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line", ["uint8_t m_flag: 1;", "uint16_t m_bits : 12;", "int8_t m_signed: 3;"]
    )
    def test_bitfield(self, line: str) -> None:
        assert classify_line(line).kind is LineKind.BITFIELD

    @pytest.mark.unit
    def test_wide_bitfield_is_unrecognized(self) -> None:
        assert classify_line("uint32_t m_flag: 1;").kind is LineKind.UNRECOGNIZED


class TestFieldDecl:
    """Plain field declarations."""

    @pytest.mark.unit
    def test_simple_field(self) -> None:
        result = classify_line("int m_x; // 0x8")
        assert result.kind is LineKind.FIELD_DECL
        assert result.type_name == "int"
        assert result.name == "m_x"
        assert result.offset_text == "8"

    @pytest.mark.unit
    def test_pointer_and_template_types(self) -> None:
        result = classify_line("CUtlVector<CHandle<C_BaseEntity>>* m_pChildren; // 0x1A8")
        assert result.kind is LineKind.FIELD_DECL
        assert result.type_name == "CUtlVector<CHandle<C_BaseEntity>>*"
        assert result.offset_text == "1A8"

    @pytest.mark.unit
    def test_multi_word_type(self) -> None:
        result = classify_line("unsigned int m_nCount; // 0x20")
        assert result.type_name == "unsigned int"
        assert result.name == "m_nCount"

    @pytest.mark.unit
    def test_array_suffix_moves_to_type(self) -> None:
        result = classify_line("char m_szName[32]; // 0x350")
        assert result.kind is LineKind.FIELD_DECL
        assert result.name == "m_szName"
        assert result.type_name == "char[32]"

    @pytest.mark.unit
    def test_malformed_offset_is_still_a_field(self) -> None:
        """Offset text is validated by the parser, not the classifier."""
        result = classify_line("int m_x; // 0xZZ")
        assert result.kind is LineKind.FIELD_DECL
        assert result.offset_text == "ZZ"


class TestUnrecognized:
    """Lines matching no pattern."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        [
            "int m_x;",
            "int m_x; // 8",
            "void Update();",
            "namespace client {",
            "protected:",
        ],
    )
    def test_unrecognized(self, line: str) -> None:
        assert classify_line(line).kind is LineKind.UNRECOGNIZED
