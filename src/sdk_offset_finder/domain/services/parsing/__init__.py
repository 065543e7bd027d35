#!/usr/bin/env python3

"""Parsing services turning SDK inputs into Sdk models."""

from .header_dump_parser import HeaderDumpParser, ParserState, Region, parse_header_dump
from .line_classifier import ClassifiedLine, LineClassifier, classify_line
from .schema_adapter import (
    SchemaDirectoryAdapter,
    SchemaFileAdapter,
    build_network_var_types,
    merge_scopes,
    parse_flat_schema,
    parse_schema_fragment,
)

__all__ = [
    "ClassifiedLine",
    "HeaderDumpParser",
    "LineClassifier",
    "ParserState",
    "Region",
    "SchemaDirectoryAdapter",
    "SchemaFileAdapter",
    "build_network_var_types",
    "classify_line",
    "merge_scopes",
    "parse_flat_schema",
    "parse_header_dump",
    "parse_schema_fragment",
]
