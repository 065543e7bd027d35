#!/usr/bin/env python3

"""JSON schema adapters.

Two JSON layouts describe the same SDK as header dumps do:

Schema directory (one fragment per file, merged by type scope name)::

    {"client.dll": {"classes": {"C_BaseEntity": {
        "fields": {"m_iHealth": 836},
        "metadata": [{"type": "NetworkVarNames", "name": "m_iHealth",
                      "type_name": "int32"}]}}}}

Flat schema file::

    {"client.dll": {"C_BaseEntity": {"m_iHealth": {"offset": 836, "type_": "int32"}}}}

Both are converted into an Sdk whose classes carry their scope name, so
downstream indexing does not depend on the input format.
"""

import json
from pathlib import Path
from typing import Any

from ....infrastructure.logging import get_logger, log_timing
from ...errors import SchemaFormatError
from ...models.sdk import ClassInfo, FieldInfo, Sdk

logger = get_logger(__name__)

# Metadata record tags understood in schema fragments
METADATA_UNKNOWN = "Unknown"
METADATA_NETWORK_CHANGE_CALLBACK = "NetworkChangeCallback"
METADATA_NETWORK_VAR_NAMES = "NetworkVarNames"
METADATA_TAGS = frozenset(
    [METADATA_UNKNOWN, METADATA_NETWORK_CHANGE_CALLBACK, METADATA_NETWORK_VAR_NAMES]
)


def _expect_mapping(value: Any, source: Path | None, key_path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaFormatError(
            f"expected an object, got {type(value).__name__}", source, key_path
        )
    return value


def _expect_offset(value: Any, source: Path | None, key_path: str) -> int:
    # bool is an int subclass but never a valid offset
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaFormatError(
            f"expected a non-negative integer offset, got {value!r}", source, key_path
        )
    return value


def _load_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaFormatError(
                f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}", path
            ) from e
        except UnicodeDecodeError as e:
            raise SchemaFormatError(f"not valid UTF-8: {e.reason}", path) from e


def build_network_var_types(
    metadata: Any, source: Path | None = None, key_path: str = "metadata"
) -> dict[str, str]:
    """Map field names to types from NetworkVarNames metadata records.

    The first record naming a field wins. Records with other tags are
    validated but contribute nothing.

    Args:
        metadata: Metadata list of one class
        source: Fragment path for error messages
        key_path: Key path of the list for error messages

    Returns:
        Dictionary of field name -> type name
    """
    if not isinstance(metadata, list):
        raise SchemaFormatError(
            f"expected a list, got {type(metadata).__name__}", source, key_path
        )

    field_types: dict[str, str] = {}
    for index, record in enumerate(metadata):
        record_path = f"{key_path}[{index}]"
        record = _expect_mapping(record, source, record_path)

        tag = record.get("type")
        if tag not in METADATA_TAGS:
            raise SchemaFormatError(f"unknown metadata type {tag!r}", source, record_path)

        name = record.get("name")
        if not isinstance(name, str):
            raise SchemaFormatError("metadata record without a name", source, record_path)

        if tag != METADATA_NETWORK_VAR_NAMES:
            continue

        type_name = record.get("type_name")
        if not isinstance(type_name, str):
            raise SchemaFormatError(
                "NetworkVarNames record without a type_name", source, record_path
            )
        field_types.setdefault(name, type_name)

    return field_types


def parse_schema_fragment(
    document: Any, source: Path | None = None
) -> dict[str, list[ClassInfo]]:
    """Convert one schema directory fragment into classes grouped by scope.

    Args:
        document: Decoded JSON fragment
        source: Fragment path for error messages

    Returns:
        Dictionary of scope name -> classes in document order
    """
    document = _expect_mapping(document, source, "$")

    scopes: dict[str, list[ClassInfo]] = {}
    for scope_name, scope in document.items():
        scope = _expect_mapping(scope, source, scope_name)
        classes = scopes.setdefault(scope_name, [])
        scope_classes = _expect_mapping(scope.get("classes"), source, f"{scope_name}.classes")

        for class_name, class_data in scope_classes.items():
            class_path = f"{scope_name}.classes.{class_name}"
            class_data = _expect_mapping(class_data, source, class_path)
            fields = _expect_mapping(class_data.get("fields"), source, f"{class_path}.fields")
            field_types = build_network_var_types(
                class_data.get("metadata"), source, f"{class_path}.metadata"
            )

            class_info = ClassInfo(name=class_name, scope_name=scope_name)
            for field_name, offset in fields.items():
                class_info.add_field(
                    FieldInfo(
                        name=field_name,
                        type_name=field_types.get(field_name),
                        offset=_expect_offset(offset, source, f"{class_path}.fields.{field_name}"),
                    )
                )
            classes.append(class_info)

    return scopes


def parse_flat_schema(document: Any, source: Path | None = None) -> Sdk:
    """Convert a flat schema document into an Sdk.

    Args:
        document: Decoded JSON document
        source: File path for error messages

    Returns:
        Sdk with classes in document order
    """
    document = _expect_mapping(document, source, "$")

    classes: list[ClassInfo] = []
    for scope_name, scope in document.items():
        scope = _expect_mapping(scope, source, scope_name)

        for class_name, fields in scope.items():
            class_path = f"{scope_name}.{class_name}"
            fields = _expect_mapping(fields, source, class_path)

            class_info = ClassInfo(name=class_name, scope_name=scope_name)
            for field_name, field_data in fields.items():
                field_path = f"{class_path}.{field_name}"
                field_data = _expect_mapping(field_data, source, field_path)

                if "offset" not in field_data:
                    raise SchemaFormatError("missing offset", source, field_path)
                type_name = field_data.get("type_")
                if type_name is not None and not isinstance(type_name, str):
                    raise SchemaFormatError(
                        f"expected a string type_, got {type_name!r}", source, field_path
                    )

                class_info.add_field(
                    FieldInfo(
                        name=field_name,
                        type_name=type_name,
                        offset=_expect_offset(field_data["offset"], source, f"{field_path}.offset"),
                    )
                )
            classes.append(class_info)

    return Sdk(classes=classes)


def merge_scopes(fragments: list[dict[str, list[ClassInfo]]]) -> Sdk:
    """Merge fragments by scope name.

    A scope appearing in a later fragment replaces the earlier one wholesale
    while keeping the position where the scope was first seen.
    """
    scopes: dict[str, list[ClassInfo]] = {}
    for fragment in fragments:
        for scope_name, scope_classes in fragment.items():
            if scope_name in scopes:
                logger.debug(f"Scope {scope_name} redefined, replacing earlier definition")
            scopes[scope_name] = scope_classes

    return Sdk(classes=[class_info for classes in scopes.values() for class_info in classes])


class SchemaDirectoryAdapter:
    """Loads a directory of JSON schema fragments."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.loaded_paths: list[Path] = []

    def fragment_paths(self) -> list[Path]:
        """List fragment files in load order (sorted by file name)."""
        return sorted(
            (path for path in self.directory.iterdir() if path.is_file() and path.suffix == ".json"),
            key=lambda path: path.name,
        )

    @log_timing
    def load(self) -> Sdk:
        """Load and merge every fragment.

        Raises:
            OSError: If the directory or a fragment cannot be read
            SchemaFormatError: If a fragment is not valid JSON or has an
                unexpected shape
        """
        fragments = []
        self.loaded_paths = []
        for path in self.fragment_paths():
            logger.info(f"loading {path}")
            fragments.append(parse_schema_fragment(_load_json(path), path))
            self.loaded_paths.append(path)

        if not fragments:
            logger.warning(f"No JSON schema fragments found in {self.directory}")

        return merge_scopes(fragments)


class SchemaFileAdapter:
    """Loads a single flat JSON schema file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @log_timing
    def load(self) -> Sdk:
        """Load the schema file.

        Raises:
            OSError: If the file cannot be read
            SchemaFormatError: If the file is not valid JSON or has an
                unexpected shape
        """
        logger.info(f"loading {self.path}")
        return parse_flat_schema(_load_json(self.path), self.path)
