#!/usr/bin/env python3

"""SDK loading orchestrator (Application Layer).

Selects the adapter for the configured input form and builds the offset
index from whatever it produces:
- SchemaDirectoryAdapter: directory of JSON schema fragments
- SchemaFileAdapter: single flat JSON schema file
- HeaderDumpParser: pseudo-header text dump
"""

from pathlib import Path

from ..domain.models.sdk import Sdk
from ..domain.services.indexing import OffsetIndex, build_offset_index
from ..domain.services.parsing import HeaderDumpParser, SchemaDirectoryAdapter, SchemaFileAdapter
from ..infrastructure.config import InputFormat
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


class SdkLoader:
    """Loads one SDK input and builds its offset index.

    Loading is all-or-nothing: any I/O, format or grammar error propagates
    and no partial Sdk or index is returned.
    """

    def __init__(self, input_path: Path, input_format: InputFormat):
        """Initialize loader.

        Args:
            input_path: Path of the schema directory, schema file or header dump
            input_format: Which of the three input forms ``input_path`` holds
        """
        self.input_path = input_path
        self.input_format = input_format
        self.tracker = ProgressTracker(logger)

    @log_timing
    def load_sdk(self) -> Sdk:
        """Load the configured input into an Sdk.

        Raises:
            OSError: If the input cannot be read
            SchemaFormatError: If a JSON input has an unexpected shape
            HeaderDumpSyntaxError: If a header dump breaks the grammar
        """
        with self.tracker.track_operation(f"load {self.input_format.value} {self.input_path}"):
            if self.input_format is InputFormat.SCHEMA_DIR:
                adapter = SchemaDirectoryAdapter(self.input_path)
                sdk = adapter.load()
                source_count = len(adapter.loaded_paths)
            elif self.input_format is InputFormat.SCHEMA_FILE:
                sdk = SchemaFileAdapter(self.input_path).load()
                source_count = 1
            else:
                logger.info(f"loading {self.input_path}")
                sdk = HeaderDumpParser().parse_file(self.input_path)
                source_count = 1

        self.tracker.record_load(source_count, len(sdk.classes), sdk.field_count)
        return sdk

    def load_index(self) -> OffsetIndex:
        """Load the input and build its offset index."""
        sdk = self.load_sdk()

        with self.tracker.track_operation("build offset index"):
            index = build_offset_index(sdk.iter_fields())

        self.tracker.count_offsets(len(index))
        self.tracker.report_summary()
        return index
