#!/usr/bin/env python3

"""Progress tracking for SDK loading."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time


class ProgressTracker:
    """
    Track and report load progress.

    Times named operations and counts loaded sources, classes and fields
    so a single summary line can be reported once the index is built.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.source_count = 0
        self.class_count = 0
        self.field_count = 0
        self.offset_count = 0

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise

    def record_load(self, source_count: int, class_count: int, field_count: int) -> None:
        """Record what a load step produced."""
        self.source_count += source_count
        self.class_count += class_count
        self.field_count += field_count

    def count_offsets(self, offset_count: int) -> None:
        """Record the number of distinct offsets in the built index."""
        self.offset_count = offset_count

    def report_summary(self) -> None:
        """Report final load statistics."""
        total_time = time() - self.start_time
        self.logger.info(
            f"Loaded {self.class_count} classes with {self.field_count} fields "
            f"at {self.offset_count} distinct offsets from {self.source_count} source(s) "
            f"in {total_time:.2f}s"
        )
