#!/usr/bin/env python3

"""Offset index construction and lookup.

The index maps a byte offset to every field declared at that offset,
across all classes. Buckets keep encounter order and are never
deduplicated, so bitfield siblings or unrelated classes sharing an
offset all show up.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ....infrastructure.logging import get_logger, log_timing
from ...models.sdk import FieldEntry, NormalizedField

logger = get_logger(__name__)


class OffsetIndex(Mapping[int, tuple[FieldEntry, ...]]):
    """Read-only mapping of offset -> field entries."""

    def __init__(self, buckets: dict[int, tuple[FieldEntry, ...]] | None = None) -> None:
        self._buckets: Mapping[int, tuple[FieldEntry, ...]] = MappingProxyType(
            dict(buckets or {})
        )

    def __getitem__(self, offset: int) -> tuple[FieldEntry, ...]:
        return self._buckets[offset]

    def __iter__(self) -> Iterator[int]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"OffsetIndex({len(self)} offsets, {self.entry_count} entries)"

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self._buckets.values())

    def lookup(self, offset: int) -> tuple[FieldEntry, ...]:
        """Get the entries at an offset, or an empty tuple."""
        return self._buckets.get(offset, ())


@log_timing
def build_offset_index(fields: Iterable[NormalizedField]) -> OffsetIndex:
    """Build an offset index in a single pass.

    Args:
        fields: Normalized fields in encounter order

    Returns:
        OffsetIndex whose buckets preserve encounter order
    """
    buckets: dict[int, list[FieldEntry]] = {}
    for normalized in fields:
        buckets.setdefault(normalized.offset, []).append(FieldEntry.from_normalized(normalized))

    index = OffsetIndex({offset: tuple(entries) for offset, entries in buckets.items()})
    logger.debug(f"Built {index!r}")
    return index


def lookup(index: OffsetIndex, offset: int) -> tuple[FieldEntry, ...]:
    """Get every field entry at an offset (empty if none)."""
    return index.lookup(offset)
