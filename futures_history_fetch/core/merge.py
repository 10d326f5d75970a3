"""Merge accumulated pages into one ordered, duplicate-free sequence."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..models.records import Record
from ..models.shared import DataType
from .queries import TimeWindow
from .timestamps import read_timestamp


@dataclass(frozen=True, slots=True)
class MergeResult:
    records: list[Record]
    unique_count: int

    @property
    def record_count(self) -> int:
        return len(self.records)


def merge_records(records: Iterable[Record], data_type: DataType, window: TimeWindow) -> MergeResult:
    """Deduplicate by timestamp, clip to ``window`` and sort ascending.

    When two records share a timestamp the one received later wins.
    """

    by_timestamp: dict[int, Record] = {}
    for record in records:
        timestamp = read_timestamp(record, data_type)
        if timestamp is None:
            continue
        by_timestamp[timestamp] = record

    in_range = sorted(ts for ts in by_timestamp if window.contains(ts))
    return MergeResult(
        records=[by_timestamp[ts] for ts in in_range],
        unique_count=len(by_timestamp),
    )
