"""Strategy table mapping each data type to its timestamp field and page call."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from ..contracts.history_source import FuturesHistorySource
from ..models.records import Record
from ..models.shared import DataType
from .timestamps import extract_timestamp, read_timestamp, timestamp_field

PageFetcher = Callable[[int], list[Record]]


@dataclass(frozen=True, slots=True)
class SeriesStrategy:
    """Everything the fetch loop needs to know about one data type."""

    data_type: DataType
    fetch_page: PageFetcher

    @property
    def timestamp_field(self) -> str:
        return timestamp_field(self.data_type)

    def extract_timestamp(self, record: Record) -> int:
        return extract_timestamp(record, self.data_type)

    def read_timestamp(self, record: Record) -> int | None:
        return read_timestamp(record, self.data_type)


_SOURCE_METHODS: Mapping[DataType, Callable[[FuturesHistorySource], PageFetcher]] = {
    DataType.FUNDING_RATE: lambda source: source.get_funding_rate_history,
    DataType.OPEN_INTEREST: lambda source: source.get_open_interest_history,
    DataType.LONG_SHORT_RATIO: lambda source: source.get_long_short_ratio_history,
    DataType.TAKER_VOLUME: lambda source: source.get_taker_buy_sell_volume_history,
}


def build_strategies(source: FuturesHistorySource) -> dict[DataType, SeriesStrategy]:
    """Bind every supported data type to the matching page method of ``source``."""

    return {
        data_type: SeriesStrategy(data_type=data_type, fetch_page=method(source))
        for data_type, method in _SOURCE_METHODS.items()
    }
