"""Gap-free Binance futures statistics over arbitrary time windows.

This module exposes the public API: the window fetch client, the page source
protocol with its Binance implementation, models, and the error hierarchy.
"""

from .contracts.history_source import FuturesHistorySource
from .core.coordinator import HistoryClient, WindowResult
from .core.errors import (
    ExchangeTransientError,
    InvalidRecordError,
    InvalidRequestError,
    MarketDataError,
    SymbolNotSupportedError,
    UpstreamError,
)
from .core.merge import MergeResult, merge_records
from .core.queries import TimeWindow, WindowRequest, calendar_window, parse_window_request
from .core.registry import SeriesStrategy, build_strategies
from .core.timestamps import extract_timestamp, read_timestamp
from .core.window import FetchOutcome, TerminationReason, collect_window
from .exchanges.binance.futures_history import BinanceFuturesHistorySource
from .models.records import Record
from .models.shared import DataType, Period, Symbol

__all__ = [
    "FuturesHistorySource",
    "BinanceFuturesHistorySource",
    "HistoryClient",
    "WindowResult",
    "TimeWindow",
    "WindowRequest",
    "parse_window_request",
    "calendar_window",
    "SeriesStrategy",
    "build_strategies",
    "TerminationReason",
    "FetchOutcome",
    "collect_window",
    "MergeResult",
    "merge_records",
    "extract_timestamp",
    "read_timestamp",
    "DataType",
    "Period",
    "Symbol",
    "Record",
    "MarketDataError",
    "InvalidRequestError",
    "InvalidRecordError",
    "UpstreamError",
    "ExchangeTransientError",
    "SymbolNotSupportedError",
]
