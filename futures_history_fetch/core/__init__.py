"""Core utilities for futures history fetching."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "HistoryClient",
    "WindowResult",
    "TimeWindow",
    "WindowRequest",
    "parse_window_request",
    "calendar_window",
    "SeriesStrategy",
    "build_strategies",
    "TerminationReason",
    "collect_window",
    "merge_records",
    "extract_timestamp",
    "read_timestamp",
    "MarketDataError",
    "InvalidRequestError",
    "InvalidRecordError",
    "UpstreamError",
    "ExchangeTransientError",
    "SymbolNotSupportedError",
]

_lazy_targets = {
    "HistoryClient": ("coordinator", "HistoryClient"),
    "WindowResult": ("coordinator", "WindowResult"),
    "TimeWindow": ("queries", "TimeWindow"),
    "WindowRequest": ("queries", "WindowRequest"),
    "parse_window_request": ("queries", "parse_window_request"),
    "calendar_window": ("queries", "calendar_window"),
    "SeriesStrategy": ("registry", "SeriesStrategy"),
    "build_strategies": ("registry", "build_strategies"),
    "TerminationReason": ("window", "TerminationReason"),
    "collect_window": ("window", "collect_window"),
    "merge_records": ("merge", "merge_records"),
    "extract_timestamp": ("timestamps", "extract_timestamp"),
    "read_timestamp": ("timestamps", "read_timestamp"),
    "MarketDataError": ("errors", "MarketDataError"),
    "InvalidRequestError": ("errors", "InvalidRequestError"),
    "InvalidRecordError": ("errors", "InvalidRecordError"),
    "UpstreamError": ("errors", "UpstreamError"),
    "ExchangeTransientError": ("errors", "ExchangeTransientError"),
    "SymbolNotSupportedError": ("errors", "SymbolNotSupportedError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:
        raise AttributeError(f"module 'futures_history_fetch.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
