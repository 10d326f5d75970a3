"""Protocols implemented by upstream page sources."""

from .history_source import FuturesHistorySource

__all__ = ["FuturesHistorySource"]
