"""High-level coordinator that runs the page loop and merge for one request."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from ..contracts.history_source import FuturesHistorySource
from ..exchanges.binance.futures_history import BinanceFuturesHistorySource
from ..models.records import Record
from ..models.shared import DataType
from .merge import merge_records
from .queries import TimeWindow
from .registry import SeriesStrategy, build_strategies
from .window import DEFAULT_MAX_ATTEMPTS, TerminationReason, collect_window

logger = logging.getLogger(__name__)

SourceFactory = Callable[[], FuturesHistorySource]


@dataclass(frozen=True, slots=True)
class WindowResult:
    """Merged records for one window plus the diagnostics reported to callers."""

    data_type: DataType
    window: TimeWindow
    records: Sequence[Record]
    unique_count: int
    termination: TerminationReason
    attempts: int
    pages: int
    dropped_records: int

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def warning(self) -> str | None:
        if self.termination is TerminationReason.MAX_ATTEMPTS_REACHED:
            return (
                f"Stopped after {self.attempts} page requests before reaching endTime; "
                "the returned range may be incomplete."
            )
        if self.termination is TerminationReason.NO_PROGRESS:
            return "Upstream stopped returning newer records; the returned range may be incomplete."
        return None


class HistoryClient:
    """Entry point consumed by the HTTP API and CLI callers."""

    def __init__(
        self,
        source: FuturesHistorySource | None = None,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        strategies: Mapping[DataType, SeriesStrategy] | None = None,
        source_factory: SourceFactory = BinanceFuturesHistorySource,
    ) -> None:
        if max_attempts <= 0:
            raise ValueError("max_attempts must be a positive integer")
        self._owns_source = source is None and strategies is None
        if self._owns_source:
            source = source_factory()
        self._source = source
        if strategies is None:
            strategies = build_strategies(source)
        self._strategies = dict(strategies)
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def fetch_window(self, data_type: DataType, window: TimeWindow) -> WindowResult:
        """Fetch, merge and return every ``data_type`` record inside ``window``."""

        strategy = self._strategies[data_type]
        logger.info("Fetching %s over %s", data_type, window.describe())

        outcome = collect_window(strategy, window, max_attempts=self._max_attempts)
        merged = merge_records(outcome.records, data_type, window)

        logger.info(
            "Fetched %d %s records in range (%d unique before range filter, %d pages, stop=%s)",
            merged.record_count,
            data_type,
            merged.unique_count,
            outcome.pages,
            outcome.reason,
        )
        if outcome.dropped_records:
            logger.warning("Dropped %d malformed %s records", outcome.dropped_records, data_type)

        return WindowResult(
            data_type=data_type,
            window=window,
            records=merged.records,
            unique_count=merged.unique_count,
            termination=outcome.reason,
            attempts=outcome.attempts,
            pages=outcome.pages,
            dropped_records=outcome.dropped_records,
        )

    def close(self) -> None:
        if self._owns_source and self._source is not None:
            self._source.close()
