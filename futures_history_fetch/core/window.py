"""Windowed page loop that walks a cursor across the requested interval."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from ..models.records import Record
from .errors import UpstreamError
from .queries import TimeWindow, iso_ms
from .registry import SeriesStrategy

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 200


class TerminationReason(StrEnum):
    """Why the page loop stopped."""

    END_OF_RANGE = "endOfRange"
    EMPTY_BATCH = "emptyBatch"
    NO_PROGRESS = "noProgress"
    MAX_ATTEMPTS_REACHED = "maxAttemptsReached"
    UPSTREAM_ERROR = "upstreamError"

    @property
    def may_be_incomplete(self) -> bool:
        return self in (TerminationReason.NO_PROGRESS, TerminationReason.MAX_ATTEMPTS_REACHED)


@dataclass(slots=True)
class FetchState:
    """Per-request mutable loop state; never shared between requests."""

    current_start: int
    attempts: int = 0
    pages: int = 0
    dropped_records: int = 0
    records: list[Record] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class FetchOutcome:
    records: tuple[Record, ...]
    reason: TerminationReason
    attempts: int
    pages: int
    dropped_records: int
    cursor: int


def collect_window(
    strategy: SeriesStrategy,
    window: TimeWindow,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> FetchOutcome:
    """Fetch consecutive pages until the window is covered or a stop condition trips.

    Upstream failures propagate as :class:`UpstreamError`; every other stop
    condition returns whatever has been accumulated so far.
    """

    if max_attempts <= 0:
        raise ValueError("max_attempts must be a positive integer")

    data_type = strategy.data_type
    state = FetchState(current_start=window.start_ms)
    reason = TerminationReason.END_OF_RANGE

    while state.current_start < window.end_ms and state.attempts < max_attempts:
        try:
            batch = strategy.fetch_page(state.current_start)
        except UpstreamError as exc:
            logger.error(
                "Error fetching %s batch starting at %s (%s): %s",
                data_type,
                iso_ms(state.current_start),
                TerminationReason.UPSTREAM_ERROR,
                exc,
            )
            raise
        state.pages += 1

        if not batch:
            logger.info(
                "Batch for %s starting at %s returned 0 records. Assuming end of data.",
                data_type,
                iso_ms(state.current_start),
            )
            reason = TerminationReason.EMPTY_BATCH
            break

        latest = _accumulate(state, strategy, batch)

        # A page whose newest record sits exactly on the cursor still advances it by one.
        if latest is None or latest < state.current_start:
            logger.warning(
                "Latest timestamp (%s) from %s batch starting at %s is before the start time; stopping.",
                "none" if latest is None else iso_ms(latest),
                data_type,
                iso_ms(state.current_start),
            )
            reason = TerminationReason.NO_PROGRESS
            break

        state.current_start = latest + 1
        if state.current_start > window.end_ms:
            reason = TerminationReason.END_OF_RANGE
            break

        state.attempts += 1
        if state.attempts >= max_attempts:
            logger.warning(
                "Max attempts (%d) reached for %s before %s. Stopping fetch.",
                max_attempts,
                data_type,
                iso_ms(window.end_ms),
            )
            reason = TerminationReason.MAX_ATTEMPTS_REACHED
            break

    return FetchOutcome(
        records=tuple(state.records),
        reason=reason,
        attempts=state.attempts,
        pages=state.pages,
        dropped_records=state.dropped_records,
        cursor=state.current_start,
    )


def _accumulate(state: FetchState, strategy: SeriesStrategy, batch: list[Record]) -> int | None:
    """Append well-formed records to ``state`` and return the batch maximum timestamp."""

    latest: int | None = None
    for record in batch:
        timestamp = strategy.read_timestamp(record)
        if timestamp is None:
            state.dropped_records += 1
            logger.warning(
                "Skipping malformed %s record without a numeric %r: %r",
                strategy.data_type,
                strategy.timestamp_field,
                record,
            )
            continue
        state.records.append(record)
        if latest is None or timestamp > latest:
            latest = timestamp
    return latest
