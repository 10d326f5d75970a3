"""Query helper objects and request parameter validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from ..models.shared import DataType
from .errors import InvalidRequestError

SUPPORTED_DATA_TYPES = ", ".join(member.value for member in DataType)
# Latest timestamp accepted from callers (9999-12-31T23:59:59Z), the edge of datetime.
MAX_TIMESTAMP_MS = 253_402_300_799_000


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Half-open ``[start_ms, end_ms)`` interval in epoch milliseconds."""

    start_ms: int
    end_ms: int

    def __post_init__(self) -> None:
        if self.start_ms >= self.end_ms:
            raise InvalidRequestError("startTime must be earlier than endTime")

    def contains(self, timestamp: int) -> bool:
        return self.start_ms <= timestamp < self.end_ms

    @property
    def requested_end_date(self) -> str:
        """UTC calendar date of the last millisecond inside the window."""

        return _to_datetime(self.end_ms - 1).date().isoformat()

    def describe(self) -> str:
        return f"[{iso_ms(self.start_ms)}, {iso_ms(self.end_ms)})"


@dataclass(frozen=True, slots=True)
class WindowRequest:
    """Validated ``/api/data`` request."""

    data_type: DataType
    window: TimeWindow


def resolve_data_type(value: str | None) -> DataType:
    if not value or not value.strip():
        raise InvalidRequestError("Missing required parameter: dataType.")
    try:
        return DataType(value.strip())
    except ValueError as exc:
        raise InvalidRequestError(
            f"Unsupported data type: {value}. Supported types: {SUPPORTED_DATA_TYPES}."
        ) from exc


def parse_window_request(params: Mapping[str, str | None]) -> WindowRequest:
    """Validate raw ``dataType``/``startTime``/``endTime`` query parameters."""

    missing = [name for name in ("dataType", "startTime", "endTime") if not (params.get(name) or "").strip()]
    if missing:
        raise InvalidRequestError(
            "Missing or invalid required parameters: dataType, startTime, and endTime."
        )
    data_type = resolve_data_type(params["dataType"])
    start_ms = _parse_millis(params["startTime"], "startTime")
    end_ms = _parse_millis(params["endTime"], "endTime")
    if start_ms >= end_ms:
        raise InvalidRequestError(
            "Invalid startTime or endTime. Must be valid timestamps (ms) and startTime must be less than endTime."
        )
    return WindowRequest(data_type=data_type, window=TimeWindow(start_ms, end_ms))


def calendar_window(start_date: date, end_date: date) -> TimeWindow:
    """Build the window covering whole UTC days ``start_date`` through ``end_date``.

    The end date is inclusive for the caller, so the exclusive bound is
    midnight at the start of the following day.
    """

    start = datetime.combine(start_date, time.min, tzinfo=timezone.utc)
    end = datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
    return TimeWindow(to_milliseconds(start), to_milliseconds(end))


def to_milliseconds(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def iso_ms(ts_ms: int) -> str:
    return _to_datetime(ts_ms).isoformat()


def _to_datetime(ts_ms: int) -> datetime:
    return datetime.fromtimestamp(ts_ms / 1000, tz=timezone.utc)


def _parse_millis(raw: str | None, name: str) -> int:
    try:
        value = int((raw or "").strip(), 10)
    except ValueError as exc:
        raise InvalidRequestError(
            f"Invalid {name}: {raw!r} is not an integer timestamp in milliseconds."
        ) from exc
    if not 0 <= value <= MAX_TIMESTAMP_MS:
        raise InvalidRequestError(
            f"Invalid {name}: {value} is outside the supported range 0..{MAX_TIMESTAMP_MS}."
        )
    return value
