"""Shared domain models used across the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DataType(StrEnum):
    """Supported futures statistics series.

    Values match the ``dataType`` query parameter accepted by the HTTP API.
    """

    FUNDING_RATE = "fundingRate"
    OPEN_INTEREST = "openInterest"
    LONG_SHORT_RATIO = "longShortRatio"
    TAKER_VOLUME = "takerVolume"


class Period(StrEnum):
    """Aggregation periods accepted by the ``/futures/data`` statistics endpoints."""

    MINUTE_5 = "5m"
    MINUTE_15 = "15m"
    MINUTE_30 = "30m"
    HOUR_1 = "1h"
    HOUR_2 = "2h"
    HOUR_4 = "4h"
    HOUR_6 = "6h"
    HOUR_12 = "12h"
    DAY_1 = "1d"

    @property
    def milliseconds(self) -> int:
        return _PERIOD_MS[self]


_PERIOD_MS = {
    Period.MINUTE_5: 300_000,
    Period.MINUTE_15: 900_000,
    Period.MINUTE_30: 1_800_000,
    Period.HOUR_1: 3_600_000,
    Period.HOUR_2: 7_200_000,
    Period.HOUR_4: 14_400_000,
    Period.HOUR_6: 21_600_000,
    Period.HOUR_12: 43_200_000,
    Period.DAY_1: 86_400_000,
}


@dataclass(frozen=True, slots=True)
class Symbol:
    """Represents a USDT-margined perpetual contract symbol."""

    base: str
    quote: str

    def __post_init__(self) -> None:
        if not self.base or not self.quote:
            raise ValueError("Symbol base and quote must be non-empty strings.")

    @property
    def pair(self) -> str:
        """Return the canonical pair string (e.g., ``BTCUSDT``)."""

        return f"{self.base}{self.quote}"

    @classmethod
    def from_pair(cls, pair: str, *, quote: str = "USDT") -> Symbol:
        """Split a pair such as ``ETHUSDT`` on its quote suffix."""

        normalized = pair.strip().upper()
        if not normalized.endswith(quote) or len(normalized) == len(quote):
            raise ValueError(f"Pair {pair!r} is not quoted in {quote}")
        return cls(normalized[: -len(quote)], quote)
