"""Protocols describing paginated futures statistics sources."""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from ..models.records import Record
from ..models.shared import Symbol


@runtime_checkable
class FuturesHistorySource(Protocol):
    """Source returning one bounded page of records per call.

    Each method returns records at or after ``start_ms``. A page holds at most
    the upstream's maximum batch size and covers at most its maximum duration;
    no ordering is guaranteed.
    """

    name: ClassVar[str]
    symbol: Symbol

    def get_funding_rate_history(self, start_ms: int) -> list[Record]:
        """Return one page of funding rate settlements."""

    def get_open_interest_history(self, start_ms: int) -> list[Record]:
        """Return one page of aggregated open interest statistics."""

    def get_long_short_ratio_history(self, start_ms: int) -> list[Record]:
        """Return one page of global long/short account ratios."""

    def get_taker_buy_sell_volume_history(self, start_ms: int) -> list[Record]:
        """Return one page of taker buy/sell volume statistics."""

    def close(self) -> None:
        """Release any network resources held by the source."""
