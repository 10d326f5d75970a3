"""Record shapes returned by the Binance futures statistics endpoints.

Records are passed through exactly as decoded from JSON; the TypedDicts below
only document the fields Binance is known to send for each series.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias, TypedDict

Record: TypeAlias = Mapping[str, Any]


class FundingRateRecord(TypedDict):
    symbol: str
    fundingTime: int
    fundingRate: str
    markPrice: str


class OpenInterestRecord(TypedDict):
    symbol: str
    sumOpenInterest: str
    sumOpenInterestValue: str
    timestamp: int


class LongShortRatioRecord(TypedDict):
    symbol: str
    longShortRatio: str
    longAccount: str
    shortAccount: str
    timestamp: int


class TakerVolumeRecord(TypedDict):
    buySellRatio: str
    buyVol: str
    sellVol: str
    timestamp: int
