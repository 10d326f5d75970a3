"""Domain models for futures history fetching."""

from .records import (
    FundingRateRecord,
    LongShortRatioRecord,
    OpenInterestRecord,
    Record,
    TakerVolumeRecord,
)
from .shared import DataType, Period, Symbol

__all__ = [
    "DataType",
    "Period",
    "Symbol",
    "Record",
    "FundingRateRecord",
    "OpenInterestRecord",
    "LongShortRatioRecord",
    "TakerVolumeRecord",
]
