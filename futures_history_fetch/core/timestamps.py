"""Timestamp extraction for the supported record shapes."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from ..models.shared import DataType
from .errors import InvalidRecordError

TIMESTAMP_FIELDS: Mapping[DataType, str] = {
    DataType.FUNDING_RATE: "fundingTime",
    DataType.OPEN_INTEREST: "timestamp",
    DataType.LONG_SHORT_RATIO: "timestamp",
    DataType.TAKER_VOLUME: "timestamp",
}


def timestamp_field(data_type: DataType) -> str:
    return TIMESTAMP_FIELDS[data_type]


def extract_timestamp(record: Any, data_type: DataType) -> int:
    """Return the epoch-millisecond timestamp carried by ``record``.

    Raises :class:`InvalidRecordError` when the record is not a mapping or its
    timestamp field is missing or not numeric.
    """

    field = TIMESTAMP_FIELDS[data_type]
    if not isinstance(record, Mapping):
        raise InvalidRecordError(f"{data_type} record is not an object: {record!r}")
    if field not in record:
        raise InvalidRecordError(f"{data_type} record is missing {field!r}: {record!r}")
    value = record[field]
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRecordError(f"{data_type} record has non-numeric {field!r}: {value!r}")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidRecordError(f"{data_type} record has invalid {field!r}: {value!r}")
        return int(value)
    return value


def read_timestamp(record: Any, data_type: DataType) -> int | None:
    """Fallible form of :func:`extract_timestamp`; returns ``None`` for bad records."""

    try:
        return extract_timestamp(record, data_type)
    except InvalidRecordError:
        return None
