from __future__ import annotations

from datetime import date

import pytest

from futures_history_fetch.core.errors import InvalidRequestError
from futures_history_fetch.core.queries import (
    MAX_TIMESTAMP_MS,
    TimeWindow,
    calendar_window,
    parse_window_request,
    resolve_data_type,
)
from futures_history_fetch.models.shared import DataType
from tests.stubs import T0


def test_parse_window_request_accepts_valid_params():
    request = parse_window_request({"dataType": "fundingRate", "startTime": str(T0), "endTime": str(T0 + 1)})

    assert request.data_type is DataType.FUNDING_RATE
    assert request.window == TimeWindow(T0, T0 + 1)


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"dataType": "fundingRate", "startTime": str(T0)},
        {"dataType": "", "startTime": str(T0), "endTime": str(T0 + 1)},
        {"dataType": "fundingRate", "startTime": "   ", "endTime": str(T0 + 1)},
        {"dataType": "fundingRate", "startTime": "abc", "endTime": str(T0 + 1)},
        {"dataType": "fundingRate", "startTime": str(T0), "endTime": "1.5"},
        {"dataType": "fundingRate", "startTime": str(T0), "endTime": str(T0)},
        {"dataType": "fundingRate", "startTime": str(T0 + 1), "endTime": str(T0)},
        {"dataType": "markPrice", "startTime": str(T0), "endTime": str(T0 + 1)},
        {"dataType": "fundingRate", "startTime": "300000000000000", "endTime": "300000000000001"},
        {"dataType": "fundingRate", "startTime": "-1", "endTime": str(T0)},
    ],
)
def test_parse_window_request_rejects_bad_params(params):
    with pytest.raises(InvalidRequestError):
        parse_window_request(params)


def test_resolve_data_type_lists_supported_values():
    with pytest.raises(InvalidRequestError) as excinfo:
        resolve_data_type("klines")

    assert "fundingRate, openInterest, longShortRatio, takerVolume" in str(excinfo.value)


def test_time_window_is_half_open():
    window = TimeWindow(10, 20)

    assert window.contains(10)
    assert window.contains(19)
    assert not window.contains(20)
    assert not window.contains(9)


def test_time_window_requires_start_before_end():
    with pytest.raises(InvalidRequestError):
        TimeWindow(20, 20)


def test_calendar_window_ends_at_start_of_following_day():
    window = calendar_window(date(2024, 1, 1), date(2024, 1, 2))

    assert window.start_ms == T0
    assert window.end_ms == T0 + 2 * 86_400_000
    assert window.requested_end_date == "2024-01-02"


def test_latest_supported_timestamp_round_trips_to_a_date():
    request = parse_window_request(
        {"dataType": "openInterest", "startTime": "0", "endTime": str(MAX_TIMESTAMP_MS)}
    )

    assert request.window.requested_end_date == "9999-12-31"
    assert request.window.describe().startswith("[1970-01-01T00:00:00")
