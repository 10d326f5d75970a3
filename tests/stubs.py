from __future__ import annotations

from collections.abc import Iterable

from futures_history_fetch.core.registry import SeriesStrategy
from futures_history_fetch.models.records import Record
from futures_history_fetch.models.shared import DataType

HOUR_MS = 3_600_000
T0 = 1_704_067_200_000  # 2024-01-01T00:00:00Z


class StubResponse:
    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class StubSession:
    def __init__(self) -> None:
        self.calls: list[dict] = []
        self._responses: list[StubResponse | Exception] = []
        self.closed = False

    def queue(self, payload, status_code: int = 200) -> None:
        self._responses.append(StubResponse(payload, status_code))

    def queue_error(self, exc: Exception) -> None:
        self._responses.append(exc)

    def get(self, url, params=None, timeout=0):
        if params is None:
            params = {}
        self.calls.append({"url": url, "params": dict(params), "timeout": timeout})
        if not self._responses:
            raise AssertionError("No queued response left for stub session")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


class ScriptedPages:
    """Page fetcher replaying a fixed list of batches, then empty pages."""

    def __init__(self, batches: Iterable[list[Record] | Exception]) -> None:
        self._batches = list(batches)
        self.starts: list[int] = []

    def __call__(self, start_ms: int) -> list[Record]:
        self.starts.append(start_ms)
        if not self._batches:
            return []
        batch = self._batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return list(batch)


class RepeatingPage:
    """Page fetcher that always answers with the same batch."""

    def __init__(self, batch: list[Record]) -> None:
        self._batch = batch
        self.calls = 0

    def __call__(self, start_ms: int) -> list[Record]:
        self.calls += 1
        return list(self._batch)


class StaircasePages:
    """Page fetcher returning one record just after every requested start."""

    def __init__(self, data_type: DataType = DataType.OPEN_INTEREST, step: int = 1) -> None:
        self._field = "fundingTime" if data_type is DataType.FUNDING_RATE else "timestamp"
        self._step = step
        self.calls = 0

    def __call__(self, start_ms: int) -> list[Record]:
        self.calls += 1
        return [{self._field: start_ms + self._step}]


def funding(ts, rate: str = "0.0001") -> dict:
    return {"symbol": "BTCUSDT", "fundingTime": ts, "fundingRate": rate, "markPrice": "42000.0"}


def open_interest(ts, value: str = "100.0") -> dict:
    return {"symbol": "BTCUSDT", "sumOpenInterest": value, "sumOpenInterestValue": "1.0", "timestamp": ts}


def strategy(data_type: DataType, fetch_page) -> SeriesStrategy:
    return SeriesStrategy(data_type=data_type, fetch_page=fetch_page)
