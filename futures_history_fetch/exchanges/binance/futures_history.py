"""Binance USDT-M futures statistics implementation."""

from __future__ import annotations

from typing import Any

import requests

from ...contracts.history_source import FuturesHistorySource
from ...core.errors import ExchangeTransientError, SymbolNotSupportedError, UpstreamError
from ...models.records import Record
from ...models.shared import Period, Symbol

BASE_URL = "https://fapi.binance.com"
FUNDING_HISTORY_ENDPOINT = "/fapi/v1/fundingRate"
OPEN_INTEREST_HISTORY_ENDPOINT = "/futures/data/openInterestHist"
LONG_SHORT_RATIO_ENDPOINT = "/futures/data/globalLongShortAccountRatio"
TAKER_VOLUME_ENDPOINT = "/futures/data/takerlongshortRatio"
DEFAULT_TIMEOUT = 10.0
# Binance Futures REST API limits documented at
# https://binance-docs.github.io/apidocs/futures/en/#change-log
FUNDING_RATE_MAX_LIMIT = 1000
STATISTICS_MAX_LIMIT = 500


class BinanceFuturesHistorySource(FuturesHistorySource):
    """Requests-backed implementation of :class:`FuturesHistorySource`."""

    name = "binance"

    def __init__(
        self,
        symbol: Symbol | None = None,
        *,
        session: requests.Session | None = None,
        base_url: str = BASE_URL,
        data_base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        period: Period = Period.MINUTE_5,
    ) -> None:
        self.symbol = symbol or Symbol("BTC", "USDT")
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._base_url = base_url.rstrip("/")
        self._data_base_url = (data_base_url or base_url).rstrip("/")
        self._timeout = timeout
        self._period = period

    # ------------------------------------------------------------------
    # Pages
    def get_funding_rate_history(self, start_ms: int) -> list[Record]:
        params = {
            "symbol": self.symbol.pair,
            "startTime": start_ms,
            "limit": FUNDING_RATE_MAX_LIMIT,
        }
        return self._request_page(self._base_url, FUNDING_HISTORY_ENDPOINT, params)

    def get_open_interest_history(self, start_ms: int) -> list[Record]:
        return self._statistics_page(OPEN_INTEREST_HISTORY_ENDPOINT, start_ms)

    def get_long_short_ratio_history(self, start_ms: int) -> list[Record]:
        return self._statistics_page(LONG_SHORT_RATIO_ENDPOINT, start_ms)

    def get_taker_buy_sell_volume_history(self, start_ms: int) -> list[Record]:
        return self._statistics_page(TAKER_VOLUME_ENDPOINT, start_ms)

    # ------------------------------------------------------------------
    # Internal helpers
    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _statistics_params(self, start_ms: int) -> dict[str, Any]:
        # The statistics endpoints cap both the row count and the time span of
        # one call, so ask for exactly one full page worth of periods.
        span = STATISTICS_MAX_LIMIT * self._period.milliseconds
        return {
            "symbol": self.symbol.pair,
            "period": self._period.value,
            "limit": STATISTICS_MAX_LIMIT,
            "startTime": start_ms,
            "endTime": start_ms + span - 1,
        }

    def _statistics_page(self, path: str, start_ms: int) -> list[Record]:
        return self._request_page(self._data_base_url, path, self._statistics_params(start_ms))

    def _request_page(self, base_url: str, path: str, params: dict[str, Any]) -> list[Record]:
        payload = self._request(base_url, path, params)
        if not isinstance(payload, list):
            raise UpstreamError(f"Binance endpoint {path} returned {type(payload).__name__}, expected a list")
        return payload

    def _request(self, base_url: str, path: str, params: dict[str, Any]) -> Any:
        url = f"{base_url}{path}"
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            raise ExchangeTransientError(f"Failed to call Binance endpoint {path}: {exc}") from exc

        payload = self._decode_response(response)
        if isinstance(payload, dict) and "code" in payload and payload["code"] not in (0, 200, None):
            self._raise_api_error(int(payload["code"]), payload.get("msg"))
        if response.status_code >= 400:
            self._raise_http_error(response.status_code, payload)
        return payload

    def _decode_response(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError("Binance returned a non-JSON payload") from exc

    def _raise_http_error(self, status_code: int, payload: Any) -> None:
        message = self._extract_message(payload) or f"HTTP {status_code}"
        if status_code in {418, 429, 451} or status_code >= 500:
            raise ExchangeTransientError(message)
        raise UpstreamError(message)

    def _raise_api_error(self, code: int, message: str | None) -> None:
        msg = message or f"Binance error code {code}"
        if code == -1121:
            raise SymbolNotSupportedError(msg)
        if code in (-1003, -1001):
            raise ExchangeTransientError(msg)
        raise UpstreamError(msg)

    def _extract_message(self, payload: Any) -> str | None:
        if isinstance(payload, dict):
            msg = payload.get("msg") or payload.get("message")
            if isinstance(msg, str):
                return msg
        return None
