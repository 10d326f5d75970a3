"""Custom exception hierarchy for futures history fetching."""

from __future__ import annotations


class MarketDataError(RuntimeError):
    """Base class for all domain-specific exceptions."""


class InvalidRequestError(MarketDataError):
    """Raised when request parameters are missing, malformed or out of order."""


class InvalidRecordError(MarketDataError):
    """Raised when a record does not carry a usable timestamp."""


class UpstreamError(MarketDataError):
    """Raised when the upstream API call fails or returns an unusable payload."""


class ExchangeTransientError(UpstreamError):
    """Represents temporary issues such as rate limiting or network failures."""


class SymbolNotSupportedError(UpstreamError):
    """Raised when the exchange does not list the requested symbol."""
