"""Environment-driven settings for the server and CLI."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from .core.window import DEFAULT_MAX_ATTEMPTS
from .exchanges.binance.futures_history import BASE_URL, DEFAULT_TIMEOUT
from .models.shared import Period, Symbol

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Level names understood by both logging and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    symbol: Symbol = Symbol("BTC", "USDT")
    base_url: str = BASE_URL
    data_base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    period: Period = Period.MINUTE_5
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        if self.timeout <= 0:
            raise ValueError("BINANCE_TIMEOUT must be positive")
        if self.max_attempts <= 0:
            raise ValueError("FETCH_MAX_ATTEMPTS must be a positive integer")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ`` plus ``.env``)."""

    if environ is None:
        load_dotenv()
        environ = os.environ
    defaults = Settings()
    try:
        return Settings(
            host=environ.get("HOST", defaults.host),
            port=int(environ.get("PORT", defaults.port)),
            symbol=Symbol.from_pair(environ.get("BINANCE_SYMBOL", defaults.symbol.pair)),
            base_url=environ.get("BINANCE_BASE_URL", defaults.base_url),
            data_base_url=environ.get(
                "BINANCE_DATA_BASE_URL", environ.get("BINANCE_BASE_URL", defaults.data_base_url)
            ),
            timeout=float(environ.get("BINANCE_TIMEOUT", defaults.timeout)),
            period=Period(environ.get("BINANCE_STATS_PERIOD", defaults.period.value)),
            max_attempts=int(environ.get("FETCH_MAX_ATTEMPTS", defaults.max_attempts)),
            log_level=environ.get("LOG_LEVEL", defaults.log_level).upper(),
        )
    except ValueError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
