from __future__ import annotations

import pytest

from futures_history_fetch.config import LOG_LEVELS, Settings, load_settings
from futures_history_fetch.models.shared import Period, Symbol


def test_defaults_when_environment_is_empty():
    settings = load_settings({})

    assert settings == Settings()
    assert settings.port == 3000
    assert settings.symbol == Symbol("BTC", "USDT")
    assert settings.max_attempts == 200


def test_environment_overrides():
    settings = load_settings(
        {
            "PORT": "8080",
            "BINANCE_SYMBOL": "ethusdt",
            "BINANCE_BASE_URL": "https://testnet.binancefuture.com",
            "BINANCE_TIMEOUT": "2.5",
            "BINANCE_STATS_PERIOD": "1h",
            "FETCH_MAX_ATTEMPTS": "50",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.port == 8080
    assert settings.symbol.pair == "ETHUSDT"
    assert settings.data_base_url == "https://testnet.binancefuture.com"
    assert settings.timeout == 2.5
    assert settings.period is Period.HOUR_1
    assert settings.max_attempts == 50
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "environ",
    [
        {"PORT": "http"},
        {"PORT": "0"},
        {"BINANCE_SYMBOL": "BTCUSD"},
        {"BINANCE_STATS_PERIOD": "1m"},
        {"FETCH_MAX_ATTEMPTS": "-1"},
        {"LOG_LEVEL": "chatty"},
        {"LOG_LEVEL": "warn"},
        {"LOG_LEVEL": "FATAL"},
    ],
)
def test_invalid_values_fail_fast(environ):
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_settings(environ)


def test_accepted_log_levels_are_valid_for_uvicorn():
    from uvicorn.config import LOG_LEVELS as UVICORN_LOG_LEVELS

    for level in LOG_LEVELS:
        assert load_settings({"LOG_LEVEL": level.lower()}).log_level == level
        assert level.lower() in UVICORN_LOG_LEVELS
