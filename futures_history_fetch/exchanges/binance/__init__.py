"""Binance USDT-M futures page source."""

from .futures_history import BinanceFuturesHistorySource

__all__ = ["BinanceFuturesHistorySource"]
