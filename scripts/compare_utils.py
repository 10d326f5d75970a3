"""Shared helpers for the manual scripts."""
from __future__ import annotations

from datetime import date
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from futures_history_fetch.core.queries import iso_ms
from futures_history_fetch.models.shared import Symbol

SYMBOL = Symbol("BTC", "USDT")
CCXT_SYMBOL = "BTC/USDT:USDT"


def parse_date(value: str) -> date:
    return date.fromisoformat(value)


__all__ = ["CCXT_SYMBOL", "ROOT", "SYMBOL", "iso_ms", "parse_date"]
