"""Compare a windowed funding rate fetch with CCXT outputs."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
import sys

import ccxt  # type: ignore

from compare_utils import CCXT_SYMBOL, SYMBOL, iso_ms
from futures_history_fetch.core.coordinator import HistoryClient
from futures_history_fetch.core.errors import UpstreamError
from futures_history_fetch.core.queries import TimeWindow, to_milliseconds
from futures_history_fetch.exchanges.binance.futures_history import BinanceFuturesHistorySource
from futures_history_fetch.models.shared import DataType


def main(days: int = 3) -> None:
    end = datetime.now(tz=timezone.utc)
    start = end - timedelta(days=days)
    window = TimeWindow(to_milliseconds(start), to_milliseconds(end))

    print(f"\n=== binance funding history {window.describe()} ===")
    client = HistoryClient(BinanceFuturesHistorySource(SYMBOL))
    provider: dict[int, Decimal] = {}
    try:
        result = client.fetch_window(DataType.FUNDING_RATE, window)
        provider = {int(row["fundingTime"]): Decimal(row["fundingRate"]) for row in result.records}
        print(f"provider rows={result.record_count} stop={result.termination}")
    except UpstreamError as exc:
        print(f"provider error: {exc}")
    finally:
        client.close()

    exchange = ccxt.binanceusdm({"enableRateLimit": True})
    reference: dict[int, Decimal] = {}
    try:
        exchange.load_markets()
        history = exchange.fetchFundingRateHistory(CCXT_SYMBOL, since=window.start_ms, limit=1000)
        reference = {
            int(entry["timestamp"]): Decimal(str(entry["fundingRate"]))
            for entry in history
            if entry.get("timestamp") is not None and window.contains(int(entry["timestamp"]))
        }
        print(f"ccxt rows={len(reference)}")
    except ccxt.BaseError as exc:
        print(f"ccxt error: {exc}")

    for ts in sorted(set(provider) | set(reference)):
        ours, theirs = provider.get(ts), reference.get(ts)
        if ours != theirs:
            print(f"mismatch {iso_ms(ts)} provider={ours} ccxt={theirs}")


if __name__ == "__main__":  # pragma: no cover
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 3)
