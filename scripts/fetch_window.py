"""Fetch a calendar-day range of one series and print the API response JSON.

Example:
    python scripts/fetch_window.py fundingRate 2024-01-01 2024-01-31
"""
from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
import sys
from typing import Sequence

from compare_utils import parse_date
from futures_history_fetch.api.app import build_client
from futures_history_fetch.api.responses import failure_payload, success_payload
from futures_history_fetch.config import configure_logging, load_settings
from futures_history_fetch.core.errors import InvalidRequestError, UpstreamError
from futures_history_fetch.core.queries import calendar_window, resolve_data_type
from futures_history_fetch.models.shared import DataType, Symbol

logger = logging.getLogger("fetch_window")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("data_type", choices=[member.value for member in DataType])
    parser.add_argument("start_date", type=parse_date, help="first UTC day, YYYY-MM-DD")
    parser.add_argument("end_date", type=parse_date, help="last UTC day (inclusive), YYYY-MM-DD")
    parser.add_argument("--symbol", help="pair such as ETHUSDT; defaults to BINANCE_SYMBOL")
    parser.add_argument("--indent", type=int, default=2)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)
    if args.symbol:
        settings = replace(settings, symbol=Symbol.from_pair(args.symbol))

    try:
        data_type = resolve_data_type(args.data_type)
        window = calendar_window(args.start_date, args.end_date)
    except InvalidRequestError as exc:
        print(json.dumps(failure_payload(str(exc)), indent=args.indent))
        return 2

    client = build_client(settings)
    try:
        result = client.fetch_window(data_type, window)
    except UpstreamError as exc:
        logger.error("Upstream failure: %s", exc)
        payload = failure_payload(f"Failed to fetch data from Binance API for data type {data_type}.", str(exc))
        print(json.dumps(payload, indent=args.indent))
        return 1
    finally:
        client.close()

    print(json.dumps(success_payload(result), indent=args.indent))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
