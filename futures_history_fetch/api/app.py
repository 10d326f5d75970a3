"""
FastAPI application serving ``GET /api/data``.

Usage:
    futures-history-server
    # or
    python -m uvicorn futures_history_fetch.api.app:create_app --factory --port 3000
"""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import Settings, configure_logging, load_settings
from ..core.coordinator import HistoryClient
from ..core.errors import InvalidRequestError, MarketDataError, UpstreamError
from ..core.queries import parse_window_request
from ..exchanges.binance.futures_history import BinanceFuturesHistorySource
from .responses import failure_payload, success_payload

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> HistoryClient:
    source = BinanceFuturesHistorySource(
        settings.symbol,
        base_url=settings.base_url,
        data_base_url=settings.data_base_url,
        timeout=settings.timeout,
        period=settings.period,
    )
    return HistoryClient(source, max_attempts=settings.max_attempts)


def create_app(client: HistoryClient | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application; a client built from ``settings`` is closed on shutdown."""

    owns_client = client is None
    if client is None:
        client = build_client(settings or load_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_client:
            logger.info("Closing upstream session")
            client.close()

    app = FastAPI(
        title="Futures History Fetch",
        description="Gap-free Binance futures statistics over arbitrary time windows",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.client = client

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
        return JSONResponse(status_code=400, content=failure_payload(str(exc)))

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        data_type = request.query_params.get("dataType")
        return JSONResponse(
            status_code=502,
            content=failure_payload(
                f"Failed to fetch data from Binance API for data type {data_type}.",
                str(exc),
            ),
        )

    @app.exception_handler(MarketDataError)
    async def market_data_error_handler(request: Request, exc: MarketDataError) -> JSONResponse:
        data_type = request.query_params.get("dataType")
        logger.error("API request error for %s: %s", data_type, exc)
        return JSONResponse(
            status_code=500,
            content=failure_payload(
                f"An error occurred while processing your request for data type {data_type}.",
                str(exc),
            ),
        )

    # Plain ``def`` so each request's blocking page loop runs in the worker pool.
    @app.get("/api/data")
    def get_data(
        request: Request,
        dataType: str | None = None,
        startTime: str | None = None,
        endTime: str | None = None,
    ) -> dict:
        query = parse_window_request({"dataType": dataType, "startTime": startTime, "endTime": endTime})
        logger.info("API request: %s %s", query.data_type, query.window.describe())
        result = request.app.state.client.fetch_window(query.data_type, query.window)
        return success_payload(result)

    return app


def run() -> None:
    """Console entry point: configure logging and serve with uvicorn."""

    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)
    logger.info("Server running at http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
