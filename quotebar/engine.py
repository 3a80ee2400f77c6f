"""Orchestrator: market snapshot first, then the batched quote fetch."""

from __future__ import annotations

import requests
from loguru import logger

from .config import Settings, get_settings
from .market.market import fetch_market
from .market.quotes import fetch_quotes
from .models import MarketFetchResult, QuoteFetchResult, StockQuote


def normalize_tickers(args: list[str]) -> list[str]:
    """Split comma-separated arguments into an ordered, de-duplicated ticker list."""
    tickers: list[str] = []
    for arg in args:
        for part in arg.split(","):
            ticker = part.strip().upper()
            if ticker and ticker not in tickers:
                tickers.append(ticker)
    return tickers


def run_quotes(
    tickers: list[str],
    prior: list[StockQuote] | None = None,
    session: requests.Session | None = None,
    settings: Settings | None = None,
) -> tuple[MarketFetchResult, QuoteFetchResult]:
    """Fetch the market snapshot, then quotes gated on the market's session state.

    When the market fetch fails the quote fetch is not attempted and the prior
    quotes (or an empty list) are returned unchanged.
    """
    settings = settings or get_settings()

    market = fetch_market(session=session, settings=settings)
    if not market.ok or market.snapshot is None:
        return market, QuoteFetchResult(quotes=list(prior) if prior is not None else [])

    quotes = fetch_quotes(
        tickers,
        market_is_closed=market.snapshot.is_closed,
        prior=prior,
        session=session,
        settings=settings,
    )
    if quotes.ok and quotes.fetched:
        returned = {q.ticker for q in quotes.quotes}
        unknown = [t for t in tickers if t not in returned]
        if unknown:
            logger.info(f"No quote returned for: {', '.join(unknown)}")
    return market, quotes
