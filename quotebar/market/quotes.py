"""Batched stock quote fetch and tolerant parsing into StockQuote records."""

from __future__ import annotations

from typing import Any

import requests
from loguru import logger

from ..analysis.formatting import normalize_value, parse_float
from ..config import Settings
from ..exceptions import FetchError
from ..models import QuoteFetchResult, StockQuote
from .yahoo_client import fetch_quote_results

# Provider key -> StockQuote attribute
QUOTE_FIELDS: dict[str, str] = {
    "symbol": "ticker",
    "regularMarketPrice": "last_trade",
    "regularMarketChange": "change",
    "regularMarketChangePercent": "change_pct",
    "regularMarketOpen": "open",
    "regularMarketDayLow": "low",
    "regularMarketDayHigh": "high",
    "fiftyTwoWeekLow": "low52",
    "fiftyTwoWeekHigh": "high52",
    "regularMarketVolume": "volume",
    "averageDailyVolume10Day": "avg_volume",
    "trailingPE": "pe_ratio",
    "trailingAnnualDividendRate": "dividend",
    "trailingAnnualDividendYield": "dividend_yield",
    "marketCap": "market_cap",
    "currency": "currency",
}


def parse_quote(raw: dict[str, Any]) -> StockQuote:
    """Map one provider result object onto a StockQuote. Never raises."""
    fields = {attr: normalize_value(raw[key]) for key, attr in QUOTE_FIELDS.items() if key in raw}

    change = parse_float(fields.get("change", ""))
    advancing = change is not None and change >= 0.0

    return StockQuote(**fields, advancing=advancing)


def parse_quotes(results: list[dict[str, Any]]) -> list[StockQuote]:
    return [parse_quote(raw) for raw in results]


def is_ready(tickers: list[str], market_is_closed: bool, has_prior: bool) -> bool:
    """True when there is something to ask for and the answer may have changed.

    Quotes are always fetched once; after that they are refreshed only while
    the market is open.
    """
    return bool(tickers) and (not has_prior or not market_is_closed)


def fetch_quotes(
    tickers: list[str],
    *,
    market_is_closed: bool = False,
    prior: list[StockQuote] | None = None,
    session: requests.Session | None = None,
    settings: Settings | None = None,
) -> QuoteFetchResult:
    """Fetch and parse quotes for `tickers`.

    Skipped fetches and failed fetches both hand back `prior` (or an empty
    list); a failure additionally carries the error message.
    """
    previous = list(prior) if prior is not None else []

    if not is_ready(tickers, market_is_closed, prior is not None):
        logger.debug(
            f"Skipping quote fetch (tickers={len(tickers)}, "
            f"market_closed={market_is_closed}, has_prior={prior is not None})"
        )
        return QuoteFetchResult(quotes=previous)

    try:
        results = fetch_quote_results(tickers, session=session, settings=settings)
    except FetchError as e:
        logger.warning(f"Quote fetch failed: {e}")
        return QuoteFetchResult(quotes=previous, error=f"Error fetching quotes: {e}")

    quotes = parse_quotes(results)
    logger.debug(f"Parsed {len(quotes)} quote(s) for {len(tickers)} ticker(s)")
    return QuoteFetchResult(quotes=quotes, fetched=True)
