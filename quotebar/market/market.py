"""Market index snapshot (Dow, Nasdaq, S&P 500) and open/closed session state."""

from __future__ import annotations

from typing import Any

import requests
from loguru import logger

from ..analysis.formatting import normalize_value
from ..config import Settings, get_settings
from ..exceptions import FetchError
from ..models import IndexQuote, MarketFetchResult, MarketSnapshot
from .yahoo_client import fetch_quote_results

OPEN_MARKET_STATE = "REGULAR"


def _index_quote(raw: dict[str, Any] | None) -> IndexQuote:
    if raw is None:
        return IndexQuote()
    return IndexQuote(
        latest=normalize_value(raw.get("regularMarketPrice")),
        change=normalize_value(raw.get("regularMarketChange")),
        percent=normalize_value(raw.get("regularMarketChangePercent")),
    )


def parse_market(results: list[dict[str, Any]], settings: Settings) -> MarketSnapshot:
    """Build a MarketSnapshot from raw index results.

    Indices absent from the response keep empty fields. The market counts as
    open only if some index reports the regular trading session.
    """
    by_symbol = {r.get("symbol"): r for r in results}
    is_open = any(r.get("marketState") == OPEN_MARKET_STATE for r in results)
    return MarketSnapshot(
        dow=_index_quote(by_symbol.get(settings.dow_symbol)),
        nasdaq=_index_quote(by_symbol.get(settings.nasdaq_symbol)),
        sp500=_index_quote(by_symbol.get(settings.sp500_symbol)),
        is_closed=not is_open,
    )


def fetch_market(
    *,
    session: requests.Session | None = None,
    settings: Settings | None = None,
) -> MarketFetchResult:
    """Fetch the index snapshot in one request. Failures come back as `error`."""
    settings = settings or get_settings()
    symbols = [settings.dow_symbol, settings.nasdaq_symbol, settings.sp500_symbol]

    try:
        results = fetch_quote_results(symbols, session=session, settings=settings)
    except FetchError as e:
        logger.warning(f"Market fetch failed: {e}")
        return MarketFetchResult(error=f"Error fetching market data: {e}")

    snapshot = parse_market(results, settings)
    returned = {r.get("symbol") for r in results}
    missing = [s for s in symbols if s not in returned]
    if missing:
        logger.warning(f"Market response missing indices: {', '.join(missing)}")
    logger.debug(f"Market snapshot fetched (closed={snapshot.is_closed})")
    return MarketFetchResult(snapshot=snapshot)
