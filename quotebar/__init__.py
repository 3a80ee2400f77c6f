"""Quotebar: stock quotes with a 52-week range bar, from the command line."""

from .engine import run_quotes
from .models import IndexQuote, MarketFetchResult, MarketSnapshot, QuoteFetchResult, StockQuote

__all__ = [
    "run_quotes",
    "IndexQuote",
    "MarketFetchResult",
    "MarketSnapshot",
    "QuoteFetchResult",
    "StockQuote",
]
