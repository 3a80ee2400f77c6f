"""Tests for core data models."""

import pytest
from pydantic import ValidationError

from quotebar.models import (
    IndexQuote,
    MarketFetchResult,
    MarketSnapshot,
    QuoteFetchResult,
    StockQuote,
)


class TestStockQuote:
    def test_defaults(self):
        q = StockQuote()
        assert q.ticker == ""
        assert q.high52 == ""
        assert q.advancing is False

    def test_immutable(self):
        q = StockQuote(ticker="AAPL")
        with pytest.raises(ValidationError):
            q.ticker = "MSFT"


class TestMarketSnapshot:
    def test_defaults_empty_and_closed(self):
        snap = MarketSnapshot()
        assert snap.dow == IndexQuote()
        assert snap.is_closed is True

    def test_immutable(self):
        snap = MarketSnapshot(is_closed=False)
        with pytest.raises(ValidationError):
            snap.is_closed = True


class TestFetchResults:
    def test_quote_result_ok(self):
        assert QuoteFetchResult().ok
        assert not QuoteFetchResult(error="x").ok

    def test_market_result_ok(self):
        assert MarketFetchResult(snapshot=MarketSnapshot()).ok
        assert not MarketFetchResult(error="x").ok
