"""Core data models.

Every quote field is kept as a display string exactly as it will be printed:
- strings from the provider are stored verbatim
- numbers are magnitude-scaled (see analysis.formatting.scale_number)
- missing fields are empty strings
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IndexQuote(BaseModel):
    """Latest level of a single market index."""

    model_config = ConfigDict(frozen=True)

    latest: str = ""
    change: str = ""
    percent: str = ""


class MarketSnapshot(BaseModel):
    """Current levels of the tracked indices plus the session state."""

    model_config = ConfigDict(frozen=True)

    dow: IndexQuote = Field(default_factory=IndexQuote)
    nasdaq: IndexQuote = Field(default_factory=IndexQuote)
    sp500: IndexQuote = Field(default_factory=IndexQuote)
    is_closed: bool = True


class StockQuote(BaseModel):
    """Quote data for one ticker. `advancing` is derived, everything else is fetched."""

    model_config = ConfigDict(frozen=True)

    ticker: str = ""
    last_trade: str = ""
    change: str = ""
    change_pct: str = ""
    open: str = ""
    low: str = ""  # day's low
    high: str = ""  # day's high
    low52: str = ""
    high52: str = ""
    volume: str = ""
    avg_volume: str = ""  # 10-day average
    pe_ratio: str = ""
    dividend: str = ""
    dividend_yield: str = ""
    market_cap: str = ""
    currency: str = ""
    advancing: bool = False  # True when change >= 0


class MarketFetchResult(BaseModel):
    """Outcome of a market snapshot fetch. `snapshot` is None on failure."""

    snapshot: MarketSnapshot | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class QuoteFetchResult(BaseModel):
    """Outcome of a quote fetch.

    `quotes` always holds a usable result set: the fresh quotes on success, or
    the prior set (possibly empty) when the fetch was skipped or failed.
    """

    quotes: list[StockQuote] = Field(default_factory=list)
    error: str | None = None
    fetched: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None
