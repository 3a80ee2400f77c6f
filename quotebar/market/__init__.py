"""Market data layer (Yahoo Finance)."""

from .market import fetch_market
from .quotes import fetch_quotes

__all__ = ["fetch_market", "fetch_quotes"]
