"""Configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    quotes_url: str = "https://query1.finance.yahoo.com/v7/finance/quote"
    request_timeout: float = Field(default=10.0, gt=0)
    user_agent: str | None = None
    dow_symbol: str = "^DJI"
    nasdaq_symbol: str = "^IXIC"
    sp500_symbol: str = "^GSPC"
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "QUOTEBAR_",
        "case_sensitive": False,
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings for the current process."""
    return Settings()
