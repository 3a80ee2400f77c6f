"""Synchronous client for the Yahoo Finance v7 batched quote endpoint."""

from __future__ import annotations

from typing import Any

import requests
from loguru import logger

from ..config import Settings, get_settings
from ..exceptions import EmptyRequestError, MalformedResponseError, TransportError

# Fixed flags the batched quote endpoint expects alongside the symbol list.
QUOTE_QUERY_FLAGS: dict[str, str] = {
    "range": "1d",
    "interval": "5m",
    "indicators": "close",
    "includeTimestamps": "false",
    "includePrePost": "false",
    "corsDomain": "finance.yahoo.com",
    ".tsrc": "finance",
}


def build_quote_params(symbols: list[str]) -> dict[str, str]:
    """Build query parameters for one batched request covering every symbol."""
    if not symbols:
        raise EmptyRequestError("at least one symbol is required")
    return {"symbols": ",".join(symbols), **QUOTE_QUERY_FLAGS}


def _extract_results(payload: Any) -> list[dict[str, Any]]:
    """Pull quoteResponse.result out of a decoded body, validating its shape."""
    if not isinstance(payload, dict):
        raise MalformedResponseError("response body is not a JSON object")
    quote_response = payload.get("quoteResponse")
    if not isinstance(quote_response, dict):
        raise MalformedResponseError("response is missing 'quoteResponse'")
    results = quote_response.get("result")
    if results is None:
        return []
    if not isinstance(results, list):
        raise MalformedResponseError("'quoteResponse.result' is not a list")
    for entry in results:
        if not isinstance(entry, dict):
            raise MalformedResponseError("'quoteResponse.result' contains a non-object entry")
    return results


def fetch_quote_results(
    symbols: list[str],
    session: requests.Session | None = None,
    settings: Settings | None = None,
) -> list[dict[str, Any]]:
    """Fetch raw quote objects for `symbols` in a single round trip.

    Raises TransportError for network failures and non-2xx responses,
    MalformedResponseError when the body is not the expected JSON shape.
    """
    settings = settings or get_settings()
    http = session or requests
    params = build_quote_params(symbols)
    headers = {"User-Agent": settings.user_agent} if settings.user_agent else None

    logger.debug(f"Requesting {len(symbols)} symbol(s) from {settings.quotes_url}")
    try:
        with http.get(
            settings.quotes_url,
            params=params,
            headers=headers,
            timeout=settings.request_timeout,
        ) as response:
            response.raise_for_status()
            try:
                payload = response.json()
            except ValueError as e:
                raise MalformedResponseError(f"response body is not valid JSON: {e}") from e
    except requests.RequestException as e:
        raise TransportError(str(e)) from e

    return _extract_results(payload)
