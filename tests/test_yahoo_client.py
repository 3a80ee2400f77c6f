"""Tests for the batched quote transport."""

from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from quotebar.config import Settings
from quotebar.exceptions import EmptyRequestError, MalformedResponseError, TransportError
from quotebar.market.yahoo_client import build_quote_params, fetch_quote_results

from payloads import AAPL, MSFT, QUOTES_URL, quote_payload


def _settings():
    """Build Settings pointing at the stubbed quote URL, independent of the environment."""
    return Settings(
        quotes_url=QUOTES_URL,
        request_timeout=2.0,
        user_agent=None,
        dow_symbol="^DJI",
        nasdaq_symbol="^IXIC",
        sp500_symbol="^GSPC",
    )


class TestBuildQuoteParams:
    def test_symbols_joined(self):
        params = build_quote_params(["AAPL", "MSFT", "^DJI"])
        assert params["symbols"] == "AAPL,MSFT,^DJI"

    def test_fixed_flags(self):
        params = build_quote_params(["AAPL"])
        assert params["range"] == "1d"
        assert params["interval"] == "5m"
        assert params["indicators"] == "close"
        assert params["includeTimestamps"] == "false"
        assert params["includePrePost"] == "false"
        assert params["corsDomain"] == "finance.yahoo.com"
        assert params[".tsrc"] == "finance"

    def test_empty_rejected(self):
        with pytest.raises(EmptyRequestError):
            build_quote_params([])


class TestFetchQuoteResults:
    @responses.activate
    def test_single_round_trip(self):
        settings = _settings()
        responses.get(QUOTES_URL, json=quote_payload(AAPL, MSFT), status=200)

        results = fetch_quote_results(["AAPL", "MSFT"], settings=settings)

        assert [r["symbol"] for r in results] == ["AAPL", "MSFT"]
        assert len(responses.calls) == 1
        query = parse_qs(urlsplit(responses.calls[0].request.url).query)
        assert query["symbols"] == ["AAPL,MSFT"]
        assert query[".tsrc"] == ["finance"]

    @responses.activate
    def test_no_user_agent_by_default(self):
        settings = _settings()
        responses.get(QUOTES_URL, json=quote_payload(AAPL), status=200)

        fetch_quote_results(["AAPL"], settings=settings)

        assert "quotebar" not in responses.calls[0].request.headers.get("User-Agent", "")

    @responses.activate
    def test_user_agent_when_configured(self):
        settings = _settings()
        settings.user_agent = "quotebar/0.1"
        responses.get(QUOTES_URL, json=quote_payload(AAPL), status=200)

        fetch_quote_results(["AAPL"], settings=settings)

        assert responses.calls[0].request.headers["User-Agent"] == "quotebar/0.1"

    @responses.activate
    def test_null_result_is_empty(self):
        settings = _settings()
        responses.get(QUOTES_URL, json={"quoteResponse": {"result": None}}, status=200)
        assert fetch_quote_results(["NOPE"], settings=settings) == []

    @responses.activate
    def test_connection_error(self):
        settings = _settings()
        responses.get(QUOTES_URL, body=requests.ConnectionError("connection refused"))

        with pytest.raises(TransportError, match="connection refused"):
            fetch_quote_results(["AAPL"], settings=settings)

    @responses.activate
    def test_non_success_status(self):
        settings = _settings()
        responses.get(QUOTES_URL, json={"finance": {"error": "Unauthorized"}}, status=401)

        with pytest.raises(TransportError):
            fetch_quote_results(["AAPL"], settings=settings)

    @responses.activate
    def test_invalid_json(self):
        settings = _settings()
        responses.get(QUOTES_URL, body="<html>oops</html>", status=200)

        with pytest.raises(MalformedResponseError):
            fetch_quote_results(["AAPL"], settings=settings)

    @pytest.mark.parametrize(
        "body",
        [
            [],
            {"somethingElse": {}},
            {"quoteResponse": []},
            {"quoteResponse": {"result": {"symbol": "AAPL"}}},
            {"quoteResponse": {"result": ["AAPL"]}},
        ],
    )
    @responses.activate
    def test_shape_mismatch(self, body):
        settings = _settings()
        responses.get(QUOTES_URL, json=body, status=200)

        with pytest.raises(MalformedResponseError):
            fetch_quote_results(["AAPL"], settings=settings)
