"""Command-line entry point: print the index line and one block per ticker."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from .analysis.range_bar import range_bar
from .config import get_settings
from .engine import normalize_tickers, run_quotes
from .models import IndexQuote, MarketSnapshot, StockQuote

PROG = "quotebar"


def _index_cell(name: str, index: IndexQuote) -> str:
    return f"{name}\t{index.latest} ({index.change}/{index.percent})"


def render(snapshot: MarketSnapshot, quotes: list[StockQuote]) -> list[str]:
    """Build the output lines for a snapshot and its quotes."""
    lines = [
        "\t".join(
            [
                _index_cell("DOW", snapshot.dow),
                _index_cell("Nasdaq", snapshot.nasdaq),
                _index_cell("S&P 500", snapshot.sp500),
            ]
        )
    ]
    for q in quotes:
        lines.append(f"{q.ticker}\t{q.last_trade} ({q.change}/{q.change_pct}%) on {q.volume} shares")
        lines.append(f"\t52-wk: {q.low52}{range_bar(q.low52, q.high52, q.last_trade)}{q.high52}")
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Show index levels and stock quotes with a 52-week range bar.",
    )
    parser.add_argument("tickers", nargs="*", help="ticker symbols, comma-separated")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else get_settings().log_level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point

    Returns:
        Exit code (0 for success, 1 for a missing argument or fetch failure)
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    tickers = normalize_tickers(args.tickers)
    if not tickers:
        print(f"Format is: {PROG} <ticker>{{,<ticker>}}")
        return 1

    market, quotes = run_quotes(tickers)
    if not market.ok or market.snapshot is None:
        print(market.error)
        return 1
    if not quotes.ok:
        print(quotes.error)
        return 1

    for line in render(market.snapshot, quotes.quotes):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
