"""Example: refresh a few quotes every minute until the market closes."""

import time

from quotebar import run_quotes
from quotebar.cli import render


def main():
    tickers = ["NVDA", "AMD", "INTC"]
    quotes = None

    while True:
        market, result = run_quotes(tickers, prior=quotes)
        if not market.ok:
            print(market.error)
            return
        if not result.ok:
            print(result.error)
            return

        if result.fetched:
            print("\n".join(render(market.snapshot, result.quotes)))
        if market.snapshot.is_closed:
            print("Market closed.")
            return

        quotes = result.quotes
        time.sleep(60)


if __name__ == "__main__":
    main()
