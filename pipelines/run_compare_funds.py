"""Pipeline entrypoint: compare cumulative returns of two funds from the command line."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
import sys

import pandas as pd

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from config.settings import settings  # noqa: E402
from extract.fund_universe_reader import default_fund_universe, find_fund  # noqa: E402
from extract.performance_source import OpenAIPerformanceSource, UnavailableSource  # noqa: E402
from services.comparison_service import (  # noqa: E402
    any_estimated,
    build_performance_table,
    fetch_pair,
    source_hostname,
)
from services.performance_service import PerformanceFetcher  # noqa: E402
from services.return_cache import ReturnCache  # noqa: E402
from transform.normalize.currency_normalizer import normalize_currency  # noqa: E402

logger = logging.getLogger("run_compare_funds")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare cumulative returns of two funds.")
    parser.add_argument("left", help="Ticker of the first fund, e.g. VWCE.")
    parser.add_argument("right", help="Ticker of the second fund, e.g. VWRL.")
    parser.add_argument(
        "--currency",
        default=settings.default_currency,
        help=f"Currency the returns are expressed in (default: {settings.default_currency}).",
    )
    parser.add_argument(
        "--price-return",
        action="store_true",
        help="Show price-only returns (dividend drag removed for distributing funds).",
    )
    parser.add_argument(
        "--pause-seconds",
        type=float,
        default=settings.fetch_pause_seconds,
        help="Pause between the two upstream requests.",
    )
    parser.add_argument("--offline", action="store_true", help="Skip the upstream source and use estimates.")
    return parser.parse_args()


def _build_source(offline: bool) -> OpenAIPerformanceSource | UnavailableSource:
    if offline:
        return UnavailableSource()
    if not settings.upstream.api_key:
        logger.warning("OPENAI_API_KEY is not set; falling back to estimated returns.")
        return UnavailableSource()
    return OpenAIPerformanceSource()


def _format_pct(value: float | None) -> str:
    if value is None or pd.isna(value):
        return "n/a"
    return f"{value:+.2f}%"


async def _run(args: argparse.Namespace) -> int:
    universe = default_fund_universe()
    try:
        left = find_fund(universe, args.left)
        right = find_fund(universe, args.right)
    except KeyError as exc:
        print(f"run_compare_funds failed: {exc.args[0]}")
        return 1

    currency = normalize_currency(args.currency)
    cache = ReturnCache()
    source = _build_source(args.offline)
    fetcher = PerformanceFetcher(source, cache)
    try:
        left_snapshot, right_snapshot = await fetch_pair(fetcher, left, right, currency, args.pause_seconds)
    finally:
        await source.aclose()
        cache.clear()

    include_dividends = not args.price_return
    table = build_performance_table(left, left_snapshot, right, right_snapshot, include_dividends)
    for column in table.columns[1:4]:
        table[column] = table[column].map(_format_pct)

    metric = "Total Return (dividends reinvested)" if include_dividends else "Price Return (dividends excluded)"
    print(f"{left.ticker} vs {right.ticker} in {currency}: {metric}")
    if any_estimated(left_snapshot, right_snapshot):
        print("Note: estimated data shown for at least one fund.")
    print(table.to_string(index=False))

    for label, snapshot in (("A", left_snapshot), ("B", right_snapshot)):
        host = source_hostname(snapshot.source)
        if host:
            print(f"Source {label}: {host}")
    return 0


def main() -> int:
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return asyncio.run(_run(_parse_args()))


if __name__ == "__main__":
    raise SystemExit(main())
