"""Read the static fund universe and dividend history from bundled CSV files."""

from __future__ import annotations

from collections import defaultdict
from functools import lru_cache
from pathlib import Path

import pandas as pd

from models.enums import DistributionPolicy, ReplicationMethod
from models.schemas import DividendPayout, FundProfile
from transform.normalize.ticker_normalizer import normalize_ticker
from utils.validation import require_columns

DEFAULT_SAMPLES_DIR = Path(__file__).resolve().parents[2] / "data" / "samples"

FUND_COLUMNS = {
    "isin",
    "ticker",
    "name",
    "category",
    "ter",
    "currency",
    "distribution",
    "replication",
    "dividend_yield",
}
DIVIDEND_COLUMNS = {"ticker", "year", "amount", "yield_pct"}


def _read_csv(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Reference file not found: {path}")
    return pd.read_csv(path)


def _dividend_history(path: Path) -> dict[str, list[DividendPayout]]:
    history: dict[str, list[DividendPayout]] = defaultdict(list)
    if not path.exists():
        return history

    df = _read_csv(path)
    require_columns(df, DIVIDEND_COLUMNS)
    for row in df.sort_values(["ticker", "year"], ascending=[True, False]).itertuples(index=False):
        history[str(row.ticker)].append(
            DividendPayout(year=int(row.year), amount=float(row.amount), yield_pct=float(row.yield_pct))
        )
    return history


def read_fund_universe(samples_dir: Path | None = None) -> dict[str, FundProfile]:
    samples_dir = samples_dir or DEFAULT_SAMPLES_DIR
    funds_df = _read_csv(samples_dir / "fund_universe.csv")
    require_columns(funds_df, FUND_COLUMNS)
    history = _dividend_history(samples_dir / "dividend_history.csv")

    universe: dict[str, FundProfile] = {}
    for row in funds_df.itertuples(index=False):
        ticker = str(row.ticker)
        universe[ticker] = FundProfile(
            isin=str(row.isin),
            ticker=ticker,
            name=str(row.name),
            category=str(row.category),
            expense_ratio=float(row.ter),
            currency=str(row.currency),
            distribution=DistributionPolicy(row.distribution),
            dividend_yield=float(row.dividend_yield),
            replication=ReplicationMethod(row.replication),
            dividend_history=tuple(history.get(ticker, [])),
        )
    return universe


@lru_cache(maxsize=1)
def default_fund_universe() -> dict[str, FundProfile]:
    return read_fund_universe()


def find_fund(universe: dict[str, FundProfile], ticker: str) -> FundProfile:
    key = normalize_ticker(ticker)
    try:
        return universe[key]
    except KeyError:
        raise KeyError(f"Unknown fund ticker: {ticker!r}") from None
