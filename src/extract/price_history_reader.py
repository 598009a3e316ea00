"""Read weekly closing-price series from CSV files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from models.schemas import PricePoint
from utils.validation import require_columns

DEFAULT_PRICES_DIR = Path(__file__).resolve().parents[2] / "data" / "samples" / "prices"


def read_price_history(path: Path) -> list[PricePoint]:
    if not path.exists():
        raise FileNotFoundError(f"Price history not found: {path}")
    df = pd.read_csv(path)
    require_columns(df, {"date", "close"})
    df = df.dropna(subset=["date", "close"]).copy()
    df["date"] = pd.to_datetime(df["date"])
    return [PricePoint(date=row.date.date(), close=float(row.close)) for row in df.itertuples(index=False)]


def price_history_for(ticker: str, prices_dir: Path | None = None) -> list[PricePoint]:
    return read_price_history((prices_dir or DEFAULT_PRICES_DIR) / f"{ticker}.csv")
