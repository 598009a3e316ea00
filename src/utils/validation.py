"""Validation helpers for dataframe schemas and upstream payloads."""

from __future__ import annotations

import math
from typing import Any

import pandas as pd


def require_columns(df: pd.DataFrame, required: set[str]) -> None:
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")


def is_number(value: Any) -> bool:
    """True for finite ints and floats; JSON booleans do not count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
