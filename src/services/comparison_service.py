"""Side-by-side performance comparison of two funds."""

from __future__ import annotations

import asyncio
from urllib.parse import urlparse

import pandas as pd

from config.settings import settings
from models.enums import Horizon
from models.schemas import FundProfile, PerformanceSnapshot
from services.performance_service import PerformanceFetcher
from transform.calc.return_adjuster import adjust


async def fetch_pair(
    fetcher: PerformanceFetcher,
    left: FundProfile,
    right: FundProfile,
    currency: str,
    pause_seconds: float | None = None,
) -> tuple[PerformanceSnapshot, PerformanceSnapshot]:
    """Fetch both funds one after the other, pausing in between for upstream rate limits."""
    pause = settings.fetch_pause_seconds if pause_seconds is None else pause_seconds
    left_snapshot = await fetcher.fetch(left.ticker, currency, left.category)
    await asyncio.sleep(pause)
    right_snapshot = await fetcher.fetch(right.ticker, currency, right.category)
    return left_snapshot, right_snapshot


def _leader(left: FundProfile, right: FundProfile, left_value: float | None, right_value: float | None) -> str | None:
    if left_value is None or right_value is None:
        return None
    if left_value > right_value:
        return left.ticker
    if right_value > left_value:
        return right.ticker
    return "Tie"


def build_performance_table(
    left: FundProfile,
    left_snapshot: PerformanceSnapshot,
    right: FundProfile,
    right_snapshot: PerformanceSnapshot,
    include_dividends: bool,
) -> pd.DataFrame:
    left_label = left.ticker
    right_label = right.ticker if right.ticker != left.ticker else f"{right.ticker} (2)"

    rows = []
    for horizon in Horizon:
        raw_left = left_snapshot.value(horizon)
        raw_right = right_snapshot.value(horizon)
        value_left = None if raw_left is None else adjust(raw_left, horizon, left, include_dividends)
        value_right = None if raw_right is None else adjust(raw_right, horizon, right, include_dividends)
        difference = None if value_left is None or value_right is None else value_left - value_right
        rows.append(
            {
                "period": horizon.value,
                left_label: value_left,
                right_label: value_right,
                "difference": difference,
                "leader": _leader(left, right, value_left, value_right),
            }
        )
    return pd.DataFrame(rows, columns=["period", left_label, right_label, "difference", "leader"])


def any_estimated(*snapshots: PerformanceSnapshot) -> bool:
    return any(snapshot.is_estimated for snapshot in snapshots)


def source_hostname(uri: str | None) -> str | None:
    if not uri:
        return None
    return urlparse(uri).hostname
