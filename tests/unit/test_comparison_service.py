from __future__ import annotations

import asyncio
from pathlib import Path
import sys
import unittest
from unittest import mock

import pandas as pd

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from models.enums import DistributionPolicy
from models.schemas import FundProfile, PerformanceSnapshot
from services import comparison_service
from services.comparison_service import any_estimated, build_performance_table, fetch_pair, source_hostname


def _fund(ticker: str, distribution: DistributionPolicy, dividend_yield: float = 0.0) -> FundProfile:
    return FundProfile(
        isin=f"XX{ticker}",
        ticker=ticker,
        name=ticker,
        category="Global",
        expense_ratio=0.22,
        currency="USD",
        distribution=distribution,
        dividend_yield=dividend_yield,
    )


VWCE = _fund("VWCE", DistributionPolicy.ACCUMULATING)
VWRL = _fund("VWRL", DistributionPolicy.DISTRIBUTING, dividend_yield=0.02)
SNAPSHOT = PerformanceSnapshot(1.0, 3.0, 10.0, 30.0, 50.0, source="https://www.justetf.com/x", is_estimated=False)


class RecordingFetcher:
    def __init__(self) -> None:
        self.events: list[str] = []

    async def fetch(self, ticker: str, currency: str, category: str) -> PerformanceSnapshot:
        self.events.append(f"fetch:{ticker}:{currency}")
        return SNAPSHOT


class TestFetchPair(unittest.IsolatedAsyncioTestCase):
    async def test_fetches_sequentially_with_pause_between(self) -> None:
        fetcher = RecordingFetcher()
        real_sleep = asyncio.sleep

        async def fake_sleep(seconds: float) -> None:
            fetcher.events.append(f"sleep:{seconds}")
            await real_sleep(0)

        with mock.patch.object(comparison_service.asyncio, "sleep", fake_sleep):
            left, right = await fetch_pair(fetcher, VWCE, VWRL, "EUR", pause_seconds=0.5)

        self.assertEqual(fetcher.events, ["fetch:VWCE:EUR", "sleep:0.5", "fetch:VWRL:EUR"])
        self.assertIs(left, SNAPSHOT)
        self.assertIs(right, SNAPSHOT)


class TestPerformanceTable(unittest.TestCase):
    def test_total_return_rows_match_snapshots(self) -> None:
        table = build_performance_table(VWCE, SNAPSHOT, VWRL, SNAPSHOT, include_dividends=True)
        self.assertEqual(list(table.columns), ["period", "VWCE", "VWRL", "difference", "leader"])
        self.assertEqual(list(table["period"]), ["1M", "3M", "1Y", "3Y", "5Y"])
        self.assertTrue((table["difference"] == 0.0).all())
        self.assertTrue((table["leader"] == "Tie").all())

    def test_price_return_removes_drag_from_distributing_fund(self) -> None:
        table = build_performance_table(VWCE, SNAPSHOT, VWRL, SNAPSHOT, include_dividends=False).set_index("period")
        self.assertAlmostEqual(table.loc["1Y", "VWRL"], 8.0, places=9)
        self.assertAlmostEqual(table.loc["5Y", "VWRL"], 40.0, places=9)
        self.assertAlmostEqual(table.loc["1Y", "difference"], 2.0, places=9)
        self.assertEqual(table.loc["1Y", "VWCE"], 10.0)
        self.assertEqual(table.loc["3Y", "leader"], "VWCE")

    def test_unreported_horizon_has_no_value_or_leader(self) -> None:
        partial = PerformanceSnapshot(None, 3.0, 10.0, None, None, source=None, is_estimated=False)
        table = build_performance_table(VWCE, partial, VWRL, SNAPSHOT, include_dividends=False).set_index("period")
        self.assertTrue(pd.isna(table.loc["1M", "VWCE"]))
        self.assertTrue(pd.isna(table.loc["1M", "difference"]))
        self.assertIsNone(table.loc["1M", "leader"])
        self.assertEqual(table.loc["3M", "leader"], "VWCE")

    def test_same_fund_on_both_sides(self) -> None:
        table = build_performance_table(VWCE, SNAPSHOT, VWCE, SNAPSHOT, include_dividends=True)
        self.assertEqual(list(table.columns)[1:3], ["VWCE", "VWCE (2)"])

    def test_badge_and_source_helpers(self) -> None:
        estimated = PerformanceSnapshot(1.0, 2.0, 3.0, 4.0, 5.0, is_estimated=True)
        self.assertTrue(any_estimated(SNAPSHOT, estimated))
        self.assertFalse(any_estimated(SNAPSHOT, SNAPSHOT))
        self.assertEqual(source_hostname(SNAPSHOT.source), "www.justetf.com")
        self.assertIsNone(source_hostname(None))


if __name__ == "__main__":
    unittest.main()
