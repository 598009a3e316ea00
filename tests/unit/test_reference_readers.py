from __future__ import annotations

from datetime import date
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from extract.fund_universe_reader import default_fund_universe, find_fund, read_fund_universe
from extract.price_history_reader import price_history_for, read_price_history
from models.enums import DistributionPolicy


class TestFundUniverseReader(unittest.TestCase):
    def test_bundled_universe(self) -> None:
        universe = default_fund_universe()
        vwrl = universe["VWRL"]
        self.assertEqual(vwrl.distribution, DistributionPolicy.DISTRIBUTING)
        self.assertAlmostEqual(vwrl.dividend_yield, 0.021)
        self.assertEqual([p.year for p in vwrl.dividend_history], [2023, 2022, 2021, 2020])
        self.assertFalse(universe["VWCE"].is_distributing)
        self.assertEqual(universe["VWCE"].dividend_history, ())

    def test_find_fund_normalizes_input(self) -> None:
        universe = default_fund_universe()
        self.assertEqual(find_fund(universe, " vwce.de ").ticker, "VWCE")
        with self.assertRaises(KeyError):
            find_fund(universe, "NOPE")

    def test_missing_columns_and_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            samples = Path(tmp)
            with self.assertRaises(FileNotFoundError):
                read_fund_universe(samples)

            (samples / "fund_universe.csv").write_text("ticker,name\nVWCE,All-World\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_fund_universe(samples)


class TestPriceHistoryReader(unittest.TestCase):
    def test_bundled_series(self) -> None:
        series = price_history_for("VWCE")
        self.assertGreaterEqual(len(series), 2)
        self.assertEqual(series[0].date, date(2024, 1, 5))
        self.assertIsInstance(series[0].close, float)

    def test_reads_csv_and_validates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            good = Path(tmp) / "good.csv"
            good.write_text("date,close\n2024-01-12,101.5\n2024-01-05,100\n", encoding="utf-8")
            series = read_price_history(good)
            self.assertEqual([p.close for p in series], [101.5, 100.0])

            bad = Path(tmp) / "bad.csv"
            bad.write_text("day,price\n2024-01-05,100\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_price_history(bad)

            with self.assertRaises(FileNotFoundError):
                read_price_history(Path(tmp) / "missing.csv")


if __name__ == "__main__":
    unittest.main()
