from __future__ import annotations

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from models.schemas import PerformanceSnapshot
from services.return_cache import ReturnCache


def _snapshot(one_year: float) -> PerformanceSnapshot:
    return PerformanceSnapshot(1.0, 2.0, one_year, 20.0, 40.0, source=None, is_estimated=False)


class TestReturnCache(unittest.TestCase):
    def test_miss_returns_none(self) -> None:
        self.assertIsNone(ReturnCache().get("VWCE", "EUR"))

    def test_put_then_get_returns_same_object(self) -> None:
        cache = ReturnCache()
        snapshot = _snapshot(10.0)
        cache.put("VWCE", "EUR", snapshot)
        self.assertIs(cache.get("VWCE", "EUR"), snapshot)
        self.assertIn(("VWCE", "EUR"), cache)
        self.assertEqual(len(cache), 1)

    def test_keys_are_case_sensitive_and_currency_specific(self) -> None:
        cache = ReturnCache()
        cache.put("VWCE", "EUR", _snapshot(10.0))
        self.assertIsNone(cache.get("vwce", "EUR"))
        self.assertIsNone(cache.get("VWCE", "PLN"))

    def test_separator_in_ticker_does_not_collide(self) -> None:
        cache = ReturnCache()
        cache.put("A-B", "C", _snapshot(10.0))
        self.assertIsNone(cache.get("A", "B-C"))
        self.assertNotIn(("A", "B-C"), cache)

    def test_instances_are_isolated_and_clear_discards(self) -> None:
        first, second = ReturnCache(), ReturnCache()
        first.put("VWCE", "EUR", _snapshot(10.0))
        self.assertIsNone(second.get("VWCE", "EUR"))

        first.clear()
        self.assertEqual(len(first), 0)
        self.assertIsNone(first.get("VWCE", "EUR"))


if __name__ == "__main__":
    unittest.main()
