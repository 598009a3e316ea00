"""Plausible category-level return estimates used when real data is unavailable."""

from __future__ import annotations

from dataclasses import dataclass
import random

from models.schemas import PerformanceSnapshot


@dataclass(frozen=True, slots=True)
class CategoryProfile:
    base_annual: float
    volatility: float


DEFAULT_PROFILE = CategoryProfile(base_annual=0.08, volatility=1.0)

# Evaluated top to bottom; a later match overwrites an earlier one, so
# "Tech Dividend" resolves to the Dividend profile.
CATEGORY_RULES: list[tuple[str, CategoryProfile]] = [
    ("Tech", CategoryProfile(0.16, 1.5)),
    ("USA", CategoryProfile(0.11, 1.2)),
    ("Bonds", CategoryProfile(0.04, 0.4)),
    ("Emerging", CategoryProfile(0.06, 1.3)),
    ("Europe", CategoryProfile(0.07, 1.0)),
    ("Multi", CategoryProfile(0.065, 0.7)),
    ("Dividend", CategoryProfile(0.075, 0.8)),
]

# Noise amplitude per horizon, in percentage points before volatility scaling.
NOISE_AMPLITUDE = {"1M": 1.0, "3M": 2.0, "1Y": 5.0, "3Y": 8.0, "5Y": 10.0}


def match_profile(category: str) -> CategoryProfile:
    profile = DEFAULT_PROFILE
    for keyword, candidate in CATEGORY_RULES:
        if keyword in category:
            profile = candidate
    return profile


def _compounded_pct(base_annual: float, years: int) -> float:
    return ((1 + base_annual) ** years - 1) * 100


def estimate(category: str, rng: random.Random | None = None) -> PerformanceSnapshot:
    """Return an estimated snapshot for ``category``.

    Results are intentionally not reproducible between calls unless a seeded
    ``rng`` is supplied.
    """
    rng = rng or random.Random()
    profile = match_profile(category)
    base = profile.base_annual

    def noisy(value: float, horizon: str) -> float:
        noise = rng.uniform(-1.0, 1.0) * profile.volatility * NOISE_AMPLITUDE[horizon]
        return round(value + noise, 2)

    return PerformanceSnapshot(
        one_month=noisy(base / 12 * 100, "1M"),
        three_months=noisy(base / 4 * 100, "3M"),
        one_year=noisy(base * 100, "1Y"),
        three_years=noisy(_compounded_pct(base, 3), "3Y"),
        five_years=noisy(_compounded_pct(base, 5), "5Y"),
        source=None,
        is_estimated=True,
    )
