"""Schema for cumulative-return snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from models.enums import Horizon

_FIELDS = {
    Horizon.ONE_MONTH: "one_month",
    Horizon.THREE_MONTHS: "three_months",
    Horizon.ONE_YEAR: "one_year",
    Horizon.THREE_YEARS: "three_years",
    Horizon.FIVE_YEARS: "five_years",
}


@dataclass(frozen=True, slots=True)
class PerformanceSnapshot:
    """Cumulative returns in percent for the five fixed horizons.

    ``one_year`` is always present. In a sourced snapshot the other horizons
    are ``None`` when the source did not report them as numbers.
    """

    one_month: float | None
    three_months: float | None
    one_year: float
    three_years: float | None
    five_years: float | None
    source: str | None = None
    is_estimated: bool = False

    def value(self, horizon: Horizon | str) -> float | None:
        return getattr(self, _FIELDS[Horizon(horizon)])

    def as_dict(self) -> dict[str, float | None]:
        return {horizon.value: self.value(horizon) for horizon in Horizon}
