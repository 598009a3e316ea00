"""Convert total-return figures into price-only returns for distributing funds."""

from __future__ import annotations

from models.enums import Horizon
from models.schemas import FundProfile

# Years of trailing yield removed per horizon. Linear, not compounded.
DRAG_MULTIPLIERS = {
    Horizon.ONE_MONTH: 1 / 12,
    Horizon.THREE_MONTHS: 1 / 4,
    Horizon.ONE_YEAR: 1.0,
    Horizon.THREE_YEARS: 3.0,
    Horizon.FIVE_YEARS: 5.0,
}


def dividend_drag(period: Horizon | str, fund: FundProfile) -> float:
    return fund.dividend_yield * 100 * DRAG_MULTIPLIERS[Horizon(period)]


def adjust(raw_return: float, period: Horizon | str, fund: FundProfile, include_dividends: bool = False) -> float:
    if include_dividends or not fund.is_distributing:
        return raw_return
    return raw_return - dividend_drag(period, fund)
