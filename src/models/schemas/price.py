"""Schemas for raw price observations and rendered chart points."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, slots=True)
class PricePoint:
    date: date
    close: float


@dataclass(frozen=True, slots=True)
class ChartPoint:
    date: str
    etf1_value: float
    etf2_value: float | None
    timestamp: datetime
