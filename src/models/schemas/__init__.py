"""Schema objects for core entities."""

from .fund import DividendPayout, FundProfile
from .performance import PerformanceSnapshot
from .price import ChartPoint, PricePoint

__all__ = ["FundProfile", "DividendPayout", "PerformanceSnapshot", "PricePoint", "ChartPoint"]
