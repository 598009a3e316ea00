"""Common enums shared by fetching, adjustment, and interpolation."""

from enum import Enum


class Horizon(str, Enum):
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    ONE_YEAR = "1Y"
    THREE_YEARS = "3Y"
    FIVE_YEARS = "5Y"


class DistributionPolicy(str, Enum):
    ACCUMULATING = "Accumulating"
    DISTRIBUTING = "Distributing"


class ReplicationMethod(str, Enum):
    PHYSICAL = "Physical"
    SYNTHETIC = "Synthetic"
