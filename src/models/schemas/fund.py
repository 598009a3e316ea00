"""Schema for static fund reference records."""

from __future__ import annotations

from dataclasses import dataclass, field

from models.enums import DistributionPolicy, ReplicationMethod


@dataclass(frozen=True, slots=True)
class DividendPayout:
    year: int
    amount: float
    yield_pct: float


@dataclass(frozen=True, slots=True)
class FundProfile:
    isin: str
    ticker: str
    name: str
    category: str
    expense_ratio: float
    currency: str
    distribution: DistributionPolicy
    dividend_yield: float
    replication: ReplicationMethod = ReplicationMethod.PHYSICAL
    dividend_history: tuple[DividendPayout, ...] = field(default_factory=tuple)

    @property
    def is_distributing(self) -> bool:
        return self.distribution is DistributionPolicy.DISTRIBUTING
