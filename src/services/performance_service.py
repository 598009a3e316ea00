"""Fetch cumulative returns for a ticker, falling back to category estimates."""

from __future__ import annotations

import asyncio
import logging
import random

from config.settings import settings
from extract.performance_source import PerformanceSource
from models.schemas import PerformanceSnapshot
from services.return_cache import ReturnCache
from transform.calc.synthetic_estimator import estimate
from transform.parse.performance_response import parse_performance_reply

logger = logging.getLogger(__name__)


def build_prompt(ticker: str, currency: str) -> str:
    return f"""
Task: Find the cumulative Total Return (NAV with dividends reinvested) for ETF "{ticker}" expressed in {currency}.

Rules:
1. Total return only. If the ETF is distributing, assume dividends are reinvested so the
   figures are comparable with the accumulating share class of the same fund.
   Do not report price return.
2. All figures must be in {currency}. If the ETF trades in another currency, apply the
   approximate FX impact to the return.

Periods required (cumulative %): 1 month, 3 months, 1 year, 3 years, 5 years.

Output strictly valid JSON only:
{{"1M": number, "3M": number, "1Y": number, "3Y": number, "5Y": number}}
""".strip()


class PerformanceFetcher:
    """Resolve a snapshot per (ticker, currency); never raises to the caller.

    Failures of any kind are logged and replaced by a synthetic estimate, which
    is cached like a real result and is not retried for the cache's lifetime.
    Concurrent calls for the same key are not deduplicated.
    """

    def __init__(
        self,
        source: PerformanceSource,
        cache: ReturnCache,
        timeout_seconds: float | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.source = source
        self.cache = cache
        self.timeout_seconds = settings.upstream.timeout_seconds if timeout_seconds is None else timeout_seconds
        self._rng = rng

    async def fetch(self, ticker: str, currency: str, category: str) -> PerformanceSnapshot:
        cached = self.cache.get(ticker, currency)
        if cached is not None:
            logger.debug("Cache hit ticker=%s currency=%s", ticker, currency)
            return cached

        try:
            snapshot = await self._fetch_remote(ticker, currency)
        except Exception as exc:  # intentionally broad: every upstream failure degrades to an estimate
            logger.warning(
                "Performance fetch failed ticker=%s currency=%s, using %s estimate: %r",
                ticker,
                currency,
                category,
                exc,
            )
            snapshot = estimate(category, self._rng)

        self.cache.put(ticker, currency, snapshot)
        return snapshot

    async def _fetch_remote(self, ticker: str, currency: str) -> PerformanceSnapshot:
        reply = await asyncio.wait_for(
            self.source.generate(build_prompt(ticker, currency)),
            timeout=self.timeout_seconds,
        )
        source_uri = reply.citations[0] if reply.citations else None
        return parse_performance_reply(reply.text, source_uri=source_uri)
