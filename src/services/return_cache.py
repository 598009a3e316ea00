"""In-memory store of performance snapshots keyed by ticker and currency."""

from __future__ import annotations

from models.schemas import PerformanceSnapshot


class ReturnCache:
    """Snapshots live until ``clear()``; there is no TTL and no eviction.

    Keys are exact and case-sensitive, so ``("VWCE", "EUR")`` and
    ``("vwce", "EUR")`` are separate entries.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], PerformanceSnapshot] = {}

    def get(self, ticker: str, currency: str) -> PerformanceSnapshot | None:
        return self._entries.get((ticker, currency))

    def put(self, ticker: str, currency: str, snapshot: PerformanceSnapshot) -> None:
        self._entries[(ticker, currency)] = snapshot

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, item: tuple[str, str]) -> bool:
        return tuple(item) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
