"""Normalize user-entered tickers into the display tickers of the fund universe."""

from __future__ import annotations

_EXCHANGE_SUFFIXES = (".DE", ".L", ".AS", ".WA")


def normalize_ticker(value: str) -> str:
    cleaned = value.strip().upper().replace(" ", "")
    for suffix in _EXCHANGE_SUFFIXES:
        if cleaned.endswith(suffix):
            return cleaned[: -len(suffix)]
    return cleaned
