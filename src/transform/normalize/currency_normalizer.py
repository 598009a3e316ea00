"""Normalize currency values to ISO-like uppercase symbols."""

from __future__ import annotations


_CURRENCY_ALIASES = {
    "EURO": "EUR",
    "EUR": "EUR",
    "DOLLAR": "USD",
    "USD": "USD",
    "ZLOTY": "PLN",
    "ZL": "PLN",
    "PLN": "PLN",
    "POUND": "GBP",
    "GBP": "GBP",
}


def normalize_currency(value: str) -> str:
    return _CURRENCY_ALIASES.get(value.strip().upper(), value.strip().upper())
