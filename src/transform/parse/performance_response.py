"""Turn upstream reply text into a validated performance snapshot."""

from __future__ import annotations

import json
import re
from typing import Any

from models.enums import Horizon
from models.schemas import PerformanceSnapshot
from utils.validation import is_number

_EMBEDDED_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class InvalidPerformanceData(ValueError):
    """Raised when a reply cannot be read as a performance payload."""


def _load_payload(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = _EMBEDDED_OBJECT.search(text)
    if match is None:
        raise InvalidPerformanceData("Reply contains no JSON object")
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise InvalidPerformanceData(f"Embedded JSON object is malformed: {exc}") from exc


def _optional_number(payload: dict[str, Any], horizon: Horizon) -> float | None:
    value = payload.get(horizon.value)
    return float(value) if is_number(value) else None


def parse_performance_reply(text: str, source_uri: str | None = None) -> PerformanceSnapshot:
    payload = _load_payload(text)
    if not isinstance(payload, dict):
        raise InvalidPerformanceData(f"Expected a JSON object, got {type(payload).__name__}")

    one_year = payload.get(Horizon.ONE_YEAR.value)
    if not is_number(one_year):
        raise InvalidPerformanceData(f"Missing numeric {Horizon.ONE_YEAR.value} return: {one_year!r}")

    return PerformanceSnapshot(
        one_month=_optional_number(payload, Horizon.ONE_MONTH),
        three_months=_optional_number(payload, Horizon.THREE_MONTHS),
        one_year=float(one_year),
        three_years=_optional_number(payload, Horizon.THREE_YEARS),
        five_years=_optional_number(payload, Horizon.FIVE_YEARS),
        source=source_uri,
        is_estimated=False,
    )
