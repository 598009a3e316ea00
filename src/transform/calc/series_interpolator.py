"""Densify weekly price series into percentage-return chart points."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, time

import pandas as pd

from models.schemas import ChartPoint, FundProfile, PricePoint

STEPS_PER_SEGMENT = 5
DISPLAY_DATE_FORMAT = "%d %b %y"


def _lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def _as_datetime(point: PricePoint) -> datetime:
    return datetime.combine(point.date, time.min)


def _pct(price: float, baseline: float) -> float:
    return round((price - baseline) / baseline * 100, 2)


def _with_drag(price: float, fund: FundProfile | None, progress: float, simulate: bool) -> float:
    if simulate and fund is not None and fund.is_distributing:
        return price * (1 - fund.dividend_yield * progress)
    return price


def interpolate(
    fund_a: FundProfile | None,
    series_a: Sequence[PricePoint],
    fund_b: FundProfile | None = None,
    series_b: Sequence[PricePoint] | None = None,
    simulate_dividend_drag: bool = False,
) -> list[ChartPoint]:
    """Return ``(len(series_a) - 1) * 5 + 1`` chart points ordered by time.

    Each weekly segment of ``series_a`` yields five evenly spaced sub-points.
    ``series_b`` is paired by index and holds its last observation once it
    runs out, so a shorter second series flattens toward the end. When
    ``simulate_dividend_drag`` is set, distributing funds lose
    ``yield * progress`` of their price, where progress runs across the whole
    chart. The final point is the literal last observation of each series.
    A series whose first close is zero is treated as absent.
    """
    if len(series_a) < 2:
        return []

    a = sorted(series_a, key=lambda p: p.date)
    b = sorted(series_b, key=lambda p: p.date) if series_b else None

    # A zero baseline has no defined return; drop that series.
    if a[0].close == 0:
        return []
    if b and b[0].close == 0:
        b = None

    baseline_a = a[0].close
    baseline_b = b[0].close if b else None
    total_steps = len(a) * STEPS_PER_SEGMENT

    points: list[ChartPoint] = []
    for i in range(len(a) - 1):
        start, end = a[i], a[i + 1]
        start_dt = _as_datetime(start)
        span = _as_datetime(end) - start_dt
        if b:
            start_b = b[i] if i < len(b) else b[-1]
            end_b = b[i + 1] if i + 1 < len(b) else b[-1]

        for j in range(STEPS_PER_SEGMENT):
            t = j / STEPS_PER_SEGMENT
            progress = (i * STEPS_PER_SEGMENT + j) / total_steps

            price_a = _with_drag(_lerp(start.close, end.close, t), fund_a, progress, simulate_dividend_drag)
            value_b = None
            if b:
                price_b = _with_drag(_lerp(start_b.close, end_b.close, t), fund_b, progress, simulate_dividend_drag)
                value_b = _pct(price_b, baseline_b)

            stamp = start_dt + span * t
            points.append(
                ChartPoint(
                    date=stamp.strftime(DISPLAY_DATE_FORMAT),
                    etf1_value=_pct(price_a, baseline_a),
                    etf2_value=value_b,
                    timestamp=stamp,
                )
            )

    last_a = a[-1]
    last_stamp = _as_datetime(last_a)
    points.append(
        ChartPoint(
            date=last_stamp.strftime(DISPLAY_DATE_FORMAT),
            etf1_value=_pct(last_a.close, baseline_a),
            etf2_value=_pct(b[-1].close, baseline_b) if b else None,
            timestamp=last_stamp,
        )
    )
    return points


def chart_frame(points: Sequence[ChartPoint], label_a: str = "A", label_b: str = "B") -> pd.DataFrame:
    """Long-format frame (one row per point and series) for plotting."""
    columns = ["timestamp", "date", "series", "return_pct"]
    rows = []
    for point in points:
        rows.append({"timestamp": point.timestamp, "date": point.date, "series": label_a, "return_pct": point.etf1_value})
        if point.etf2_value is not None:
            rows.append(
                {"timestamp": point.timestamp, "date": point.date, "series": label_b, "return_pct": point.etf2_value}
            )
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)
