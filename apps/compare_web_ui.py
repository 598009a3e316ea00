"""Fund comparison local web UI (Streamlit).

Features:

- Performance table for two funds with a Total Return / Price Only toggle
- Estimated-data badge and source hosts for sourced figures
- Weekly price history densified into a cumulative-return line chart

Run with ``streamlit run apps/compare_web_ui.py``. Without ``OPENAI_API_KEY``
every fund shows estimated returns.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
import sys

import altair as alt
import pandas as pd
import streamlit as st

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from config.settings import settings  # noqa: E402
from extract.fund_universe_reader import default_fund_universe  # noqa: E402
from extract.performance_source import OpenAIPerformanceSource, UnavailableSource  # noqa: E402
from extract.price_history_reader import price_history_for  # noqa: E402
from models.schemas import FundProfile, PerformanceSnapshot  # noqa: E402
from services.comparison_service import (  # noqa: E402
    any_estimated,
    build_performance_table,
    fetch_pair,
    source_hostname,
)
from services.performance_service import PerformanceFetcher  # noqa: E402
from services.return_cache import ReturnCache  # noqa: E402
from transform.calc.series_interpolator import chart_frame, interpolate  # noqa: E402

CURRENCIES = ["EUR", "PLN", "USD"]


@st.cache_resource(show_spinner=False)
def _return_cache() -> ReturnCache:
    return ReturnCache()


def _source() -> OpenAIPerformanceSource | UnavailableSource:
    if not settings.upstream.api_key:
        return UnavailableSource()
    return OpenAIPerformanceSource()


async def _fetch_snapshots(
    left: FundProfile, right: FundProfile, currency: str
) -> tuple[PerformanceSnapshot, PerformanceSnapshot]:
    source = _source()
    try:
        return await fetch_pair(PerformanceFetcher(source, _return_cache()), left, right, currency)
    finally:
        await source.aclose()


def _fund_label(fund: FundProfile) -> str:
    return f"{fund.ticker} - {fund.name}"


def _render_table(left: FundProfile, right: FundProfile, currency: str, include_dividends: bool) -> None:
    with st.spinner(f"Fetching performance in {currency}..."):
        left_snapshot, right_snapshot = asyncio.run(_fetch_snapshots(left, right, currency))

    title = "#### Performance Comparison"
    if any_estimated(left_snapshot, right_snapshot):
        title += " :orange[(Est. Data)]"
    st.markdown(title)

    table = build_performance_table(left, left_snapshot, right, right_snapshot, include_dividends)
    st.dataframe(
        table.style.format({column: "{:+.2f}%" for column in table.columns[1:4]}, na_rep="n/a"),
        use_container_width=True,
        hide_index=True,
    )

    notes = [
        "Showing Total Return (Dividends Reinvested)." if include_dividends else "Showing Price Return (Dividends Excluded)."
    ]
    for label, snapshot in (("A", left_snapshot), ("B", right_snapshot)):
        host = source_hostname(snapshot.source)
        if host:
            notes.append(f"Source {label}: {host}")
    st.caption(" | ".join(notes))


def _render_chart(left: FundProfile, right: FundProfile, include_dividends: bool) -> None:
    st.markdown("#### Price History")
    try:
        series_a = price_history_for(left.ticker)
    except FileNotFoundError:
        st.info(f"No price history available for {left.ticker}.")
        return
    try:
        series_b = price_history_for(right.ticker)
    except FileNotFoundError:
        series_b = None
        st.caption(f"No price history available for {right.ticker}; showing {left.ticker} only.")

    points = interpolate(left, series_a, right, series_b, simulate_dividend_drag=not include_dividends)
    frame = chart_frame(points, label_a=left.ticker, label_b=right.ticker)
    if frame.empty:
        st.info("Not enough observations to draw a chart.")
        return

    chart = alt.Chart(frame).mark_line().encode(
        x=alt.X("timestamp:T", title="Date"),
        y=alt.Y("return_pct:Q", title="Return %"),
        color=alt.Color("series:N", title="Fund"),
        tooltip=["date:N", "series:N", alt.Tooltip("return_pct:Q", format="+.2f")],
    )
    st.altair_chart(chart, use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="Fund Comparison", layout="wide")
    st.title("Fund Comparison")

    universe = default_fund_universe()
    funds = sorted(universe.values(), key=lambda fund: (fund.category, fund.ticker))

    with st.sidebar:
        left = st.selectbox("Fund A", options=funds, format_func=_fund_label, index=0)
        right = st.selectbox("Fund B", options=funds, format_func=_fund_label, index=min(1, len(funds) - 1))
        currency = st.radio("Currency", options=CURRENCIES, horizontal=True)
        metric = st.radio("Metric", options=["Total Return", "Price Only"], horizontal=True)

    include_dividends = metric == "Total Return"
    _render_table(left, right, currency, include_dividends)
    _render_chart(left, right, include_dividends)

    with st.expander("Dividend history"):
        rows = [
            {"ticker": fund.ticker, "year": payout.year, "amount": payout.amount, "yield_pct": payout.yield_pct}
            for fund in (left, right)
            for payout in fund.dividend_history
        ]
        if rows:
            st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
        else:
            st.caption("Neither fund distributes dividends.")


if __name__ == "__main__":
    main()
