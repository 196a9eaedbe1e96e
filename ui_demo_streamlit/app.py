"""Streamlit demo UI for influence-engine."""

from __future__ import annotations

import calendar
import html
import tempfile
from datetime import date
from pathlib import Path
from typing import Any

from influence_engine.adapters import csv_adapter, json_adapter
from influence_engine.calendar_grid import compute_month_grid, shift_month
from influence_engine.explain import CATEGORY_DOT_COLORS, category_color, format_breakdown, heatmap_band
from influence_engine.metrics import category_counts, event_details, summarize_month


WEEK_DAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

BAND_BACKGROUNDS = {
    "none": "#f9fafb",
    "very-low": "#fef2f2",
    "low": "#fee2e2",
    "below-average": "#ffedd5",
    "average": "#fef9c3",
    "good": "#dcfce7",
    "excellent": "#bbf7d0",
}


def _parse_events_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _parse_events_from_path(temp_path)


def _cell_html(cell) -> str:
    if not cell.is_current_month:
        return f"<div style='color:#d1d5db;padding:6px;min-height:64px'>{cell.date.day}</div>"

    background = BAND_BACKGROUNDS[heatmap_band(cell.influence_score)]
    border = "2px solid #2563eb" if cell.is_today else "1px solid #e5e7eb"
    dots = "".join(
        f"<span style='color:{category_color(event.category, CATEGORY_DOT_COLORS)}'>●</span>"
        for event in cell.events
    )
    title = html.escape(format_breakdown(cell), quote=True)
    return (
        f"<div title='{title}' style='background:{background};border:{border};padding:6px;min-height:64px'>"
        f"<b>{cell.date.day}</b> <small>{cell.influence_score}%</small><br>{dots}</div>"
    )


def run_engine(events: list, year: int, month: int) -> dict[str, Any]:
    """Run the month computation and return a UI-friendly payload."""

    cells = compute_month_grid(year, month, events)
    return {
        "title": f"{calendar.month_name[month]} {year}",
        "cells": cells,
        "summary": summarize_month(cells),
        "categories": category_counts(events),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Influence Heatmap Demo", layout="wide")
    st.title("Influence Engine: Streamlit Demo")

    today = date.today()
    if "visible_month" not in st.session_state:
        st.session_state.visible_month = (today.year, today.month)

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload event log", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        prev_col, today_col, next_col = st.columns(3)
        if prev_col.button("◀"):
            st.session_state.visible_month = shift_month(*st.session_state.visible_month, -1)
        if today_col.button("Today"):
            st.session_state.visible_month = (today.year, today.month)
        if next_col.button("▶"):
            st.session_state.visible_month = shift_month(*st.session_state.visible_month, 1)

    try:
        if use_demo:
            events = csv_adapter.parse("examples/sample_events.csv")
            data_source = "demo dataset (examples/sample_events.csv)"
        elif uploaded is not None:
            events = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.info("Upload a CSV/JSON file or enable 'Load demo dataset'.")
            return
    except ValueError as exc:
        st.error(f"Input error: {exc}")
        return

    year, month = st.session_state.visible_month
    result = run_engine(events, year, month)

    st.success(f"Loaded {len(events)} events from {data_source}.")
    st.subheader(result["title"])

    summary = result["summary"]
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Average score", f"{summary['average_score']:.1f}%")
    c2.metric("Peak score", f"{summary['peak_score']}%", help=f"on {summary['peak_date']}")
    c3.metric("Active days", summary["active_days"])
    c4.metric("Reach-only days", summary["reach_only_days"])

    header = st.columns(7)
    for column, name in zip(header, WEEK_DAYS):
        column.markdown(f"**{name}**")

    cells = result["cells"]
    for week in range(6):
        columns = st.columns(7)
        for column, cell in zip(columns, cells[week * 7 : week * 7 + 7]):
            column.markdown(_cell_html(cell), unsafe_allow_html=True)

    in_month = [cell for cell in cells if cell.is_current_month]
    selected = st.selectbox("Day breakdown", options=in_month, format_func=lambda cell: cell.date.isoformat())
    if selected is not None:
        st.text(format_breakdown(selected))
        if selected.events:
            st.table(event_details(selected.events))

    st.subheader("Events by category")
    st.table([result["categories"]])


if __name__ == "__main__":
    main()
