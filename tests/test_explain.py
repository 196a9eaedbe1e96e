from datetime import date, timedelta

from influence_engine.calendar_grid import compute_month_grid
from influence_engine.explain import (
    CATEGORY_COLORS,
    category_color,
    days_ago_text,
    explain_day,
    format_breakdown,
    heatmap_band,
)
from influence_engine.influence import compute_day_influence
from influence_engine.schema import ActivityEvent

TARGET = date(2025, 3, 10)


def _cell(events, day=TARGET):
    cells = compute_month_grid(day.year, day.month, events)
    return next(cell for cell in cells if cell.date == day)


def test_heatmap_bands():
    assert heatmap_band(0) == "none"
    assert heatmap_band(None) == "none"
    assert heatmap_band(5) == "very-low"
    assert heatmap_band(20) == "low"
    assert heatmap_band(59) == "below-average"
    assert heatmap_band(79) == "average"
    assert heatmap_band(94) == "good"
    assert heatmap_band(95) == "excellent"
    assert heatmap_band(100) == "excellent"


def test_days_ago_text():
    assert days_ago_text(1) == "1 day ago"
    assert days_ago_text(4) == "4 days ago"


def test_category_color_lookup_falls_back():
    assert category_color("therapy") == CATEGORY_COLORS["therapy"]
    assert category_color("Quality-Time") == CATEGORY_COLORS["quality time"]
    assert category_color("gardening") == CATEGORY_COLORS["other"]


def test_direct_only_breakdown():
    event = ActivityEvent("r1", "Run", "exercise", TARGET, 6)
    assert format_breakdown(_cell([event])) == (
        "Selframe Score: 60%\n"
        "\n"
        "Direct Events:\n"
        "  • Run (6/10) = +60.0%\n"
        "  Subtotal: 60.0%"
    )


def test_reach_breakdown_shows_top_three():
    events = [
        ActivityEvent(str(i), f"Session {i}", "therapy", TARGET - timedelta(days=i), 10, reach_unit="months")
        for i in range(1, 5)
    ]
    text = format_breakdown(_cell(events))
    lines = text.splitlines()
    assert "Reach Effects:" in lines
    assert lines[3].startswith("  • Session 1 (1 day ago) = +")
    assert lines[4].startswith("  • Session 2 (2 days ago) = +")
    assert "  • ...and 1 more" in lines
    assert lines[-1].startswith("  Subtotal: ")
    assert "Session 4" not in text


def test_empty_day_breakdown():
    text = format_breakdown(_cell([]))
    assert text.startswith("Selframe Score: 0%")
    assert "No activity influence" in text
    assert text.endswith("Consider adding activities to boost mental health")


def test_padding_cell_breakdown_is_header_only():
    cells = compute_month_grid(2025, 3, [])
    assert format_breakdown(cells[0]) == "Selframe Score: 0%"


def test_explain_day_payload():
    events = [
        ActivityEvent("p", "Yoga", "exercise", TARGET - timedelta(days=1), 8, reach_unit="weeks"),
        ActivityEvent("d", "Therapy", "therapy", TARGET, 7, duration="02:00"),
    ]
    payload = explain_day(compute_day_influence(TARGET, events))
    assert payload["date"] == "2025-03-10"
    assert payload["direct_events"] == [{"id": "d", "name": "Therapy", "impact": 7, "score": "73.5"}]
    assert payload["reach_contributions"][0]["days_ago"] == 1
    assert payload["reach_contributions"][0]["date"] == "2025-03-09"
    assert payload["total"] == 73.5
