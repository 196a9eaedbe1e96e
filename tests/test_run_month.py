from datetime import date

from influence_engine.schema import ActivityEvent
from scripts.run_month import build_report


def test_month_report_lists_events_with_ripple_score():
    events = [
        ActivityEvent("1", "Therapy", "therapy", date(2025, 3, 10), 8, reach_value=2, reach_unit="weeks"),
        ActivityEvent("2", "Run", "exercise", date(2025, 3, 11), 6, duration="00:45", reach_value=3),
    ]
    report = build_report(events, 2025, 3)
    assert report["month"] == "2025-03"
    assert len(report["days"]) == 31

    day = next(item for item in report["days"] if item["date"] == "2025-03-10")
    assert day["score"] == 80
    assert day["band"] == "good"
    assert [row["id"] for row in day["events"]] == ["1"]
    assert day["events"][0]["ripple_score"] > 0

    quiet_day = next(item for item in report["days"] if item["date"] == "2025-03-01")
    assert quiet_day["events"] == []
    assert quiet_day["score"] == 0
