"""Shared field parsing for event-source adapters."""

from __future__ import annotations

from datetime import date

from influence_engine.config import DEFAULT_DURATION
from influence_engine.schema import ActivityEvent

REQUIRED_FIELDS = ("id", "name", "category", "date")
_TRUE_VALUES = {"true", "1", "yes", "y"}
_FALSE_VALUES = {"false", "0", "no", "n", ""}


def _parse_bool(value, label: str) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{label}: invalid isAllDay '{value}'")


def _parse_impact(value, label: str) -> int:
    try:
        impact = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label}: invalid impact") from exc
    if not 1 <= impact <= 10:
        raise ValueError(f"{label}: impact {impact} outside 1-10")
    return impact


def _parse_reach_value(value):
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def build_event(record: dict, label: str) -> ActivityEvent:
    """Turn one raw record (camelCase keys) into an ``ActivityEvent``.

    ``label`` prefixes error messages, e.g. ``"Row 3"`` or ``"Item 1"``.
    """

    missing = [field for field in REQUIRED_FIELDS if record.get(field) in (None, "")]
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")

    try:
        event_date = date.fromisoformat(str(record["date"]).strip()[:10])
    except ValueError as exc:
        raise ValueError(f"{label}: malformed date") from exc

    duration = record.get("duration")
    reach_unit = record.get("reachUnit")

    return ActivityEvent(
        event_id=str(record["id"]).strip(),
        name=str(record["name"]).strip(),
        category=str(record["category"]).strip(),
        date=event_date,
        impact=_parse_impact(record.get("impact"), label),
        duration=str(duration).strip() if duration else DEFAULT_DURATION,
        is_all_day=_parse_bool(record.get("isAllDay"), label),
        reach_value=_parse_reach_value(record.get("reachValue")),
        reach_unit=str(reach_unit).strip().lower() if reach_unit else "days",
    )
