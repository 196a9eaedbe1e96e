"""Month-level summary metrics."""

from __future__ import annotations

from collections import Counter
from math import log

import numpy as np

from influence_engine import config
from influence_engine.explain import heatmap_band
from influence_engine.reach import duration_to_minutes, reach_to_days
from influence_engine.schema import CATEGORIES, OTHER, ActivityEvent, MonthCell, normalize_category


def summarize_month(cells: list[MonthCell]) -> dict:
    """Compute average/peak scores and day counts over the in-month cells."""

    days = [cell for cell in cells if cell.is_current_month]
    if not days:
        return {
            "average_score": 0.0,
            "peak_score": 0,
            "peak_date": None,
            "active_days": 0,
            "reach_only_days": 0,
            "empty_days": 0,
            "band_counts": {},
        }

    scores = np.asarray([cell.influence_score or 0 for cell in days], dtype=float)
    peak_index = int(np.argmax(scores))

    active = sum(1 for cell in days if cell.influence and cell.influence.direct_score > 0)
    empty = int(np.count_nonzero(scores == 0))

    bands = Counter(heatmap_band(cell.influence_score) for cell in days)

    return {
        "average_score": float(np.mean(scores)),
        "peak_score": int(scores[peak_index]),
        "peak_date": days[peak_index].date.isoformat(),
        "active_days": active,
        "reach_only_days": len(days) - active - empty,
        "empty_days": empty,
        "band_counts": dict(bands),
    }


def category_counts(events: list[ActivityEvent]) -> dict:
    """Count events per normalized category."""

    counts = Counter(normalize_category(event.category) for event in events)
    return {category: counts.get(category, 0) for category in (*CATEGORIES, OTHER)}


def ripple_score(event: ActivityEvent) -> float:
    """Per-event ripple figure: impact * ln(1 + minutes) * reach_days."""

    minutes = config.ALL_DAY_MINUTES if event.is_all_day else duration_to_minutes(event.duration)
    return event.impact * log(1 + minutes) * reach_to_days(event.reach_value, event.reach_unit)


def _reach_label(event: ActivityEvent) -> str:
    value = 1 if event.reach_value is None else event.reach_value
    return f"{value:g} {event.reach_unit or 'days'}"


def event_details(events: list[ActivityEvent]) -> list[dict]:
    """Per-event detail rows for a day listing, ripple score rounded to one decimal."""

    return [
        {
            "id": event.event_id,
            "name": event.name,
            "category": event.category,
            "duration": "All Day" if event.is_all_day else event.duration,
            "impact": f"{event.impact}/10",
            "reach": _reach_label(event),
            "ripple_score": round(ripple_score(event), 1),
        }
        for event in events
    ]
