"""Month heatmap grid built from per-day influence."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from math import floor

from influence_engine import config
from influence_engine.influence import calendar_day, compute_day_influence
from influence_engine.logger import get_logger
from influence_engine.schema import ActivityEvent, MonthCell

logger = get_logger(__name__)


def normalize_influence_score(raw_score: float) -> int:
    """Clamp a raw total to the public 0-100 range, rounding half up."""

    return int(min(config.DISPLAY_MAX_SCORE, floor(max(0.0, raw_score) + 0.5)))


def leading_padding(year: int, month: int) -> int:
    """Number of previous-month cells before the 1st, with Sunday as column 0."""

    return (date(year, month, 1).weekday() + 1) % 7


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move ``delta`` months forward (or backward when negative)."""

    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def compute_month_grid(
    year: int,
    month: int,
    events: list[ActivityEvent],
    today: date | None = None,
) -> list[MonthCell]:
    """Build the 42-cell grid for ``year``/``month``.

    Only in-month cells are scored, each against the full event collection so
    that reach from adjacent months is included.
    """

    today = today or date.today()
    first = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    leading = leading_padding(year, month)
    trailing = config.GRID_CELLS - (leading + days_in_month)

    cells: list[MonthCell] = []

    for offset in range(leading, 0, -1):
        cells.append(MonthCell(date=first - timedelta(days=offset), is_current_month=False))

    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        influence = compute_day_influence(current, events)
        cells.append(
            MonthCell(
                date=current,
                is_current_month=True,
                is_today=current == today,
                events=[event for event in events if calendar_day(event.date) == current],
                raw_score=influence.total_score,
                influence_score=normalize_influence_score(influence.total_score),
                influence=influence,
            )
        )

    last = date(year, month, days_in_month)
    for offset in range(1, trailing + 1):
        cells.append(MonthCell(date=last + timedelta(days=offset), is_current_month=False))

    logger.debug(
        "Computed month grid %04d-%02d: %d leading, %d days, %d trailing, %d events",
        year,
        month,
        leading,
        days_in_month,
        trailing,
        len(events),
    )
    return cells
