"""Duration and reach normalization."""

from __future__ import annotations

from math import isfinite

from influence_engine.config import DEFAULT_DURATION_MINUTES, REACH_UNIT_DAYS


def _positive_or_one(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 1.0
    if not isfinite(number) or number <= 0:
        return 1.0
    return number


def reach_to_days(value, unit: str | None) -> float:
    """Convert a (value, unit) reach into an approximate day count.

    Weeks are 7 days, months 30 and years 365. Unknown units count as days and
    missing or non-positive values count as 1, so the result is always > 0.
    """

    return _positive_or_one(value) * REACH_UNIT_DAYS.get(unit, 1)


def duration_to_minutes(duration: str | None) -> int:
    """Parse an ``HH:MM`` duration, falling back to one hour.

    Fields after the minutes (``HH:MM:SS``) are ignored; a value without a
    colon is malformed.
    """

    if not duration:
        return DEFAULT_DURATION_MINUTES
    parts = str(duration).split(":")
    if len(parts) < 2:
        return DEFAULT_DURATION_MINUTES
    try:
        total = int(parts[0]) * 60 + int(parts[1])
    except ValueError:
        return DEFAULT_DURATION_MINUTES
    return total if total >= 0 else DEFAULT_DURATION_MINUTES
