"""Core data schema for activity events and derived influence values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from influence_engine.config import DEFAULT_DURATION

THERAPY = "therapy"
EXERCISE = "exercise"
QUALITY_TIME = "quality time"
OTHER = "other"

CATEGORIES = (THERAPY, EXERCISE, QUALITY_TIME)


def normalize_category(category: Optional[str]) -> str:
    """Map a raw category label onto a known category, falling back to ``other``."""

    if not category:
        return OTHER
    normalized = " ".join(str(category).strip().lower().replace("-", " ").replace("_", " ").split())
    return normalized if normalized in CATEGORIES else OTHER


@dataclass(frozen=True)
class ActivityEvent:
    """A logged self-care activity. Read-only to the engine."""

    event_id: str
    name: str
    category: str
    date: date
    impact: int
    duration: Optional[str] = DEFAULT_DURATION
    is_all_day: bool = False
    reach_value: Optional[float] = 1
    reach_unit: Optional[str] = "days"


@dataclass
class DirectContribution:
    event_id: str
    name: str
    impact: int
    score: float


@dataclass
class ReachContribution:
    event_id: str
    name: str
    source_date: date
    days_elapsed: int
    effect: float
    impact: int


@dataclass
class DayInfluence:
    """Decomposed influence for one calendar day."""

    date: date
    direct_score: float = 0.0
    reach_score: float = 0.0
    total_score: float = 0.0
    direct_events: list[DirectContribution] = field(default_factory=list)
    reach_contributions: list[ReachContribution] = field(default_factory=list)


@dataclass
class MonthCell:
    """One of the 42 cells of a month grid. Padding cells carry no influence."""

    date: date
    is_current_month: bool
    is_today: bool = False
    events: list[ActivityEvent] = field(default_factory=list)
    raw_score: float = 0.0
    influence_score: Optional[int] = None
    influence: Optional[DayInfluence] = None
