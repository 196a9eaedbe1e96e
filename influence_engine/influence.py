"""Per-day influence scoring: direct same-day credit plus decayed reach."""

from __future__ import annotations

from datetime import date, datetime, time
from math import log2

from influence_engine import config
from influence_engine.logger import get_logger
from influence_engine.reach import duration_to_minutes, reach_to_days
from influence_engine.schema import ActivityEvent, DayInfluence, DirectContribution, ReachContribution

logger = get_logger(__name__)


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def calendar_day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _days_between(target: date, source: date) -> float:
    return (_as_datetime(target) - _as_datetime(source)).total_seconds() / 86400.0


def duration_multiplier(event: ActivityEvent) -> float:
    """Return the bonus multiplier for an event's duration."""

    if event.is_all_day:
        return config.ALL_DAY_BONUS
    if duration_to_minutes(event.duration) >= config.LONG_SESSION_MINUTES:
        return config.LONG_SESSION_BONUS
    return 1.0


def soft_cap(score: float) -> float:
    """Apply diminishing returns above 100, never exceeding the hard cap."""

    if score <= config.SOFT_CAP_THRESHOLD:
        return score
    capped = config.SOFT_CAP_THRESHOLD + log2(score / config.SOFT_CAP_THRESHOLD) * config.SOFT_CAP_SLOPE
    return min(capped, config.HARD_CAP)


def reach_effect(event: ActivityEvent, days_elapsed: float) -> float:
    """Effect of a past event ``days_elapsed`` days later, zero once its reach has closed."""

    reach_days = reach_to_days(event.reach_value, event.reach_unit)
    if days_elapsed <= 0 or days_elapsed > reach_days:
        return 0.0
    decay = config.REACH_DECAY_BASE ** (days_elapsed / (reach_days * config.REACH_DECAY_SCALE))
    return event.impact * config.IMPACT_SCALE * decay * config.REACH_SUPPRESSION


def compute_day_influence(target_date: date, events: list[ActivityEvent]) -> DayInfluence:
    """Compute direct, reach and total influence for ``target_date``.

    Same-day events feed the direct score; events on earlier days feed the reach
    score; events after the target day are ignored. The total is not clamped to
    100 here, it can reach the 120 soft-cap ceiling.
    """

    target_day = calendar_day(target_date)

    direct_score = 0.0
    direct_events: list[DirectContribution] = []
    reach_score = 0.0
    reach_contributions: list[ReachContribution] = []

    for event in events:
        event_day = calendar_day(event.date)

        if event_day == target_day:
            score = event.impact * config.IMPACT_SCALE * duration_multiplier(event)
            direct_score += score
            direct_events.append(
                DirectContribution(event_id=event.event_id, name=event.name, impact=event.impact, score=score)
            )
            continue

        if event_day > target_day:
            logger.debug("Skipping event %s on %s: after %s", event.event_id, event_day, target_day)
            continue

        days_elapsed = _days_between(target_date, event.date)
        effect = reach_effect(event, days_elapsed)
        if effect <= 0.0:
            logger.debug(
                "Skipping event %s on %s: reach closed after %.1f days", event.event_id, event_day, days_elapsed
            )
            continue

        reach_score += effect
        if effect > config.REACH_NOISE_FLOOR:
            reach_contributions.append(
                ReachContribution(
                    event_id=event.event_id,
                    name=event.name,
                    source_date=event_day,
                    days_elapsed=int(days_elapsed + 0.5),
                    effect=effect,
                    impact=event.impact,
                )
            )

    direct_score = soft_cap(direct_score)

    if direct_score > 0:
        total_score = max(direct_score, reach_score * config.REACH_FLOOR_MULTIPLIER)
    else:
        total_score = reach_score

    reach_contributions.sort(key=lambda contribution: contribution.effect, reverse=True)

    return DayInfluence(
        date=target_day,
        direct_score=direct_score,
        reach_score=reach_score,
        total_score=total_score,
        direct_events=direct_events,
        reach_contributions=reach_contributions,
    )
