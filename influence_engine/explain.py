"""Breakdown text and colour lookups for the heatmap."""

from __future__ import annotations

from influence_engine import config
from influence_engine.schema import EXERCISE, OTHER, QUALITY_TIME, THERAPY, DayInfluence, MonthCell, normalize_category

CATEGORY_COLORS = {
    THERAPY: "bg-purple-100 text-purple-800 border-purple-200",
    EXERCISE: "bg-green-100 text-green-800 border-green-200",
    QUALITY_TIME: "bg-blue-100 text-blue-800 border-blue-200",
    OTHER: "bg-gray-100 text-gray-800 border-gray-200",
}

CATEGORY_DOT_COLORS = {
    THERAPY: "#a855f7",
    EXERCISE: "#22c55e",
    QUALITY_TIME: "#3b82f6",
    OTHER: "#6b7280",
}


def category_color(category: str | None, table: dict[str, str] = CATEGORY_COLORS) -> str:
    return table[normalize_category(category)]


def heatmap_band(score: int | None) -> str:
    """Name the heatmap band for a 0-100 display score."""

    if not score:
        return config.HEATMAP_EMPTY_BAND
    for upper, band in config.HEATMAP_BANDS:
        if score < upper:
            return band
    return config.HEATMAP_TOP_BAND


def days_ago_text(days: int) -> str:
    return "1 day ago" if days == 1 else f"{days} days ago"


def explain_day(influence: DayInfluence) -> dict:
    """Return a JSON-friendly breakdown of one day's influence."""

    return {
        "date": influence.date.isoformat(),
        "total": round(influence.total_score, 2),
        "direct": round(influence.direct_score, 2),
        "reach": round(influence.reach_score, 2),
        "direct_events": [
            {"id": item.event_id, "name": item.name, "impact": item.impact, "score": f"{item.score:.1f}"}
            for item in influence.direct_events
        ],
        "reach_contributions": [
            {
                "id": item.event_id,
                "name": item.name,
                "date": item.source_date.isoformat(),
                "days_ago": item.days_elapsed,
                "effect": f"{item.effect:.1f}",
                "impact": item.impact,
            }
            for item in influence.reach_contributions
        ],
    }


def format_breakdown(cell: MonthCell, top_n: int = config.TOOLTIP_TOP_CONTRIBUTIONS) -> str:
    """Render the hover text for a grid cell."""

    header = f"{config.SCORE_LABEL}: {cell.influence_score or 0}%"
    breakdown = cell.influence
    if breakdown is None:
        return header

    lines = [header, ""]

    if breakdown.direct_events:
        lines.append("Direct Events:")
        for item in breakdown.direct_events:
            lines.append(f"  • {item.name} ({item.impact}/10) = +{item.score:.1f}%")
        lines.append(f"  Subtotal: {breakdown.direct_score:.1f}%")
        lines.append("")

    contributions = breakdown.reach_contributions
    if contributions:
        lines.append("Reach Effects:")
        for item in contributions[:top_n]:
            lines.append(f"  • {item.name} ({days_ago_text(item.days_elapsed)}) = +{item.effect:.1f}%")
        if len(contributions) > top_n:
            lines.append(f"  • ...and {len(contributions) - top_n} more")
        lines.append(f"  Subtotal: {breakdown.reach_score:.1f}%")

    if not breakdown.direct_events and not contributions:
        lines.append("No activity influence")
        lines.append(config.EMPTY_DAY_HINT)

    return "\n".join(lines).rstrip("\n")
