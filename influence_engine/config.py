"""Centralized configuration for the influence engine."""

import logging
import os

# Direct score
IMPACT_SCALE = 10
ALL_DAY_BONUS = 1.10
LONG_SESSION_BONUS = 1.05
LONG_SESSION_MINUTES = 120
DEFAULT_DURATION = "01:00"
DEFAULT_DURATION_MINUTES = 60
ALL_DAY_MINUTES = 8 * 60

# Soft cap for stacked same-day activities: 100 + log2(score / 100) * 15, max 120
SOFT_CAP_THRESHOLD = 100.0
SOFT_CAP_SLOPE = 15.0
HARD_CAP = 120.0

# Reach decay: 0.2 ** (days / (reach_days * 0.2)) * 0.3
REACH_DECAY_BASE = 0.2
REACH_DECAY_SCALE = 0.2
REACH_SUPPRESSION = 0.3
REACH_FLOOR_MULTIPLIER = 1.2
REACH_NOISE_FLOOR = 0.5

REACH_UNIT_DAYS = {
    "days": 1,
    "weeks": 7,
    "months": 30,
    "years": 365,
}

# Calendar grid
GRID_CELLS = 42
DISPLAY_MAX_SCORE = 100

# Presentation
TOOLTIP_TOP_CONTRIBUTIONS = 3
HEATMAP_BANDS = (
    (20, "very-low"),
    (40, "low"),
    (60, "below-average"),
    (80, "average"),
    (95, "good"),
)
HEATMAP_TOP_BAND = "excellent"
HEATMAP_EMPTY_BAND = "none"
SCORE_LABEL = "Selframe Score"
EMPTY_DAY_HINT = "Consider adding activities to boost mental health"

# Logging
LOG_DIR = os.environ.get("INFLUENCE_LOG_DIR", "logs")
LOG_LEVEL = getattr(logging, os.environ.get("INFLUENCE_LOG_LEVEL", "INFO").upper(), logging.INFO)
