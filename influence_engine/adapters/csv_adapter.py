"""CSV adapter for activity events."""

from __future__ import annotations

import csv

from influence_engine.adapters.fields import build_event
from influence_engine.logger import get_logger
from influence_engine.schema import ActivityEvent

logger = get_logger(__name__)


def parse(file_path: str) -> list[ActivityEvent]:
    """Parse CSV file into a list of activity events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            logger.warning("No header found in %s", file_path)
            return []

        events: list[ActivityEvent] = []
        for row_number, row in enumerate(reader, start=2):
            events.append(build_event(row, f"Row {row_number}"))

    logger.info("Loaded %d events from %s", len(events), file_path)
    return events
