"""JSON adapter for activity events."""

from __future__ import annotations

import json

from influence_engine.adapters.fields import build_event
from influence_engine.logger import get_logger
from influence_engine.schema import ActivityEvent

logger = get_logger(__name__)


def parse(file_path: str) -> list[ActivityEvent]:
    """Parse a JSON list of event objects."""

    with open(file_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError("Failed to parse JSON file") from exc

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    events = []
    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")
        events.append(build_event(item, f"Item {index}"))

    logger.info("Loaded %d events from %s", len(events), file_path)
    return events
