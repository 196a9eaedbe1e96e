"""Compute the influence heatmap for one month from a CSV/JSON event file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from influence_engine.adapters import csv_adapter, json_adapter
from influence_engine.calendar_grid import compute_month_grid
from influence_engine.explain import explain_day, heatmap_band
from influence_engine.logger import setup_logging
from influence_engine.metrics import category_counts, event_details, summarize_month


def _load_events(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _parse_month(value: str) -> tuple[int, int]:
    try:
        year, month = (int(part) for part in value.split("-", maxsplit=1))
        date(year, month, 1)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid month '{value}', expected YYYY-MM") from exc
    return year, month


def build_report(events: list, year: int, month: int) -> dict:
    cells = compute_month_grid(year, month, events)
    return {
        "month": f"{year:04d}-{month:02d}",
        "n_events": len(events),
        "summary": summarize_month(cells),
        "categories": category_counts(events),
        "days": [
            {
                "score": cell.influence_score,
                "band": heatmap_band(cell.influence_score),
                **explain_day(cell.influence),
                "events": event_details(cell.events),
            }
            for cell in cells
            if cell.is_current_month
        ],
    }


def main() -> None:
    today = date.today()
    parser = argparse.ArgumentParser(description="Compute a monthly influence heatmap")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON events file")
    parser.add_argument("--month", type=_parse_month, default=(today.year, today.month), help="Month as YYYY-MM")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    setup_logging(level=getattr(logging, args.log_level.upper(), logging.INFO), to_file=False)

    try:
        events = _load_events(Path(args.data))
    except ValueError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        sys.exit(1)

    year, month = args.month
    report = build_report(events, year, month)

    print(json.dumps(report, indent=2))

    outputs_dir = Path("outputs")
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "month_report.json"
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved month report to {out_path}")


if __name__ == "__main__":
    main()
