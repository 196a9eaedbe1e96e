"""Demo script for influence-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from influence_engine.adapters.csv_adapter import parse
from influence_engine.calendar_grid import compute_month_grid
from influence_engine.explain import format_breakdown
from influence_engine.metrics import summarize_month


def main() -> None:
    events = parse("examples/sample_events.csv")
    cells = compute_month_grid(2025, 3, events)
    print("Summary:", summarize_month(cells))
    for cell in cells:
        if cell.is_current_month and cell.influence_score:
            print(cell.date.isoformat())
            print(format_breakdown(cell))
            print()


if __name__ == "__main__":
    main()
