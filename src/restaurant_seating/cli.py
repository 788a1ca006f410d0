"""Command line interface for restaurant_seating."""
from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path
from typing import Sequence

from .csv_loader import load_all, replay
from .errors import InvalidArgument
from .logging_config import setup_logging
from .manager import SeatingManager
from .report import occupancy_report

logger = logging.getLogger(__name__)

REPORT_FIELDS = [
    "table", "size", "occupied_seats", "empty_seats", "group_count", "utilisation", "groups",
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replay restaurant arrivals and departures")
    parser.add_argument("--tables", required=True, help="Path to tables.csv")
    parser.add_argument("--events", required=True, help="Path to events.csv")
    parser.add_argument("--out-report", type=Path,
                        help="Write per-table occupancy report CSV.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING).")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point used by ``restaurant-seating`` and ``python -m restaurant_seating.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        tables, events = load_all(args.tables, args.events)
        logger.info("loaded %d tables and %d events", len(tables), len(events))
        manager = SeatingManager(tables)
        replay(manager, events)
    except InvalidArgument as exc:
        parser.error(str(exc))

    # Where every group ended up, in order of first appearance
    seen = []
    for event in events:
        if all(event.group is not g for g in seen):
            seen.append(event.group)
    for group in seen:
        table = manager.locate(group)
        print(f"{group.label},{table.label if table is not None else '-'}")

    print("[WAITING] " + "|".join(g.label for g in manager.waiting_list))

    report = occupancy_report(manager)
    for row in report:
        print(f"[REPORT] {row['table']} occupied={row['occupied_seats']}/{row['size']} "
              f"groups={row['group_count']} utilisation={row['utilisation']:.2f}")

    if args.out_report:
        args.out_report.parent.mkdir(parents=True, exist_ok=True)
        with args.out_report.open("w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=REPORT_FIELDS)
            w.writeheader()
            for row in report:
                out = {k: row[k] for k in REPORT_FIELDS}
                out["utilisation"] = f"{row['utilisation']:.4f}"
                w.writerow(out)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
