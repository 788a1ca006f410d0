"""Occupancy statistics for a seating manager."""
from __future__ import annotations

from typing import Dict, Iterable, List

from .manager import SeatingManager
from .models import CustomerGroup, Table


def compute_table_stats(table: Table, groups: Iterable[CustomerGroup]) -> Dict[str, int | float]:
    """Seat counts and utilisation for one table and the groups sitting at it."""
    groups = list(groups)
    occupied = table.occupied_seats
    return {
        "size": table.size,
        "empty_seats": table.get_empty_seats(),
        "occupied_seats": occupied,
        "group_count": len(groups),
        "utilisation": occupied / table.size,
    }


def occupancy_report(manager: SeatingManager) -> List[Dict[str, int | float | str]]:
    """One row per table, in seating priority order."""
    rows = []
    for index, table in enumerate(manager.tables, start=1):
        groups = manager.seated_groups(table)
        row: Dict[str, int | float | str] = dict(compute_table_stats(table, groups))
        row["table"] = table.name or str(index)
        row["groups"] = "|".join(g.label for g in groups)
        rows.append(row)
    return rows


def summarise(manager: SeatingManager) -> Dict[str, int]:
    waiting = manager.waiting_list
    return {
        "tables": len(manager.tables),
        "seats": sum(t.size for t in manager.tables),
        "occupied_seats": sum(t.occupied_seats for t in manager.tables),
        "seated_groups": len(manager.seated_groups()),
        "waiting_groups": len(waiting),
        "waiting_people": sum(g.size for g in waiting),
    }
