"""restaurant_seating package."""
from .errors import InvalidArgument, SeatingError
from .models import CustomerGroup, Table
from .manager import SeatingManager
from .csv_loader import (
    SeatingEvent,
    load_events,
    load_tables,
    load_all,
    replay,
)
from .report import compute_table_stats, occupancy_report, summarise

__all__ = [
    "InvalidArgument",
    "SeatingError",
    "CustomerGroup",
    "Table",
    "SeatingManager",
    "SeatingEvent",
    "load_events",
    "load_tables",
    "load_all",
    "replay",
    "compute_table_stats",
    "occupancy_report",
    "summarise",
]
