"""CSV loading utilities."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Dict, Iterable, List, Optional
import math

import pandas as pd

from .errors import InvalidArgument
from .manager import SeatingManager
from .models import CustomerGroup, Table

ARRIVES = "arrives"
LEAVES = "leaves"


@dataclass(frozen=True)
class SeatingEvent:
    """One line of an event script: a group arriving or leaving."""

    action: str
    group: CustomerGroup


def _text(value: object) -> str:
    """Stringify a cell. ``None`` and ``NaN`` become ``""``."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    text = str(value).strip()
    return "" if text.lower() == "nan" else text


def _size(value: object) -> Optional[int]:
    """Parse a size cell. Blank cells give ``None``.

    ``pandas`` reads a size column with gaps as floats, so ``2.0`` is fine.
    """
    text = _text(value)
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        raise InvalidArgument(f"size is not a number: {text!r}") from None
    if not number.is_integer():
        raise InvalidArgument(f"size is not a whole number: {text!r}")
    return int(number)


def _read_csv(path: Path | str | IO[Any], label: str) -> pd.DataFrame:
    """Read a CSV file. Unreadable or ragged files raise InvalidArgument."""
    try:
        df = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise InvalidArgument(f"{label} could not be read: {exc}") from exc
    # rows wider than the header make pandas move the extra fields into the index
    if len(df.index) and not isinstance(df.index, pd.RangeIndex):
        raise InvalidArgument(f"{label} has rows with more fields than the header")
    return df


def _require_columns(df: pd.DataFrame, required: Iterable[str], label: str) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise InvalidArgument(f"{label} is missing columns: {', '.join(missing)}")


def load_tables(path: Path | str | IO[Any]) -> List[Table]:
    """Load the table layout. Row order is seating priority order."""
    df = _read_csv(path, "tables file")
    _require_columns(df, ["size"], "tables file")
    tables: List[Table] = []
    for _, row in df.iterrows():
        size = _size(row["size"])
        if size is None:
            raise InvalidArgument("every table needs a size")
        tables.append(Table(size=size, name=_text(row.get("name", ""))))
    return tables


def load_events(path: Path | str | IO[Any]) -> List[SeatingEvent]:
    """Load an arrival/departure script.

    Every distinct ``group`` label becomes one :class:`CustomerGroup`, so a
    group that leaves and comes back later is still the same party. The size
    only has to be given on the first row for a label.
    """
    df = _read_csv(path, "events file")
    _require_columns(df, ["group", "action"], "events file")
    groups: Dict[str, CustomerGroup] = {}
    events: List[SeatingEvent] = []
    # header is line 1
    for line, (_, row) in enumerate(df.iterrows(), start=2):
        label = _text(row["group"])
        action = _text(row["action"]).lower()
        size = _size(row.get("size"))
        if not label:
            raise InvalidArgument(f"line {line}: group label is empty")
        if action not in (ARRIVES, LEAVES):
            raise InvalidArgument(f"line {line}: unknown action {action!r}")

        group = groups.get(label)
        if group is None:
            if action == LEAVES:
                raise InvalidArgument(f"line {line}: {label} leaves before arriving")
            if size is None:
                raise InvalidArgument(f"line {line}: {label} needs a size")
            group = CustomerGroup(size=size, name=label)
            groups[label] = group
        elif size is not None and size != group.size:
            raise InvalidArgument(
                f"line {line}: {label} has size {size}, earlier rows say {group.size}"
            )
        events.append(SeatingEvent(action=action, group=group))
    return events


def replay(manager: SeatingManager, events: Iterable[SeatingEvent]) -> None:
    """Apply ``events`` to ``manager`` in order."""
    for event in events:
        if event.action == ARRIVES:
            manager.arrives(event.group)
        else:
            manager.leaves(event.group)


def load_all(tables_path: Path | str, events_path: Path | str):
    """Convenience wrapper returning tables and events."""
    return load_tables(tables_path), load_events(events_path)
