"""
First-fit seating manager with a FIFO waiting list.

Arriving groups go to the first table, in the order the tables were given,
that has enough empty seats. This is first-fit, not best-fit: a group of two
takes a free four-top ahead of a free two-top if the four-top comes first.
Groups that fit nowhere join the end of the waiting list.

When a seated group leaves, only the table it freed is offered to the
waiting list. The waiting list is walked once in arrival order and every
group that still fits is seated, so a small group further back can be seated
even when a larger group ahead of it cannot.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import InvalidArgument
from .models import CustomerGroup, Table

logger = logging.getLogger(__name__)

_GROUP_IS_NONE = "customer group can not be None"


def _check_group(group: object) -> None:
    if group is None:
        raise InvalidArgument(_GROUP_IS_NONE)
    if not isinstance(group, CustomerGroup):
        raise InvalidArgument(f"expected a CustomerGroup, got {type(group).__name__}")


class SeatingManager:
    """Owns the tables, the group to table map and the waiting list."""

    def __init__(
        self,
        tables: Optional[Iterable[Table]],
        initial_assignment: Optional[Mapping[CustomerGroup, Table]] = None,
    ) -> None:
        if tables is None:
            raise InvalidArgument("tables must not be empty")
        tables = tuple(tables)
        if not tables:
            raise InvalidArgument("tables must not be empty")
        if any(not isinstance(t, Table) for t in tables):
            raise InvalidArgument("tables must only contain Table instances")
        if len({id(t) for t in tables}) != len(tables):
            raise InvalidArgument("the same table was given more than once")

        seated: Dict[CustomerGroup, Table] = dict(initial_assignment or {})
        self._check_assignment(tables, seated)

        self._tables: Tuple[Table, ...] = tables
        self._seated: Dict[CustomerGroup, Table] = seated
        self._waiting: List[CustomerGroup] = []

    @staticmethod
    def _check_assignment(tables: Tuple[Table, ...], seated: Dict[CustomerGroup, Table]) -> None:
        """Occupied seats on every table must match the groups mapped to it."""
        known = {id(t) for t in tables}
        occupied = {id(t): 0 for t in tables}
        for group, table in seated.items():
            if not isinstance(group, CustomerGroup):
                raise InvalidArgument("initial assignment keys must be CustomerGroup instances")
            if id(table) not in known:
                raise InvalidArgument("initial assignment refers to an unknown table")
            occupied[id(table)] += group.size
        for table in tables:
            if table.occupied_seats != occupied[id(table)]:
                raise InvalidArgument("initial assignment does not match table occupancy")

    # ----------------------------- views -----------------------------
    @property
    def tables(self) -> Tuple[Table, ...]:
        return self._tables

    @property
    def waiting_list(self) -> Tuple[CustomerGroup, ...]:
        """Snapshot of waiting groups, oldest first."""
        return tuple(self._waiting)

    def seated_groups(self, table: Optional[Table] = None) -> Tuple[CustomerGroup, ...]:
        if table is None:
            return tuple(self._seated)
        return tuple(g for g, t in self._seated.items() if t is table)

    def is_waiting(self, group: CustomerGroup) -> bool:
        return any(g is group for g in self._waiting)

    def group_count(self) -> int:
        """Groups in the restaurant, seated or waiting."""
        return len(self._seated) + len(self._waiting)

    # ----------------------------- operations -----------------------------
    def arrives(self, group: CustomerGroup) -> None:
        """Seat ``group`` at the first table with room, otherwise queue it."""
        _check_group(group)
        if group in self._seated or self.is_waiting(group):
            raise InvalidArgument("customer group is already in the restaurant")

        for table in self._tables:
            if table.get_empty_seats() >= group.size:
                self._seated[group] = table
                table.fill_seats(group.size)
                logger.debug("seated %s (%d) at %s", group.label, group.size, table.label)
                return

        self._waiting.append(group)
        logger.debug("%s (%d) is waiting, queue length %d", group.label, group.size, len(self._waiting))

    def leaves(self, group: CustomerGroup) -> None:
        """Remove ``group`` whether it is seated or waiting.

        A group that is neither seated nor waiting is ignored.
        """
        _check_group(group)

        table = self._seated.pop(group, None)
        if table is not None:
            table.release_seats(group.size)
            logger.debug("%s left %s", group.label, table.label)
            self._seat_waiting_groups(table)
            return

        for i, waiting in enumerate(self._waiting):
            if waiting is group:
                del self._waiting[i]
                logger.debug("%s left the waiting list", group.label)
                break

    def locate(self, group: CustomerGroup) -> Optional[Table]:
        """Return the table ``group`` sits at, or ``None`` when it is not seated."""
        _check_group(group)
        return self._seated.get(group)

    # ----------------------------- internals -----------------------------
    def _seat_waiting_groups(self, freed: Table) -> None:
        """Offer ``freed`` to the waiting list in arrival order.

        Groups that do not fit are skipped, not a stopping point.
        """
        remaining: List[CustomerGroup] = []
        for group in self._waiting:
            if freed.get_empty_seats() >= group.size:
                freed.fill_seats(group.size)
                self._seated[group] = freed
                logger.debug("seated waiting %s (%d) at %s", group.label, group.size, freed.label)
            else:
                remaining.append(group)
        self._waiting = remaining
