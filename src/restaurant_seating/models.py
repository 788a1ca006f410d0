"""Data models for restaurant_seating."""
from __future__ import annotations

from dataclasses import dataclass, field
import numbers

from .errors import InvalidArgument

MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 6
MIN_TABLE_SIZE = 2
MAX_TABLE_SIZE = 6


def _is_count(value: object) -> bool:
    """True for integral values. ``bool`` is not a count."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class CustomerGroup:
    """A party of people that wants to sit together.

    Groups compare and hash by identity: two parties of the same size are
    still two different parties.
    """

    size: int
    name: str = ""

    def __post_init__(self) -> None:
        if not _is_count(self.size) or not MIN_GROUP_SIZE <= self.size <= MAX_GROUP_SIZE:
            raise InvalidArgument(
                f"group size must be between {MIN_GROUP_SIZE} and {MAX_GROUP_SIZE}"
            )
        object.__setattr__(self, "size", int(self.size))

    @property
    def label(self) -> str:
        return self.name or f"group-{id(self):x}"


@dataclass(eq=False)
class Table:
    """Dining table with a fixed number of seats.

    ``size`` can not be rebound after construction. ``empty_seats`` only changes through :meth:`fill_seats` and
    :meth:`release_seats`.
    """

    size: int
    name: str = ""
    _empty_seats: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not _is_count(self.size) or not MIN_TABLE_SIZE <= self.size <= MAX_TABLE_SIZE:
            raise InvalidArgument(
                f"table size must be between {MIN_TABLE_SIZE} and {MAX_TABLE_SIZE}"
            )
        object.__setattr__(self, "size", int(self.size))
        self._empty_seats = self.size

    def __setattr__(self, key: str, value: object) -> None:
        if key == "size" and "size" in self.__dict__:
            raise AttributeError("table size is fixed")
        super().__setattr__(key, value)

    @property
    def empty_seats(self) -> int:
        return self._empty_seats

    @property
    def label(self) -> str:
        return self.name or f"table-{id(self):x}"

    @property
    def occupied_seats(self) -> int:
        return self.size - self._empty_seats

    def get_empty_seats(self) -> int:
        return self._empty_seats

    def fill_seats(self, seats: int) -> None:
        """Take ``seats`` empty seats. Needs ``1 <= seats <= empty_seats``."""
        if not _is_count(seats) or seats < 1 or seats > self._empty_seats:
            raise InvalidArgument("invalid number of seats to fill")
        self._empty_seats -= seats

    def release_seats(self, seats: int) -> None:
        """Give back ``seats`` occupied seats. Needs ``1 <= seats <= occupied_seats``."""
        if not _is_count(seats) or seats < 1 or seats > self.occupied_seats:
            raise InvalidArgument("invalid number of seats to release")
        self._empty_seats += seats
