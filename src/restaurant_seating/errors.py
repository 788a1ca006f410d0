"""Exception hierarchy for restaurant_seating."""


class SeatingError(ValueError):
    """Base exception."""


class InvalidArgument(SeatingError):
    """An argument is out of range for the current seating state."""
