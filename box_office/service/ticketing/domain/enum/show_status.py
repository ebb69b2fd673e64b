from enum import StrEnum


class ShowStatus(StrEnum):
    """Informational only; ticket operations do not check it."""

    UPCOMING = 'upcoming'
    ONGOING = 'ongoing'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
