"""Booking entity for slot reservations."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


class Booking:
    """Booking entity representing a user's claim on one (date, time) slot."""

    def __init__(
        self,
        user_id: str,
        date: str,
        time: str,
        booking_id: Optional[UUID] = None,
        created_at: Optional[datetime] = None
    ):
        self._id = booking_id or uuid4()
        self._user_id = user_id
        self._date = date
        self._time = time
        self._created_at = created_at or datetime.utcnow()

    @property
    def id(self) -> UUID:
        """Get booking ID."""
        return self._id

    @property
    def user_id(self) -> str:
        """Get owning user ID."""
        return self._user_id

    @property
    def date(self) -> str:
        """Get booked date (YYYY-MM-DD)."""
        return self._date

    @property
    def time(self) -> str:
        """Get booked slot start (HH:00)."""
        return self._time

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def slot(self) -> tuple[str, str]:
        """Get the (date, time) key this booking occupies."""
        return (self._date, self._time)

    def __eq__(self, other: object) -> bool:
        """Check equality based on booking ID."""
        if not isinstance(other, Booking):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on booking ID."""
        return hash(self._id)

    def __str__(self) -> str:
        """String representation."""
        return f"Booking({self._id}, {self._user_id}, {self._date} {self._time})"
