"""In-memory repository implementations for testing and development."""

from typing import Dict, Iterable, Optional, Set, Tuple
from uuid import UUID

from slot_reservation.application.ports.repositories import (
    BookingRepository,
    UserRepository,
    SlotConflictError,
    UserReferenceError,
)
from slot_reservation.domain.entities.booking import Booking
from slot_reservation.domain.entities.user import User


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of user repository."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: Dict[str, User] = {user.id: user for user in users}

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def remove_user(self, user_id: str) -> bool:
        """Remove a user."""
        return self._users.pop(user_id, None) is not None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID."""
        return self._users.get(user_id)

    async def exists(self, user_id: str) -> bool:
        """Check if user exists."""
        return user_id in self._users


class InMemoryBookingRepository(BookingRepository):
    """
    In-memory implementation of booking repository.

    Mirrors the database contract: the (date, time) key is unique and the
    user reference must resolve. The check and the write happen without an
    await in between, so they are atomic on the event loop.
    """

    def __init__(self, user_repository: Optional[InMemoryUserRepository] = None):
        self._user_repository = user_repository
        self._bookings: Dict[UUID, Booking] = {}
        self._slots: Dict[Tuple[str, str], UUID] = {}

    async def add(self, booking: Booking) -> Booking:
        """Insert a booking, enforcing slot uniqueness and the user reference."""
        if self._user_repository is not None and booking.user_id not in self._user_repository:
            raise UserReferenceError("Booking user does not exist", "bookings_user_id_fkey")

        if booking.slot in self._slots:
            raise SlotConflictError("Slot already booked", "unique_slot")

        self._slots[booking.slot] = booking.id
        self._bookings[booking.id] = booking
        return booking

    async def find_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Find booking by ID."""
        return self._bookings.get(booking_id)

    async def find_booked_times(self, date: str) -> Set[str]:
        """Find the slot times already booked on a date."""
        return {time for (slot_date, time) in self._slots if slot_date == date}

