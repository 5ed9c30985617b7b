"""Port interfaces for repositories (Dependency Inversion Principle)."""

from abc import ABC, abstractmethod
from typing import Optional, Set, TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from slot_reservation.domain.entities.booking import Booking
    from slot_reservation.domain.entities.user import User


class StoreIntegrityError(Exception):
    """Raised by a repository when the store rejects a write on an integrity rule."""

    def __init__(self, message: str, constraint: Optional[str] = None):
        super().__init__(message)
        self.constraint = constraint


class SlotConflictError(StoreIntegrityError):
    """The store's uniqueness rule on (date, time) rejected the insert."""


class UserReferenceError(StoreIntegrityError):
    """The booking's user reference does not resolve to an existing user."""


class BookingRepository(ABC):
    """Port interface for booking repository."""

    @abstractmethod
    async def add(self, booking: "Booking") -> "Booking":
        """
        Insert a booking as a single atomic operation.

        Raises:
            SlotConflictError: the (date, time) slot is already taken
            UserReferenceError: the booking's user does not exist at commit time
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, booking_id: UUID) -> Optional["Booking"]:
        """Find booking by ID."""
        raise NotImplementedError

    @abstractmethod
    async def find_booked_times(self, date: str) -> Set[str]:
        """Find the slot times already booked on a date."""
        raise NotImplementedError


class UserRepository(ABC):
    """Port interface for user repository."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional["User"]:
        """Find user by ID."""
        raise NotImplementedError

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Check if user exists."""
        raise NotImplementedError
