"""Booking service implementing the slot allocation use case."""

import logging
from typing import Optional
from uuid import UUID

from ..ports.repositories import (
    BookingRepository,
    UserRepository,
    SlotConflictError,
    UserReferenceError,
)
from ...domain.entities.booking import Booking
from ...domain.errors import (
    InvalidDateError,
    ShopClosedError,
    SlotFullError,
    UserNotFoundError,
)
from ...domain.validation import is_valid_date, is_valid_time_slot


logger = logging.getLogger(__name__)


class BookingService:
    """
    Application service for claiming slots.

    Mutual exclusion between concurrent claims for the same slot is left to
    the store: the booking is written with a single insert and the store's
    uniqueness rule on (date, time) decides the winner. The service never
    checks availability before writing.
    """

    def __init__(self, booking_repository: BookingRepository, user_repository: UserRepository):
        self._booking_repository = booking_repository
        self._user_repository = user_repository

    async def create_booking(
        self,
        user_id: Optional[str],
        date: Optional[str],
        time: Optional[str]
    ) -> UUID:
        """
        Claim the (date, time) slot for a user.

        Checks run in a fixed order; the first failing one is reported:
        date format, user presence, user existence, business hours, and
        finally the atomic insert.

        Returns:
            The new booking's ID

        Raises:
            InvalidDateError: date is not a valid calendar date
            UserNotFoundError: user is missing, unknown or removed before commit
            ShopClosedError: time is not a business-hours slot
            SlotFullError: the slot was already claimed
        """
        if not is_valid_date(date):
            raise InvalidDateError()

        if not user_id:
            raise UserNotFoundError()

        if not await self._user_repository.exists(user_id):
            raise UserNotFoundError()

        if not is_valid_time_slot(time):
            raise ShopClosedError()

        booking = Booking(user_id=user_id, date=date, time=time)

        try:
            saved_booking = await self._booking_repository.add(booking)
        except SlotConflictError as e:
            logger.info(
                "Slot already claimed",
                extra={"slot_date": date, "slot_time": time, "user_id": user_id, "constraint": e.constraint}
            )
            raise SlotFullError() from e
        except UserReferenceError as e:
            logger.info(
                "User removed before booking commit",
                extra={"user_id": user_id, "constraint": e.constraint}
            )
            raise UserNotFoundError() from e

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(saved_booking.id),
                "user_id": user_id,
                "slot_date": date,
                "slot_time": time,
            }
        )
        return saved_booking.id
