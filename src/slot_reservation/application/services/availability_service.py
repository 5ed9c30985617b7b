"""Availability service: derives open slots from booked state."""

from typing import List

from ..ports.repositories import BookingRepository
from ...domain.errors import InvalidDateError
from ...domain.validation import generate_all_slots, is_valid_date


class AvailabilityService:
    """Application service answering "which slots are still free on a day"."""

    def __init__(self, booking_repository: BookingRepository):
        self._booking_repository = booking_repository

    async def get_available_slots(self, date: str) -> List[str]:
        """
        Get the free slots for a date in canonical ascending order.

        Raises:
            InvalidDateError: date is not a valid YYYY-MM-DD calendar date
        """
        if not is_valid_date(date):
            raise InvalidDateError()

        booked_times = await self._booking_repository.find_booked_times(date)

        return [slot for slot in generate_all_slots() if slot not in booked_times]
