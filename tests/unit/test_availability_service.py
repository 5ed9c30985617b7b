"""Unit tests for availability service."""

import pytest
from unittest.mock import AsyncMock

from slot_reservation.application.services.availability_service import AvailabilityService
from slot_reservation.domain.errors import InvalidDateError


class TestAvailabilityService:
    """Test cases for AvailabilityService."""

    def setup_mocks(self, booked=frozenset()):
        self.mock_booking_repo = AsyncMock()
        self.mock_booking_repo.find_booked_times.return_value = set(booked)
        self.service = AvailabilityService(self.mock_booking_repo)

    @pytest.mark.asyncio
    async def test_all_slots_free(self):
        self.setup_mocks()

        result = await self.service.get_available_slots("2024-06-10")

        assert result == ["09:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00"]
        self.mock_booking_repo.find_booked_times.assert_called_once_with("2024-06-10")

    @pytest.mark.asyncio
    async def test_booked_slots_are_excluded_in_order(self):
        """Test booked times are removed and canonical order is kept."""
        self.setup_mocks(booked={"16:00", "09:00", "12:00"})

        result = await self.service.get_available_slots("2024-06-10")

        assert result == ["10:00", "11:00", "13:00", "14:00", "15:00"]

    @pytest.mark.asyncio
    async def test_fully_booked_day(self):
        self.setup_mocks(booked={f"{hour:02d}:00" for hour in range(9, 17)})

        assert await self.service.get_available_slots("2024-06-10") == []

    @pytest.mark.asyncio
    async def test_unknown_booked_times_are_ignored(self):
        self.setup_mocks(booked={"08:00", "09:00"})

        result = await self.service.get_available_slots("2024-06-10")

        assert "09:00" not in result
        assert len(result) == 7

    @pytest.mark.asyncio
    @pytest.mark.parametrize("date", ["2024-02-30", "2024-6-10", "", None, "2024/06/10"])
    async def test_invalid_date_skips_store(self, date):
        """Test invalid dates fail without querying the store."""
        self.setup_mocks()

        with pytest.raises(InvalidDateError, match="Invalid date format"):
            await self.service.get_available_slots(date)

        self.mock_booking_repo.find_booked_times.assert_not_called()
