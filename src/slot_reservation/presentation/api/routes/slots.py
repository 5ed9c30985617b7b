"""Slot availability endpoints."""

from typing import Optional
from fastapi import APIRouter, Query

from slot_reservation.domain.errors import InvalidDateError
from slot_reservation.infrastructure.services import get_service_factory
from ..schemas.booking_schemas import AvailableSlotsResponse, ErrorResponse

router = APIRouter()


@router.get("", responses={400: {"model": ErrorResponse}})
async def get_available_slots(
    date: Optional[str] = Query(None, description="Date in YYYY-MM-DD format")
) -> AvailableSlotsResponse:
    """Get the slots of a date that are still free."""
    if date is None:
        raise InvalidDateError()

    service_factory = get_service_factory()
    async with service_factory.get_availability_service() as availability_service:
        available_times = await availability_service.get_available_slots(date)

    return AvailableSlotsResponse(available_times=available_times)
