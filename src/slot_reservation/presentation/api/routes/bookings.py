"""Booking endpoints with database integration."""

from fastapi import APIRouter

from slot_reservation.infrastructure.services import get_service_factory
from ..schemas.booking_schemas import BookingRequest, BookingCreatedResponse, ErrorResponse

router = APIRouter()


@router.post("", responses={400: {"model": ErrorResponse}})
async def create_booking(request: BookingRequest) -> BookingCreatedResponse:
    """Claim a slot for a user.

    Domain failures (invalid date, unknown user, closed hours, taken slot)
    propagate as BookingError and are rendered by the app's exception handlers.
    """
    service_factory = get_service_factory()
    async with service_factory.get_booking_service() as booking_service:
        booking_id = await booking_service.create_booking(
            user_id=request.user_id,
            date=request.date,
            time=request.time,
        )

    return BookingCreatedResponse(booking_id=booking_id)
