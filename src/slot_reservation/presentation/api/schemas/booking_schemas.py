"""Pydantic schemas for slot and booking API requests and responses."""

from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict


class BookingRequest(BaseModel):
    """Request model for claiming a slot.

    Fields are optional so that missing values reach the booking rules and
    get reported in their documented order instead of as a schema error.
    """
    model_config = ConfigDict(strict=True)

    user_id: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None


class BookingCreatedResponse(BaseModel):
    """Response model for a successful claim."""
    booking_id: UUID


class AvailableSlotsResponse(BaseModel):
    """Response model for available slots."""
    available_times: List[str]


class HealthResponse(BaseModel):
    """Response model for health checks."""
    status: str


class ErrorResponse(BaseModel):
    """Response model for errors."""
    error: str
