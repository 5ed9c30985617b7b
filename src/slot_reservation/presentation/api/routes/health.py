"""Health check endpoints."""

from fastapi import APIRouter

from ..schemas.booking_schemas import HealthResponse

router = APIRouter()


@router.get("/health")
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok")
