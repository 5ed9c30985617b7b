"""Dependency injection and service factory."""

from typing import AsyncGenerator
from contextlib import asynccontextmanager

from slot_reservation.infrastructure.database.connection import DatabaseManager
from slot_reservation.infrastructure.repositories.sql_repositories import (
    SQLAlchemyBookingRepository,
    SQLAlchemyUserRepository,
)
from slot_reservation.application.services.availability_service import AvailabilityService
from slot_reservation.application.services.booking_service import BookingService
from slot_reservation.presentation.api.config import get_settings


class ServiceFactory:
    """Factory for creating application services with proper dependencies."""

    def __init__(self, database_manager: DatabaseManager):
        self.database_manager = database_manager
        self._connected = False

    @classmethod
    def from_settings(cls) -> "ServiceFactory":
        settings = get_settings()
        return cls(DatabaseManager(
            settings.database_url,
            echo=settings.database_echo,
            pool_pre_ping=settings.db_pool_pre_ping,
            ssl=settings.database_ssl,
        ))

    async def initialize(self):
        """Initialize the service factory."""
        if not self._connected:
            await self.database_manager.connect()
            self._connected = True

    async def shutdown(self):
        """Shutdown the service factory."""
        if self._connected:
            await self.database_manager.disconnect()
            self._connected = False

    @asynccontextmanager
    async def get_booking_service(self) -> AsyncGenerator[BookingService, None]:
        """Get booking service bound to a fresh database session."""
        async with self.database_manager.get_session() as session:
            yield BookingService(
                booking_repository=SQLAlchemyBookingRepository(session),
                user_repository=SQLAlchemyUserRepository(session),
            )

    @asynccontextmanager
    async def get_availability_service(self) -> AsyncGenerator[AvailabilityService, None]:
        """Get availability service bound to a fresh database session."""
        async with self.database_manager.get_session() as session:
            yield AvailabilityService(booking_repository=SQLAlchemyBookingRepository(session))


# Global service factory instance
_service_factory: ServiceFactory | None = None


def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        _service_factory = ServiceFactory.from_settings()

    return _service_factory


def set_service_factory(factory: ServiceFactory | None) -> None:
    """Replace the global service factory (tests, alternate stores)."""
    global _service_factory
    _service_factory = factory


async def initialize_services():
    """Initialize application services."""
    factory = get_service_factory()
    await factory.initialize()


async def shutdown_services():
    """Shutdown application services."""
    factory = get_service_factory()
    await factory.shutdown()
