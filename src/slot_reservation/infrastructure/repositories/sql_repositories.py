"""SQLAlchemy repository implementations."""

from typing import Optional, Set
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from slot_reservation.infrastructure.logging import (
    get_logger,
    log_database_operation
)

from slot_reservation.application.ports.repositories import (
    BookingRepository,
    UserRepository,
    SlotConflictError,
    UserReferenceError,
)
from slot_reservation.domain.entities.booking import Booking
from slot_reservation.domain.entities.user import User
from slot_reservation.infrastructure.database.models import (
    BookingModel,
    UserModel,
    UNIQUE_SLOT_CONSTRAINT,
    BOOKING_USER_FK_CONSTRAINT,
)

# PostgreSQL SQLSTATE codes
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"

# SQLite extended result code names
SQLITE_UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"
SQLITE_FOREIGN_KEY_VIOLATION = "SQLITE_CONSTRAINT_FOREIGNKEY"


def _violation_code(error: IntegrityError) -> Optional[str]:
    """Get the structured violation code reported by the driver, if any."""
    orig = error.orig
    for attr in ("sqlstate", "pgcode", "sqlite_errorname"):
        code = getattr(orig, attr, None)
        if code:
            return code
    # asyncpg keeps its own exception as the cause of the DBAPI adapter error
    cause = getattr(orig, "__cause__", None)
    return getattr(cause, "sqlstate", None)


def _violated_constraint(error: IntegrityError) -> Optional[str]:
    """Get the name of the violated constraint, if the driver reports it."""
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


def translate_integrity_error(error: IntegrityError) -> Optional[Exception]:
    """
    Map a driver integrity error on the bookings table to a port error.

    Structured codes are used when the driver provides them; the message is
    only inspected for drivers that report none. Returns None when the
    violation is not one the booking contract knows about.
    """
    code = _violation_code(error)
    constraint = _violated_constraint(error)

    if code is not None:
        if code in (PG_UNIQUE_VIOLATION, SQLITE_UNIQUE_VIOLATION):
            if constraint in (None, UNIQUE_SLOT_CONSTRAINT):
                return SlotConflictError("Slot already booked", UNIQUE_SLOT_CONSTRAINT)
            return None
        if code in (PG_FOREIGN_KEY_VIOLATION, SQLITE_FOREIGN_KEY_VIOLATION):
            return UserReferenceError("Booking user does not exist", constraint or BOOKING_USER_FK_CONSTRAINT)
        return None

    message = str(error.orig)
    if UNIQUE_SLOT_CONSTRAINT in message or "UNIQUE constraint failed: bookings.date, bookings.time" in message:
        return SlotConflictError("Slot already booked", UNIQUE_SLOT_CONSTRAINT)
    if "FOREIGN KEY constraint failed" in message:
        return UserReferenceError("Booking user does not exist", BOOKING_USER_FK_CONSTRAINT)
    return None


class SQLAlchemyBookingRepository(BookingRepository):
    """SQLAlchemy implementation of booking repository."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._logger = get_logger(__name__)

    async def add(self, booking: Booking) -> Booking:
        """Insert a booking; the database decides slot conflicts."""
        log_database_operation(
            self._logger,
            "INSERT",
            "BookingModel",
            booking_id=str(booking.id),
            slot_date=booking.date,
            slot_time=booking.time,
        )

        booking_model = BookingModel(
            id=booking.id,
            user_id=booking.user_id,
            date=booking.date,
            time=booking.time,
            created_at=booking.created_at,
        )
        self._session.add(booking_model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            translated = translate_integrity_error(e)
            if translated is None:
                self._logger.error(
                    "Unexpected integrity error on booking insert",
                    extra={"booking_id": str(booking.id), "error": str(e.orig)}
                )
                raise
            self._logger.debug(
                "Booking insert rejected by constraint",
                extra={
                    "booking_id": str(booking.id),
                    "constraint": translated.constraint,
                    "error_type": type(translated).__name__,
                }
            )
            raise translated from e

        return booking

    async def find_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Find booking by ID."""
        stmt = select(BookingModel).where(BookingModel.id == booking_id)
        result = await self._session.execute(stmt)
        booking_model = result.scalar_one_or_none()

        if not booking_model:
            return None

        return self._model_to_entity(booking_model)

    async def find_booked_times(self, date: str) -> Set[str]:
        """Find the slot times already booked on a date."""
        log_database_operation(
            self._logger,
            "SELECT",
            "BookingModel",
            slot_date=date,
        )

        stmt = select(BookingModel.time).where(BookingModel.date == date)
        result = await self._session.execute(stmt)
        booked_times = set(result.scalars().all())

        self._logger.debug(
            "Booked times loaded",
            extra={"slot_date": date, "booked_count": len(booked_times)}
        )
        return booked_times

    def _model_to_entity(self, model: BookingModel) -> Booking:
        """Convert database model to domain entity."""
        return Booking(
            booking_id=model.id,
            user_id=model.user_id,
            date=model.date,
            time=model.time,
            created_at=model.created_at,
        )


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID."""
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if not user_model:
            return None

        return User(
            user_id=user_model.id,
            name=user_model.name,
            created_at=user_model.created_at,
        )

    async def exists(self, user_id: str) -> bool:
        """Check if user exists."""
        stmt = select(func.count(UserModel.id)).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        count = result.scalar()

        return count > 0
