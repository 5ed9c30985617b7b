"""SQLAlchemy database models."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, String, DateTime, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

# Constraint names are matched when translating integrity errors
UNIQUE_SLOT_CONSTRAINT = "unique_slot"
BOOKING_USER_FK_CONSTRAINT = "bookings_user_id_fkey"


class UserModel(Base):
    """SQLAlchemy model for users."""

    __tablename__ = "users"

    # Primary key (opaque, externally provisioned)
    id = Column(Text, primary_key=True)

    # User details
    name = Column(Text, nullable=False)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    bookings = relationship(
        "BookingModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id='{self.id}', name='{self.name}')>"


class BookingModel(Base):
    """SQLAlchemy model for bookings."""

    __tablename__ = "bookings"
    __table_args__ = (
        # At most one booking per slot, enforced by the database
        UniqueConstraint("date", "time", name=UNIQUE_SLOT_CONSTRAINT),
    )

    # Primary key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)

    # User reference
    user_id = Column(
        Text,
        ForeignKey("users.id", ondelete="CASCADE", name=BOOKING_USER_FK_CONSTRAINT),
        nullable=False,
        index=True,
    )

    # Slot
    date = Column(String(10), nullable=False)  # YYYY-MM-DD
    time = Column(String(5), nullable=False)  # HH:00

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    user = relationship("UserModel", back_populates="bookings")

    def __repr__(self) -> str:
        return f"<BookingModel(id={self.id}, user_id='{self.user_id}', slot='{self.date} {self.time}')>"
