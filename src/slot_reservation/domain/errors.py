"""Domain errors raised by slot reservation use cases."""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of client-facing booking failures."""
    INVALID_DATE = "invalid_date"
    USER_NOT_FOUND = "user_not_found"
    SHOP_CLOSED = "shop_closed"
    SLOT_FULL = "slot_full"
    MALFORMED_REQUEST = "malformed_request"


class BookingError(ValueError):
    """Base class for validation and allocation failures reported to clients."""

    kind: ErrorKind
    message: str

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def __str__(self) -> str:
        return self.args[0]


class InvalidDateError(BookingError):
    """Date is not a real YYYY-MM-DD calendar date."""
    kind = ErrorKind.INVALID_DATE
    message = "Invalid date format"


class UserNotFoundError(BookingError):
    """User id is missing or does not resolve to an existing user."""
    kind = ErrorKind.USER_NOT_FOUND
    message = "User not found"


class ShopClosedError(BookingError):
    """Requested time is not an on-the-hour slot within business hours."""
    kind = ErrorKind.SHOP_CLOSED
    message = "Shop closed"


class SlotFullError(BookingError):
    """The (date, time) slot is already claimed."""
    kind = ErrorKind.SLOT_FULL
    message = "Slot full"


class MalformedRequestError(BookingError):
    """Request body could not be decoded."""
    kind = ErrorKind.MALFORMED_REQUEST
    message = "Invalid request body"
