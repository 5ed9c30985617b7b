"""User entity."""

from datetime import datetime
from typing import Optional


class User:
    """Identity a booking is attributed to. Provisioned externally, read-only here."""

    def __init__(self, user_id: str, name: str, created_at: Optional[datetime] = None):
        if not user_id:
            raise ValueError("User ID cannot be empty")
        self._id = user_id
        self._name = name
        self._created_at = created_at or datetime.utcnow()

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"User({self._id}, {self._name})"
