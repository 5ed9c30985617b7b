"""Unit tests for translating driver integrity errors into repository errors."""

from sqlalchemy.exc import IntegrityError

from slot_reservation.application.ports.repositories import SlotConflictError, UserReferenceError
from slot_reservation.infrastructure.repositories.sql_repositories import translate_integrity_error


class FakePostgresError(Exception):
    """Mimics the asyncpg DBAPI adapter error."""

    def __init__(self, message, sqlstate, constraint_name=None):
        super().__init__(message)
        self.sqlstate = sqlstate
        self.constraint_name = constraint_name


class FakeSQLiteError(Exception):
    """Mimics sqlite3.IntegrityError on Python 3.11+."""

    def __init__(self, message, sqlite_errorname):
        super().__init__(message)
        self.sqlite_errorname = sqlite_errorname


def make_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO bookings ...", {}, orig)


class TestPostgresTranslation:
    """Test cases for SQLSTATE based translation."""

    def test_unique_slot_violation(self):
        error = make_error(FakePostgresError("duplicate key", "23505", "unique_slot"))

        translated = translate_integrity_error(error)

        assert isinstance(translated, SlotConflictError)
        assert translated.constraint == "unique_slot"

    def test_unique_violation_without_constraint_name(self):
        error = make_error(FakePostgresError("duplicate key", "23505"))

        assert isinstance(translate_integrity_error(error), SlotConflictError)

    def test_primary_key_collision_is_not_a_slot_conflict(self):
        """Test uniqueness failures on other constraints are left untranslated."""
        error = make_error(FakePostgresError("duplicate key", "23505", "bookings_pkey"))

        assert translate_integrity_error(error) is None

    def test_foreign_key_violation(self):
        error = make_error(FakePostgresError("violates foreign key", "23503", "bookings_user_id_fkey"))

        translated = translate_integrity_error(error)

        assert isinstance(translated, UserReferenceError)
        assert translated.constraint == "bookings_user_id_fkey"

    def test_code_wins_over_message(self):
        """Test a structured code is trusted even when the message suggests otherwise."""
        error = make_error(FakePostgresError("unique_slot mentioned here", "23503", "bookings_user_id_fkey"))

        assert isinstance(translate_integrity_error(error), UserReferenceError)

    def test_other_codes_untranslated(self):
        error = make_error(FakePostgresError("null value", "23502"))

        assert translate_integrity_error(error) is None

    def test_code_from_cause(self):
        """Test the code is read from the wrapped driver exception."""
        cause = FakePostgresError("duplicate key", "23505", "unique_slot")
        adapter_error = Exception("adapter")
        adapter_error.__cause__ = cause

        assert isinstance(translate_integrity_error(make_error(adapter_error)), SlotConflictError)


class TestSQLiteTranslation:
    """Test cases for SQLite extended error names."""

    def test_unique_violation(self):
        error = make_error(FakeSQLiteError(
            "UNIQUE constraint failed: bookings.date, bookings.time",
            "SQLITE_CONSTRAINT_UNIQUE"
        ))

        assert isinstance(translate_integrity_error(error), SlotConflictError)

    def test_foreign_key_violation(self):
        error = make_error(FakeSQLiteError("FOREIGN KEY constraint failed", "SQLITE_CONSTRAINT_FOREIGNKEY"))

        assert isinstance(translate_integrity_error(error), UserReferenceError)

    def test_not_null_violation_untranslated(self):
        error = make_error(FakeSQLiteError("NOT NULL constraint failed: bookings.time", "SQLITE_CONSTRAINT_NOTNULL"))

        assert translate_integrity_error(error) is None


class TestMessageFallback:
    """Test cases for drivers that report no structured code."""

    def test_unique_message(self):
        error = make_error(Exception("UNIQUE constraint failed: bookings.date, bookings.time"))

        assert isinstance(translate_integrity_error(error), SlotConflictError)

    def test_foreign_key_message(self):
        error = make_error(Exception("FOREIGN KEY constraint failed"))

        assert isinstance(translate_integrity_error(error), UserReferenceError)

    def test_unrelated_message(self):
        error = make_error(Exception("CHECK constraint failed"))

        assert translate_integrity_error(error) is None
