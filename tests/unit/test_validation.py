"""Unit tests for calendar and business-hours rules."""

import pytest

from slot_reservation.domain.validation import (
    days_in_month,
    generate_all_slots,
    is_leap_year,
    is_valid_date,
    is_valid_time_slot,
)

CANONICAL_SLOTS = ["09:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00"]


class TestLeapYear:
    """Test cases for leap year and month length rules."""

    @pytest.mark.parametrize("year", [2000, 2020, 2024, 2400, 1904])
    def test_leap_years(self, year):
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [1900, 2100, 2023, 2019, 2200])
    def test_common_years(self, year):
        assert is_leap_year(year) is False

    def test_february_length(self):
        """Test February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2000, 2) == 29
        assert days_in_month(1900, 2) == 28

    def test_thirty_day_months(self):
        """Test April, June, September and November have 30 days."""
        for month in (4, 6, 9, 11):
            assert days_in_month(2024, month) == 30

    def test_thirty_one_day_months(self):
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(2023, month) == 31


class TestIsValidDate:
    """Test cases for is_valid_date."""

    def test_accepts_valid_dates(self):
        """Test validation of well-formed calendar dates."""
        for value in ["2024-01-15", "2024-12-31", "2024-01-01", "1900-01-01", "2100-12-31"]:
            assert is_valid_date(value) is True

    def test_accepts_last_day_of_each_month(self):
        valid = [
            "2024-01-31", "2024-02-29", "2023-02-28", "2024-03-31", "2024-04-30",
            "2024-05-31", "2024-06-30", "2024-07-31", "2024-08-31", "2024-09-30",
            "2024-10-31", "2024-11-30", "2024-12-31",
        ]
        for value in valid:
            assert is_valid_date(value) is True

    @pytest.mark.parametrize("value, expected", [
        ("2024-02-29", True),
        ("2023-02-29", False),
        ("2000-02-29", True),
        ("1900-02-29", False),
        ("2024-02-30", False),
        ("2024-02-31", False),
        ("2023-02-30", False),
    ])
    def test_february_edge_cases(self, value, expected):
        """Test leap-year handling follows the Gregorian /4, /100, /400 rule."""
        assert is_valid_date(value) is expected

    @pytest.mark.parametrize("value", [
        "2024/01/15",     # wrong separator
        "2024.01.15",
        "01-15-2024",     # wrong order
        "2024-1-15",      # single digit month
        "2024-01-5",      # single digit day
        "24-01-15",       # two digit year
        "02024-01-15",    # five digit year
        "2024-01-15-20",  # extra parts
        "2024-01-15T00:00",
        " 2024-01-15",
        "2024-01-15\n",
        "",
        "invalid",
        "２０２４-01-15",  # non-ASCII digits
    ])
    def test_rejects_malformed_strings(self, value):
        """Test structural format violations are rejected."""
        assert is_valid_date(value) is False

    @pytest.mark.parametrize("value", ["2024-00-15", "2024-13-15", "2024-20-15"])
    def test_rejects_invalid_months(self, value):
        assert is_valid_date(value) is False

    @pytest.mark.parametrize("value", ["2024-01-00", "2024-01-32", "2024-04-31", "2024-06-31"])
    def test_rejects_invalid_days(self, value):
        assert is_valid_date(value) is False

    @pytest.mark.parametrize("value", ["1899-12-31", "2101-01-01", "0000-01-01", "9999-12-31"])
    def test_rejects_years_out_of_range(self, value):
        assert is_valid_date(value) is False

    @pytest.mark.parametrize("value", [None, 20240115, ["2024-01-15"]])
    def test_rejects_non_strings(self, value):
        assert is_valid_date(value) is False


class TestIsValidTimeSlot:
    """Test cases for is_valid_time_slot."""

    @pytest.mark.parametrize("value", CANONICAL_SLOTS)
    def test_accepts_canonical_slots(self, value):
        assert is_valid_time_slot(value) is True

    @pytest.mark.parametrize("value", ["08:00", "17:00", "23:00", "00:00", "07:00"])
    def test_rejects_hours_outside_business_hours(self, value):
        """Test well-formed times outside 09:00-16:00 are rejected."""
        assert is_valid_time_slot(value) is False

    @pytest.mark.parametrize("value", ["09:30", "10:15", "16:01", "12:59"])
    def test_rejects_times_off_the_hour(self, value):
        assert is_valid_time_slot(value) is False

    @pytest.mark.parametrize("value", [
        "9:00",       # single digit hour
        "09:0",       # single digit minute
        "09:00:00",   # seconds component
        "09-00",      # wrong separator
        "09.00",
        "0900",
        "24:00",
        "10:60",
        "",
        "ten",
        "09:00\n",
    ])
    def test_rejects_malformed_strings(self, value):
        assert is_valid_time_slot(value) is False

    def test_rejects_non_strings(self):
        assert is_valid_time_slot(None) is False
        assert is_valid_time_slot(900) is False

    def test_accepts_exactly_the_generated_slots(self):
        """Test every HH:MM of the day is valid iff it is a generated slot."""
        accepted = [
            f"{hour:02d}:{minute:02d}"
            for hour in range(24)
            for minute in range(60)
            if is_valid_time_slot(f"{hour:02d}:{minute:02d}")
        ]
        assert accepted == generate_all_slots()


class TestGenerateAllSlots:
    """Test cases for generate_all_slots."""

    def test_returns_canonical_slots(self):
        assert generate_all_slots() == CANONICAL_SLOTS

    def test_is_idempotent(self):
        """Test repeated calls return identical sequences."""
        assert generate_all_slots() == generate_all_slots()
        assert len(generate_all_slots()) == 8

    def test_returns_fresh_list(self):
        """Test mutating a returned list does not affect later calls."""
        slots = generate_all_slots()
        slots.clear()

        assert generate_all_slots() == CANONICAL_SLOTS

    def test_slots_are_ascending(self):
        slots = generate_all_slots()
        assert slots == sorted(slots)
