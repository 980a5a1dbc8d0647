"""Tests for the calendar helpers.

Tests cover:
- DD/MM/YYYY parsing (lenient: bad input → None) and formatting
- Month arithmetic with day clamping
- Day-of-month placement
- Day distances
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from first_debit.calculators.dates import (
    add_months,
    days_between,
    end_of_month,
    format_date_dmy,
    month_start,
    parse_date_dmy,
    set_day_of_month,
)


class TestParseDateDmy:
    """Test jj/mm/aaaa parsing."""

    def test_valid_date(self) -> None:
        assert parse_date_dmy("05/03/2025") == date(2025, 3, 5)

    def test_unpadded_components(self) -> None:
        assert parse_date_dmy("5/3/2025") == date(2025, 3, 5)

    def test_empty_and_none(self) -> None:
        assert parse_date_dmy("") is None
        assert parse_date_dmy(None) is None

    def test_zero_component_is_absent(self) -> None:
        """Day, month or year 0 counts as missing."""
        assert parse_date_dmy("00/03/2025") is None
        assert parse_date_dmy("05/00/2025") is None
        assert parse_date_dmy("05/03/0") is None

    def test_missing_component(self) -> None:
        assert parse_date_dmy("05/03") is None
        assert parse_date_dmy("05/03/") is None

    def test_non_numeric(self) -> None:
        assert parse_date_dmy("jj/mm/aaaa") is None

    def test_other_formats_rejected(self) -> None:
        assert parse_date_dmy("2025-03-05") is None

    def test_impossible_date(self) -> None:
        """31 February is not silently rolled into March."""
        assert parse_date_dmy("31/02/2025") is None

    def test_leap_day(self) -> None:
        assert parse_date_dmy("29/02/2024") == date(2024, 2, 29)
        assert parse_date_dmy("29/02/2025") is None


class TestFormatDateDmy:
    """Test DD/MM/YYYY rendering."""

    def test_zero_padded(self) -> None:
        assert format_date_dmy(date(2025, 3, 5)) == "05/03/2025"

    def test_none_placeholder(self) -> None:
        assert format_date_dmy(None) == "—"

    def test_round_trip_whole_year(self) -> None:
        """parse(format(d)) == d for every day of a leap year."""
        d = date(2024, 1, 1)
        while d.year == 2024:
            assert parse_date_dmy(format_date_dmy(d)) == d
            d += timedelta(days=1)


class TestMonthBounds:
    """Test month_start / end_of_month."""

    def test_month_start(self) -> None:
        assert month_start(date(2025, 4, 20)) == date(2025, 4, 1)

    def test_end_of_month(self) -> None:
        assert end_of_month(date(2025, 4, 20)) == date(2025, 4, 30)
        assert end_of_month(date(2025, 2, 1)) == date(2025, 2, 28)
        assert end_of_month(date(2024, 2, 1)) == date(2024, 2, 29)
        assert end_of_month(date(2025, 12, 31)) == date(2025, 12, 31)


class TestAddMonths:
    """Test month arithmetic."""

    def test_simple(self) -> None:
        assert add_months(date(2025, 1, 15), 1) == date(2025, 2, 15)

    def test_year_rollover(self) -> None:
        assert add_months(date(2025, 11, 15), 3) == date(2026, 2, 15)

    def test_negative(self) -> None:
        assert add_months(date(2025, 1, 15), -1) == date(2024, 12, 15)
        assert add_months(date(2025, 3, 10), -14) == date(2024, 1, 10)

    def test_clamps_day_overflow(self) -> None:
        """31/01 + 1 month is the last day of February, not early March."""
        assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2025, 3, 31), 1) == date(2025, 4, 30)

    def test_inverse_without_clamping(self) -> None:
        d = date(2025, 6, 15)
        for n in (1, 5, 12, 27):
            assert add_months(add_months(d, n), -n) == d

    def test_clamping_is_stable(self) -> None:
        """Once clamped, shifting by 0 months changes nothing."""
        clamped = add_months(date(2025, 1, 31), 1)
        assert add_months(clamped, 0) == clamped
        assert add_months(clamped, -1) == date(2025, 1, 28)

    def test_ignores_time_of_day(self) -> None:
        assert add_months(datetime(2025, 1, 15, 18, 30), 1) == date(2025, 2, 15)


class TestSetDayOfMonth:
    """Test day-of-month placement."""

    def test_inside_month(self) -> None:
        assert set_day_of_month(date(2025, 3, 20), 5) == date(2025, 3, 5)

    def test_clamps_to_last_day(self) -> None:
        assert set_day_of_month(date(2025, 2, 10), 31) == date(2025, 2, 28)
        assert set_day_of_month(date(2025, 4, 10), 31) == date(2025, 4, 30)

    def test_clamps_to_first_day(self) -> None:
        assert set_day_of_month(date(2025, 2, 10), 0) == date(2025, 2, 1)

    def test_never_leaves_month(self) -> None:
        for month in range(1, 13):
            base = date(2024, month, 15)
            for day in range(0, 35):
                result = set_day_of_month(base, day)
                assert (result.year, result.month) == (2024, month)

    def test_idempotent(self) -> None:
        once = set_day_of_month(date(2025, 2, 10), 31)
        assert set_day_of_month(once, 31) == once


class TestDaysBetween:
    """Test day distances."""

    def test_forward(self) -> None:
        assert days_between(date(2025, 4, 1), date(2025, 4, 20)) == 19

    def test_backward(self) -> None:
        assert days_between(date(2025, 4, 20), date(2025, 4, 1)) == -19

    def test_same_day(self) -> None:
        assert days_between(date(2025, 4, 1), date(2025, 4, 1)) == 0

    def test_time_of_day_ignored(self) -> None:
        start = datetime(2025, 3, 1, 23, 59)
        end = datetime(2025, 3, 2, 0, 1)
        assert days_between(start, end) == 1

    def test_across_dst_change(self) -> None:
        """Late March: whole days even where clocks change."""
        assert days_between(date(2025, 3, 29), date(2025, 3, 31)) == 2
