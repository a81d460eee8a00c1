"""
Tests for business-day stepping.
"""

from datetime import date, datetime, timedelta

import pytest

from lrjs_deadline.core.business_days import (
    days_before,
    find_nth_business_day_before,
    is_non_business_day,
    next_business_day_after,
    to_calendar_date,
)
from lrjs_deadline.core.errors import UnboundedSearchError


class TestIsNonBusinessDay:
    """Tests for the business-day predicate."""

    def test_weekdays_are_business_days(self):
        """Monday to Friday without holidays are business days."""
        for offset in range(5):
            day = date(2026, 2, 23) + timedelta(days=offset)  # Monday..Friday
            assert is_non_business_day(day, set()) is False

    def test_weekend(self):
        """Saturday and Sunday are never business days."""
        assert is_non_business_day(date(2026, 2, 21), set()) is True  # Saturday
        assert is_non_business_day(date(2026, 2, 22), set()) is True  # Sunday

    def test_holiday(self):
        """A weekday in the holiday set is not a business day."""
        holidays = {date(2026, 2, 12)}
        assert is_non_business_day(date(2026, 2, 12), holidays) is True
        assert is_non_business_day(date(2026, 2, 11), holidays) is False

    def test_time_of_day_is_ignored(self):
        """Datetimes are compared at day granularity."""
        holidays = {date(2026, 2, 12)}
        assert is_non_business_day(datetime(2026, 2, 12, 18, 30), holidays) is True
        assert is_non_business_day(datetime(2026, 2, 11, 0, 0, 1), holidays) is False

    def test_to_calendar_date(self):
        """Datetimes are truncated, dates are returned unchanged."""
        assert to_calendar_date(datetime(2026, 2, 12, 23, 59)) == date(2026, 2, 12)
        assert to_calendar_date(date(2026, 2, 12)) == date(2026, 2, 12)


class TestBackwardWalk:
    """Tests for find_nth_business_day_before."""

    def test_trial_date_is_not_counted(self):
        """The walk starts the day before the trial."""
        nth, track = find_nth_business_day_before(date(2026, 2, 26), 1, set())

        assert nth == date(2026, 2, 25)
        assert track == [date(2026, 2, 25)]

    def test_skips_weekend(self):
        """From a Monday trial the first business day is the previous Friday."""
        nth, track = find_nth_business_day_before(date(2026, 2, 23), 1, set())

        assert nth == date(2026, 2, 20)

    def test_track_is_ascending(self):
        """The track is reversed into chronological order."""
        nth, track = find_nth_business_day_before(date(2026, 2, 26), 3, set())

        assert track == [date(2026, 2, 23), date(2026, 2, 24), date(2026, 2, 25)]
        assert nth == track[0]

    def test_invalid_n(self):
        """n must be positive."""
        with pytest.raises(ValueError):
            find_nth_business_day_before(date(2026, 2, 26), 0, set())

    def test_cap_reached(self):
        """Too many holidays raise UnboundedSearchError instead of looping."""
        trial = date(2026, 2, 26)
        holidays = {trial - timedelta(days=i) for i in range(1, 60)}

        with pytest.raises(UnboundedSearchError) as exc_info:
            find_nth_business_day_before(trial, 10, holidays, max_search_days=30)

        assert exc_info.value.walk == "backward"
        assert exc_info.value.cap == 30
        assert exc_info.value.start == trial

    def test_stops_at_first_representable_date(self):
        """Only four business days exist before 05.01.0001; the walk gives up cleanly."""
        trial = date(1, 1, 5)

        with pytest.raises(UnboundedSearchError) as exc_info:
            find_nth_business_day_before(trial, 10, set())

        assert exc_info.value.walk == "backward"
        assert exc_info.value.start == trial


class TestForwardWalk:
    """Tests for next_business_day_after."""

    def test_next_day(self):
        """Thursday is followed by Friday."""
        assert next_business_day_after(date(2026, 2, 12), set()) == date(2026, 2, 13)

    def test_over_weekend(self):
        """Friday is followed by Monday."""
        assert next_business_day_after(date(2026, 2, 13), set()) == date(2026, 2, 16)

    def test_over_holidays(self):
        """Holidays after the start are skipped."""
        holidays = {date(2026, 2, 13), date(2026, 2, 16)}
        assert next_business_day_after(date(2026, 2, 12), holidays) == date(2026, 2, 17)

    def test_cap_reached(self):
        """A run of holidays longer than the cap raises UnboundedSearchError."""
        start = date(2026, 8, 1)
        holidays = {start + timedelta(days=i) for i in range(1, 100)}

        with pytest.raises(UnboundedSearchError) as exc_info:
            next_business_day_after(start, holidays, max_search_days=50)

        assert exc_info.value.walk == "forward"
        assert exc_info.value.cap == 50

    def test_stops_at_last_representable_date(self):
        with pytest.raises(UnboundedSearchError) as exc_info:
            next_business_day_after(date.max, set())

        assert exc_info.value.walk == "forward"
        assert exc_info.value.start == date.max


class TestDaysBefore:
    """Tests for days_before."""

    def test_plain_subtraction(self):
        assert days_before(date(2026, 2, 26), 367) == date(2025, 2, 24)

    def test_clamped_to_date_min(self):
        assert days_before(date(1, 1, 20), 367) == date.min
