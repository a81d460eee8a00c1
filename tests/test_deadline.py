"""
Tests for the Art. 82.5 LRJS deadline computation.
"""

from datetime import date, datetime, time, timedelta

import pytest

from lrjs_deadline.core.business_days import is_non_business_day
from lrjs_deadline.core.deadline import calculate_deadline, parse_trial_date
from lrjs_deadline.core.errors import InvalidTrialDateError, UnboundedSearchError


TRIAL = date(2026, 2, 26)  # Thursday


class TestConcreteScenarios:
    """Known trial dates with hand-checked results."""

    def test_no_holidays(self):
        """Ten business days before Thursday 26.02.2026 is Thursday 12.02.2026."""
        result = calculate_deadline(TRIAL, set())

        assert result.theoretical_deadline == date(2026, 2, 12)
        assert result.prorrogue_date == date(2026, 2, 13)
        assert result.business_days_track == [
            date(2026, 2, 12),
            date(2026, 2, 13),
            date(2026, 2, 16),
            date(2026, 2, 17),
            date(2026, 2, 18),
            date(2026, 2, 19),
            date(2026, 2, 20),
            date(2026, 2, 23),
            date(2026, 2, 24),
            date(2026, 2, 25),
        ]

    def test_holiday_on_deadline(self):
        """A holiday on 12.02 moves the deadline to 11.02; the grace day skips it."""
        result = calculate_deadline(TRIAL, {date(2026, 2, 12)})

        assert result.theoretical_deadline == date(2026, 2, 11)
        assert result.prorrogue_date == date(2026, 2, 13)
        assert date(2026, 2, 12) not in result.business_days_track

    def test_holiday_inside_window(self):
        """A holiday among the counted days moves both dates one business day back."""
        result = calculate_deadline(TRIAL, {date(2026, 2, 13)})

        assert result.theoretical_deadline == date(2026, 2, 11)
        assert result.prorrogue_date == date(2026, 2, 12)

    def test_year_boundary(self):
        """Epiphany and New Year are skipped when the window crosses into December."""
        holidays = {date(2026, 1, 1), date(2026, 1, 6)}
        result = calculate_deadline(date(2026, 1, 15), holidays)

        assert result.theoretical_deadline == date(2025, 12, 30)
        assert result.prorrogue_date == date(2025, 12, 31)

    def test_monday_trial(self):
        """The Friday before a Monday trial is the first counted day."""
        result = calculate_deadline(date(2026, 3, 2), set())

        assert result.business_days_track[-1] == date(2026, 2, 27)
        assert result.theoretical_deadline == date(2026, 2, 16)

    def test_cutoff_times(self):
        """Ordinary deadline ends at 23:59, the grace day at 15:00."""
        result = calculate_deadline(TRIAL, set())

        assert result.grace_cutoff == time(15, 0)
        assert result.prorrogue_deadline_at == datetime(2026, 2, 13, 15, 0)
        assert result.theoretical_deadline_at.date() == date(2026, 2, 12)
        assert result.theoretical_deadline_at.hour == 23


HOLIDAY_SETS = [
    set(),
    {date(2026, 2, 12)},
    {date(2026, 2, 13), date(2026, 2, 16), date(2026, 2, 17)},
    {date(2026, 2, 20) + timedelta(days=i) for i in range(5)},
    {date(2025, 12, 24) + timedelta(days=i) for i in range(14)},
]

TRIAL_DATES = [
    date(2026, 2, 26),
    date(2026, 3, 2),
    date(2026, 1, 8),
    datetime(2026, 2, 25, 9, 30),
]


class TestResultInvariants:
    """Properties every result must satisfy."""

    @pytest.mark.parametrize("holidays", HOLIDAY_SETS)
    @pytest.mark.parametrize("trial_date", TRIAL_DATES)
    def test_track_shape(self, trial_date, holidays):
        """Ten strictly increasing business days, the first being the deadline."""
        result = calculate_deadline(trial_date, holidays)
        track = result.business_days_track

        assert len(track) == 10
        assert all(earlier < later for earlier, later in zip(track, track[1:]))
        assert all(not is_non_business_day(day, holidays) for day in track)
        assert result.theoretical_deadline == track[0]
        assert track[-1] < result.trial_date

    @pytest.mark.parametrize("holidays", HOLIDAY_SETS)
    @pytest.mark.parametrize("trial_date", TRIAL_DATES)
    def test_grace_day(self, trial_date, holidays):
        """The grace day is the first business day after the deadline."""
        result = calculate_deadline(trial_date, holidays)

        assert result.prorrogue_date > result.theoretical_deadline
        assert not is_non_business_day(result.prorrogue_date, holidays)

        day = result.theoretical_deadline + timedelta(days=1)
        while day < result.prorrogue_date:
            assert is_non_business_day(day, holidays)
            day += timedelta(days=1)

    def test_idempotent(self):
        """Identical inputs give identical outputs."""
        holidays = frozenset({date(2026, 2, 12), date(2026, 2, 19)})

        assert calculate_deadline(TRIAL, holidays) == calculate_deadline(TRIAL, holidays)

    def test_result_is_frozen(self):
        """Results cannot be modified after computation."""
        result = calculate_deadline(TRIAL, set())

        with pytest.raises(Exception):
            result.prorrogue_date = date(2026, 2, 20)


class TestPathologicalInput:
    """Holiday sets that leave nothing to count."""

    def test_every_day_is_a_holiday(self):
        """A wide all-holiday window raises instead of looping forever."""
        holidays = {TRIAL + timedelta(days=i) for i in range(-800, 800)}

        with pytest.raises(UnboundedSearchError) as exc_info:
            calculate_deadline(TRIAL, holidays)

        assert exc_info.value.walk == "backward"

    def test_trial_at_start_of_calendar(self):
        """A valid trial date with too little calendar before it raises UnboundedSearchError."""
        with pytest.raises(UnboundedSearchError) as exc_info:
            calculate_deadline("0001-01-05", set())

        assert exc_info.value.walk == "backward"
        assert exc_info.value.start == date(1, 1, 5)

    def test_custom_cap(self):
        """The cap can be tightened by the caller."""
        holidays = {TRIAL - timedelta(days=i) for i in range(1, 40)}

        with pytest.raises(UnboundedSearchError):
            calculate_deadline(TRIAL, holidays, max_search_days=30)

        # A larger cap finds the business days beyond the holiday run
        result = calculate_deadline(TRIAL, holidays, max_search_days=120)
        assert result.theoretical_deadline < TRIAL - timedelta(days=39)


class TestParseTrialDate:
    """Tests for trial date parsing."""

    @pytest.mark.parametrize("value", ["2026-02-26", "26/02/2026", "26.02.2026", " 2026-02-26 "])
    def test_accepted_formats(self, value):
        assert parse_trial_date(value) == TRIAL

    def test_datetime_is_truncated(self):
        assert parse_trial_date(datetime(2026, 2, 26, 10, 0)) == TRIAL

    @pytest.mark.parametrize("value", ["", "not-a-date", "2026-02-30", "02/26/2026", None])
    def test_invalid(self, value):
        with pytest.raises(InvalidTrialDateError):
            parse_trial_date(value)

    def test_calculate_rejects_invalid_trial_date(self):
        """No computation happens with an unreadable trial date."""
        with pytest.raises(InvalidTrialDateError):
            calculate_deadline("mañana", set())

    def test_calculate_accepts_string(self):
        result = calculate_deadline("26/02/2026", set())
        assert result.theoretical_deadline == date(2026, 2, 12)
