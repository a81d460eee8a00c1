"""
Business-day stepping over a weekend + holiday calendar.

Weekends are always Saturday and Sunday; the host locale is never consulted.
"""

import logging
from datetime import date, datetime, timedelta
from typing import AbstractSet, List, Tuple, Union

from lrjs_deadline.core.errors import UnboundedSearchError

logger = logging.getLogger(__name__)

# date.weekday(): Monday == 0 ... Sunday == 6
WEEKEND_DAYS = frozenset({5, 6})

DEFAULT_MAX_SEARCH_DAYS = 366

ONE_DAY = timedelta(days=1)


def to_calendar_date(value: Union[date, datetime]) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_before(day: date, days: int) -> date:
    """Step back the given number of days, stopping at date.min."""
    try:
        return day - timedelta(days=days)
    except OverflowError:
        return date.min


def is_non_business_day(day: Union[date, datetime], holidays: AbstractSet[date]) -> bool:
    """
    Check whether a day is a weekend day or a holiday.

    Args:
        day: Day to check; datetimes are truncated to their date.
        holidays: Non-business days beyond weekends.

    Returns:
        True if the day cannot be counted as a business day.
    """
    day = to_calendar_date(day)
    if day.weekday() in WEEKEND_DAYS:
        return True
    return day in holidays


def find_nth_business_day_before(
    trial_date: Union[date, datetime],
    n: int,
    holidays: AbstractSet[date],
    max_search_days: int = DEFAULT_MAX_SEARCH_DAYS,
) -> Tuple[date, List[date]]:
    """
    Walk backwards from the day before the trial, counting business days.

    Args:
        trial_date: Date of the trial. It is never counted itself.
        n: Number of business days to count.
        holidays: Non-business days beyond weekends.
        max_search_days: Maximum number of calendar days to inspect.

    Returns:
        Tuple of (nth business day, counted business days in ascending order).

    Raises:
        ValueError: If n is smaller than 1.
        UnboundedSearchError: If the cap or date.min is reached before n business days.
    """
    if n < 1:
        raise ValueError("n must be at least 1")

    start = to_calendar_date(trial_date)
    current = start
    track: List[date] = []

    for _ in range(max_search_days):
        if current == date.min:
            break
        current -= ONE_DAY
        if not is_non_business_day(current, holidays):
            track.append(current)
            if len(track) == n:
                track.reverse()
                return current, track

    logger.warning(
        f"Backward walk from {start.isoformat()} found {len(track)}/{n} business days "
        f"in {max_search_days} days"
    )
    raise UnboundedSearchError(
        "backward", max_search_days, start, context={"found": len(track), "needed": n}
    )


def next_business_day_after(
    day: Union[date, datetime],
    holidays: AbstractSet[date],
    max_search_days: int = DEFAULT_MAX_SEARCH_DAYS,
) -> date:
    """
    Find the first business day strictly after the given day.

    Args:
        day: Starting day (excluded).
        holidays: Non-business days beyond weekends.
        max_search_days: Maximum number of calendar days to inspect.

    Returns:
        The next business day.

    Raises:
        UnboundedSearchError: If no business day is found before the cap or date.max.
    """
    start = to_calendar_date(day)
    current = start

    for _ in range(max_search_days):
        if current == date.max:
            break
        current += ONE_DAY
        if not is_non_business_day(current, holidays):
            return current

    logger.warning(f"Forward walk from {start.isoformat()} found no business day in {max_search_days} days")
    raise UnboundedSearchError("forward", max_search_days, start)
