"""
Filing deadline under Art. 82.5 LRJS with the grace day of Art. 45 LRJS.

The ordinary deadline is the 10th business day before the trial (until
23:59). Filing stays valid on the next business day until 15:00.
"""

from datetime import date, datetime, time
from typing import AbstractSet, Union

from lrjs_deadline.core.business_days import (
    DEFAULT_MAX_SEARCH_DAYS,
    find_nth_business_day_before,
    next_business_day_after,
    to_calendar_date,
)
from lrjs_deadline.core.errors import InvalidTrialDateError
from lrjs_deadline.data.schemas import DeadlineResult

BUSINESS_DAYS_BEFORE_TRIAL = 10
GRACE_PERIOD_CUTOFF = time(15, 0)

TRIAL_DATE_FORMATS = ["%Y-%m-%d", "%d/%m/%Y", "%d.%m.%Y"]


def parse_trial_date(value: Union[str, date, datetime]) -> date:
    """
    Read a trial date in one of the accepted formats.

    Args:
        value: Date string (YYYY-MM-DD, DD/MM/YYYY or DD.MM.YYYY), date or datetime.

    Returns:
        The calendar date.

    Raises:
        InvalidTrialDateError: If the value is not a recognisable date.
    """
    if isinstance(value, (date, datetime)):
        return to_calendar_date(value)
    if not isinstance(value, str):
        raise InvalidTrialDateError(value)

    text = value.strip()
    for fmt in TRIAL_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InvalidTrialDateError(value)


def calculate_deadline(
    trial_date: Union[str, date, datetime],
    holidays: AbstractSet[date],
    max_search_days: int = DEFAULT_MAX_SEARCH_DAYS,
) -> DeadlineResult:
    """
    Compute the theoretical deadline and the grace day for a trial.

    Args:
        trial_date: Date of the trial.
        holidays: Non-business days beyond weekends.
        max_search_days: Iteration cap for each business-day walk.

    Returns:
        DeadlineResult with both deadlines and the counted business days.

    Raises:
        InvalidTrialDateError: If trial_date cannot be parsed.
        UnboundedSearchError: If a walk exceeds max_search_days.
    """
    trial = parse_trial_date(trial_date)

    theoretical, track = find_nth_business_day_before(
        trial, BUSINESS_DAYS_BEFORE_TRIAL, holidays, max_search_days
    )
    prorrogue = next_business_day_after(theoretical, holidays, max_search_days)

    return DeadlineResult(
        trial_date=trial,
        theoretical_deadline=theoretical,
        prorrogue_date=prorrogue,
        business_days_track=track,
        grace_cutoff=GRACE_PERIOD_CUTOFF,
    )
