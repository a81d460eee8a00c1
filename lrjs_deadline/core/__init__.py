"""
Core business logic for LRJS deadline calculation.
"""

from lrjs_deadline.core.business_days import (
    find_nth_business_day_before,
    is_non_business_day,
    next_business_day_after,
)
from lrjs_deadline.core.calculator import DeadlineCalculator
from lrjs_deadline.core.deadline import calculate_deadline, parse_trial_date
from lrjs_deadline.core.errors import (
    DeadlineError,
    HolidayDiscoveryError,
    InvalidTrialDateError,
    UnboundedSearchError,
)
from lrjs_deadline.core.holiday_discovery import HolidayDiscovery, OllamaClient
from lrjs_deadline.core.holiday_parser import parse_holidays
from lrjs_deadline.core.holiday_provider import HolidayProvider
from lrjs_deadline.core.location_resolver import LocationResolver

__all__ = [
    "DeadlineCalculator",
    "DeadlineError",
    "HolidayDiscovery",
    "HolidayDiscoveryError",
    "HolidayProvider",
    "InvalidTrialDateError",
    "LocationResolver",
    "OllamaClient",
    "UnboundedSearchError",
    "calculate_deadline",
    "find_nth_business_day_before",
    "is_non_business_day",
    "next_business_day_after",
    "parse_holidays",
    "parse_trial_date",
]
