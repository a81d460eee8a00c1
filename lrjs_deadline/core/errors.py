"""
Exception hierarchy for deadline computation and holiday collection.
"""

from datetime import date
from typing import Any, Dict, Optional


class DeadlineError(ValueError):
    """Base class for errors raised while computing a deadline."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class UnboundedSearchError(DeadlineError):
    """A business-day walk hit its cap or the edge of the date range."""

    def __init__(self, walk: str, cap: int, start: date, **kwargs):
        super().__init__(
            f"{walk.capitalize()} business-day search from {start.isoformat()} "
            f"gave up after {cap} calendar days; check the holiday list",
            **kwargs,
        )
        self.walk = walk
        self.cap = cap
        self.start = start


class InvalidTrialDateError(DeadlineError):
    """The trial date could not be read as a calendar date."""

    def __init__(self, value: Any, **kwargs):
        super().__init__(
            f"Invalid trial date: {value!r}. Use YYYY-MM-DD, DD/MM/YYYY or DD.MM.YYYY",
            **kwargs,
        )
        self.value = value


class HolidayDiscoveryError(DeadlineError):
    """Holiday discovery through the language model failed."""

    def __init__(self, message: str, location: Optional[str] = None, year: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.location = location
        self.year = year
