"""
Holiday provider using the holidays library for Spain and its communities.
"""

import logging
from datetime import date
from typing import Dict, FrozenSet, List, Optional

import holidays

from lrjs_deadline.data.schemas import Comunidad, Holiday, HolidaySource

logger = logging.getLogger(__name__)


class HolidayProvider:
    """Provides national and regional holidays for Spain."""

    def __init__(self, language: str = "es"):
        """
        Initialize the holiday provider.

        Args:
            language: Language for holiday names ('es' or 'en_US').
        """
        self.language = language
        self._cache: Dict[tuple, List[Holiday]] = {}

    def get_holidays_for_range(
        self, start: date, end: date, comunidad: Optional[Comunidad] = None
    ) -> List[Holiday]:
        """
        Get all holidays within a date range.

        Args:
            start: Start date of the range.
            end: End date of the range.
            comunidad: Autonomous community, or None for national holidays only.

        Returns:
            List of Holiday objects within the range, sorted by date.
        """
        cache_key = (start, end, comunidad, self.language)
        if cache_key in self._cache:
            return self._cache[cache_key]

        years = set(range(start.year, end.year + 1))
        es_holidays = holidays.Spain(
            subdiv=comunidad.value if comunidad else None,
            language=self.language,
            years=years,
        )
        national = holidays.Spain(years=years)

        result = [
            Holiday(
                holiday_date=day,
                name=name,
                source=HolidaySource.STATIC,
                is_national=day in national,
            )
            for day, name in sorted(es_holidays.items())
            if start <= day <= end
        ]

        logger.debug(
            f"Static calendar {comunidad.value if comunidad else 'ES'}: "
            f"{len(result)} holidays between {start} and {end}"
        )
        self._cache[cache_key] = result
        return result

    def get_holiday_dates(
        self, start: date, end: date, comunidad: Optional[Comunidad] = None
    ) -> FrozenSet[date]:
        """
        Get the holiday dates within a range.

        Args:
            start: Start date of the range.
            end: End date of the range.
            comunidad: Autonomous community, or None for national holidays only.

        Returns:
            Frozen set of dates that are holidays.
        """
        return frozenset(h.holiday_date for h in self.get_holidays_for_range(start, end, comunidad))

    def is_holiday(self, check_date: date, comunidad: Optional[Comunidad] = None) -> bool:
        """Check if a specific date is a holiday."""
        return len(self.get_holidays_for_range(check_date, check_date, comunidad)) > 0

    def get_holidays_for_year(self, year: int, comunidad: Optional[Comunidad] = None) -> List[Holiday]:
        """
        Get all holidays for a specific year.

        Args:
            year: Year to get holidays for.
            comunidad: Autonomous community, or None for national holidays only.

        Returns:
            List of Holiday objects for the year.
        """
        return self.get_holidays_for_range(date(year, 1, 1), date(year, 12, 31), comunidad)

    def clear_cache(self) -> None:
        """Clear the holiday cache."""
        self._cache.clear()
