"""
Deadline calculator: collects holidays for a court and computes the deadline.
"""

import logging
from datetime import date
from typing import List, Optional

from lrjs_deadline.core.business_days import DEFAULT_MAX_SEARCH_DAYS, days_before
from lrjs_deadline.core.deadline import calculate_deadline, parse_trial_date
from lrjs_deadline.core.errors import HolidayDiscoveryError
from lrjs_deadline.core.holiday_discovery import HolidayDiscovery, OllamaClient, discovery_years
from lrjs_deadline.core.holiday_parser import holidays_to_text, parse_holidays
from lrjs_deadline.core.holiday_provider import HolidayProvider
from lrjs_deadline.core.location_resolver import LocationResolver
from lrjs_deadline.data.schemas import (
    Comunidad,
    Config,
    DeadlineReport,
    DeadlineRequest,
    Holiday,
    HolidaySource,
    LocationResult,
    RawHolidayText,
)

logger = logging.getLogger(__name__)

MANUAL_HOLIDAY_NAME = "Festivo adicional"


class DeadlineCalculator:
    """Computes LRJS filing deadlines from a trial date and a court location."""

    def __init__(
        self,
        holiday_provider: HolidayProvider,
        location_resolver: LocationResolver,
        holiday_discovery: Optional[HolidayDiscovery] = None,
        max_search_days: int = DEFAULT_MAX_SEARCH_DAYS,
    ):
        """
        Initialize the deadline calculator.

        Args:
            holiday_provider: Provider for the official holiday calendar.
            location_resolver: Resolver for location inputs.
            holiday_discovery: Optional model-based discovery of local holidays.
            max_search_days: Iteration cap for each business-day walk.
        """
        self.holiday_provider = holiday_provider
        self.location_resolver = location_resolver
        self.holiday_discovery = holiday_discovery
        self.max_search_days = max_search_days

    def calculate(self, request: DeadlineRequest) -> DeadlineReport:
        """
        Calculate the deadline for a given request.

        Args:
            request: DeadlineRequest with trial date, location and extra holidays.

        Returns:
            DeadlineReport with the computed deadlines and metadata.

        Raises:
            UnboundedSearchError: If the holidays leave no business days to count.
        """
        warnings: List[str] = []
        trial_date = request.trial_date

        # Resolve location to a community
        location: Optional[LocationResult] = None
        if request.location or request.comunidad:
            try:
                location = self.location_resolver.resolve(request.location, request.comunidad)
            except ValueError as e:
                warnings.append(f"{e} Only national holidays were applied.")
        comunidad = location.comunidad if location else None

        # Collect named holidays from every enabled source
        named: List[Holiday] = []
        if request.use_static_calendar:
            window_start = days_before(trial_date, self.max_search_days + 1)
            named.extend(self.holiday_provider.get_holidays_for_range(window_start, trial_date, comunidad))

        discovering = bool(request.use_discovery and request.location)
        if discovering and self.holiday_discovery is None:
            logger.debug("Holiday discovery requested but not configured")
            discovering = False

        discovered: List[Holiday] = []
        queried_years: List[int] = []
        pending_years = discovery_years(trial_date) if discovering else []

        while True:
            if pending_years:
                discovered.extend(self._discover(request.location, pending_years, warnings))
                queried_years.extend(pending_years)

            raw = RawHolidayText.join(holidays_to_text(named + discovered), request.extra_holidays)
            holiday_set = parse_holidays(raw)
            result = calculate_deadline(trial_date, holiday_set, self.max_search_days)

            # New holidays only push the walk further back, so this ends.
            reached = range(result.business_days_track[0].year, trial_date.year + 1)
            pending_years = [y for y in reached if y not in queried_years] if discovering else []
            if not pending_years:
                break

        named.extend(discovered)

        # Report what fell inside the counted window
        window_start = result.business_days_track[0]
        holidays_in_window = self._merge_named(named, holiday_set, window_start, trial_date)

        if location and location.confidence < 0.9:
            warnings.append(
                f"Location resolution confidence: {location.confidence:.0%}. "
                f"Check that {location.comunidad_name} is the court's community."
            )
        if not request.location and not request.comunidad:
            warnings.append("No location given: local and regional holidays were not applied.")
        if request.location and not discovered and not request.extra_holidays.strip():
            warnings.append("Local holidays of the court's municipality were not checked.")

        logger.info(
            f"Trial {trial_date.isoformat()}: deadline {result.theoretical_deadline.isoformat()}, "
            f"grace day {result.prorrogue_date.isoformat()}"
        )

        return DeadlineReport(
            result=result,
            location=location,
            holidays=holidays_in_window,
            holiday_count=len(holiday_set),
            warnings=warnings,
        )

    def calculate_simple(
        self,
        trial_date,
        location: str = None,
        comunidad: str = None,
        extra_holidays: str = "",
    ) -> DeadlineReport:
        """
        Simplified calculation method for CLI usage.

        Args:
            trial_date: Trial date as date or string.
            location: Optional place of the court.
            comunidad: Optional community code (e.g., 'MD', 'CT').
            extra_holidays: Additional holidays, one YYYY-MM-DD per line.

        Returns:
            DeadlineReport with the computed deadlines.
        """
        request = DeadlineRequest(
            trial_date=parse_trial_date(trial_date),
            location=location,
            comunidad=Comunidad(comunidad.upper()) if comunidad else None,
            extra_holidays=extra_holidays,
        )
        return self.calculate(request)

    def _discover(self, location: str, years: List[int], warnings: List[str]) -> List[Holiday]:
        found: List[Holiday] = []
        for year in years:
            try:
                found.extend(self.holiday_discovery.find_holidays(location, year))
            except HolidayDiscoveryError as e:
                logger.warning(str(e))
                warnings.append(f"Holiday discovery unavailable for {year}; local holidays may be missing.")
        return found

    @staticmethod
    def _merge_named(
        named: List[Holiday], holiday_set, start: date, end: date
    ) -> List[Holiday]:
        """One named entry per date in [start, end], manual dates included."""
        by_date = {}
        for holiday in named:
            if start <= holiday.holiday_date <= end:
                by_date.setdefault(holiday.holiday_date, holiday)
        for day in holiday_set:
            if start <= day <= end and day not in by_date:
                by_date[day] = Holiday(holiday_date=day, name=MANUAL_HOLIDAY_NAME, source=HolidaySource.MANUAL)
        return [by_date[d] for d in sorted(by_date)]


def create_calculator(config: Config) -> DeadlineCalculator:
    """
    Build a DeadlineCalculator from configuration.

    Args:
        config: Loaded configuration.

    Returns:
        Calculator with static calendar and, if enabled, holiday discovery.
    """
    discovery = None
    if config.discovery_enabled:
        client = OllamaClient(
            endpoint=config.ollama_endpoint,
            model=config.ollama_model,
            timeout=config.ollama_timeout,
            max_retries=config.ollama_max_retries,
        )
        discovery = HolidayDiscovery(client)

    return DeadlineCalculator(
        holiday_provider=HolidayProvider(language=config.holiday_language),
        location_resolver=LocationResolver(),
        holiday_discovery=discovery,
        max_search_days=config.max_search_days,
    )
