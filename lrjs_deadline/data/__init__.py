"""
Data models and schemas for the LRJS deadline calculator.
"""

from lrjs_deadline.data.schemas import (
    Comunidad,
    Config,
    DeadlineReport,
    DeadlineRequest,
    DeadlineResult,
    Holiday,
    HolidaySet,
    HolidaySource,
    LocationResult,
    RawHolidayText,
)

__all__ = [
    "Comunidad",
    "Config",
    "DeadlineReport",
    "DeadlineRequest",
    "DeadlineResult",
    "Holiday",
    "HolidaySet",
    "HolidaySource",
    "LocationResult",
    "RawHolidayText",
]
