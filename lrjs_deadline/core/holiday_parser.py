"""
Permissive parsing of free-text holiday lists.

Lines that are not a YYYY-MM-DD calendar date are skipped, never reported as
errors: the input usually comes from users or from a language model.
"""

import logging
import re
from datetime import date
from typing import Iterable, Optional, Union

from lrjs_deadline.data.schemas import Holiday, HolidaySet, RawHolidayText

logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_holiday_line(line: str) -> Optional[date]:
    """
    Parse a single line into a date.

    Args:
        line: Candidate line, surrounding whitespace allowed.

    Returns:
        The date, or None if the line is not a valid YYYY-MM-DD date.
    """
    candidate = line.strip()
    if not ISO_DATE_PATTERN.fullmatch(candidate):
        return None
    try:
        return date.fromisoformat(candidate)
    except ValueError:
        # Well-formed but impossible, e.g. 2026-02-30
        return None


def parse_holidays(raw: Union[RawHolidayText, str]) -> HolidaySet:
    """
    Convert raw holiday text into a set of dates.

    Args:
        raw: RawHolidayText or plain string with one date per line.

    Returns:
        Frozen set of the valid dates found.
    """
    if isinstance(raw, str):
        raw = RawHolidayText(text=raw)

    result = set()
    skipped = 0
    for line in raw.lines():
        if not line:
            continue
        parsed = parse_holiday_line(line)
        if parsed is None:
            skipped += 1
            logger.debug(f"Ignoring malformed holiday line: {line!r}")
            continue
        result.add(parsed)

    if skipped:
        logger.debug(f"Skipped {skipped} malformed holiday line(s)")
    return frozenset(result)


def holidays_to_text(holidays: Iterable[Holiday]) -> str:
    """Render named holidays as raw text, one ISO date per line."""
    return "\n".join(h.holiday_date.isoformat() for h in holidays)
