"""
Tests for Spanish date formatting.
"""

from datetime import date

from lrjs_deadline.output.formatter import format_long_date, format_short_date


def test_format_long_date():
    assert format_long_date(date(2026, 2, 13)) == "viernes, 13 de febrero de 2026"
    assert format_long_date(date(2026, 4, 1)) == "miércoles, 1 de abril de 2026"


def test_format_short_date():
    assert format_short_date(date(2026, 2, 12)) == "jue 12 feb"
