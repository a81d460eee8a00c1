"""
Console output formatting.
"""

from lrjs_deadline.output.formatter import ConsoleFormatter, format_long_date

__all__ = ["ConsoleFormatter", "format_long_date"]
