"""
Configuration loading for the LRJS deadline calculator.
"""

from lrjs_deadline.config.manager import ConfigManager

__all__ = ["ConfigManager"]
