"""
Initializes the Configuration package.

This module provides centralized access to all application settings,
constants, and configuration values.
"""

from .RegexHistoryConfig import RegexHistoryConfig
from .GlobalConfig import RegularExpressions
from .AppSettings import AppSettings

__all__ = [
    "RegexHistoryConfig",
    "RegularExpressions",
    "AppSettings",
]
