"""
Utility functions for the regex history tool.

This module provides utility functions for logging, argument validation,
non-recording regex helpers and text statistics.
"""

from .logging import setup_logging
from .validationutils import require_not_none, require_positive, require_non_blank

__all__ = ["setup_logging", "require_not_none", "require_positive", "require_non_blank"]
