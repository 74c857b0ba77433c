"""
Pattern validation against Python's regex engine.

This module wraps the compile step of the `re` module and exposes two
flavours of validation: a strict one that raises typed errors and a lenient
one that only answers yes or no.
"""

import logging
import re
from typing import Optional

from .Exceptions import InvalidPattern, MissingPattern

logger = logging.getLogger(__name__)


def _is_blank(pattern: Optional[str]) -> bool:
    return pattern is None or not pattern.strip()


def compile_pattern(pattern: Optional[str]) -> re.Pattern:
    """
    Compile a pattern, translating engine errors into InvalidPattern.

    Args:
        pattern: The regex source text

    Returns:
        The compiled pattern object

    Raises:
        MissingPattern: If the pattern is None or blank
        InvalidPattern: If the pattern fails to compile
    """
    if _is_blank(pattern):
        raise MissingPattern(pattern)
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(pattern, e.msg, e.pos) from e
    except (OverflowError, RecursionError) as e:
        # Oversized repeat counts and deeply nested groups fail outside re.error
        raise InvalidPattern(pattern, str(e)) from e


def is_valid_strict(pattern: Optional[str]) -> bool:
    """
    Validate a pattern, raising on failure.

    Args:
        pattern: The regex source text

    Returns:
        True if the pattern compiles

    Raises:
        MissingPattern: If the pattern is None or blank
        InvalidPattern: If the pattern fails to compile
    """
    compile_pattern(pattern)
    return True


def is_valid_lenient(pattern: Optional[str]) -> bool:
    """Return True if the pattern compiles, False for None, blank or invalid patterns."""
    try:
        compile_pattern(pattern)
    except InvalidPattern as e:
        logger.debug(f"Lenient validation rejected pattern: {e}")
        return False
    return True
