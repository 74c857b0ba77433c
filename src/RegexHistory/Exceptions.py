"""
Exception types for the regex history core.

Strict operations raise these to the caller. Fail-soft operations swallow
InvalidPattern (and its subclasses) and return an empty or None result
instead. InvalidArgument is never swallowed.
"""

from typing import Optional


class RegexHistoryError(Exception):
    """Base class for all regex history errors."""


class InvalidPattern(RegexHistoryError, ValueError):
    """
    Raised when a pattern cannot be compiled by the regex engine.

    Attributes:
        pattern: The offending pattern text
        diagnostic: The syntax diagnostic reported by the engine
        position: Offset of the error in the pattern, if known
    """

    def __init__(self, pattern: Optional[str], diagnostic: str, position: Optional[int] = None) -> None:
        self.pattern = pattern
        self.diagnostic = diagnostic
        self.position = position
        super().__init__(f"Invalid regex '{pattern}': {diagnostic}")


class MissingPattern(InvalidPattern):
    """Raised when strict validation receives a None or blank pattern."""

    def __init__(self, pattern: Optional[str] = None) -> None:
        super().__init__(pattern, "pattern cannot be None or empty")


class InvalidArgument(RegexHistoryError, ValueError):
    """Raised for non-pattern precondition violations (limits, search terms, input text)."""
