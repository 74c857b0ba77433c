"""
Data models for pattern history tracking.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware timestamp to naive local time, as returned by datetime.now()."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class PatternHistoryEntry(BaseModel):
    """Usage record for a single regex pattern, keyed by its exact source text."""
    model_config = ConfigDict(validate_assignment=True)

    pattern: str = Field(..., min_length=1, frozen=True, description="The regex source text.")
    usage_count: int = Field(1, ge=1, description="Number of times the pattern was recorded.")
    last_used_at: datetime = Field(..., description="When the pattern was last recorded, in naive local time.")

    @field_validator("last_used_at")
    @classmethod
    def _naive_timestamp(cls, value: datetime) -> datetime:
        return to_local_naive(value)

    def increment_usage(self, now: datetime) -> None:
        """
        Count one more use of the pattern.

        Args:
            now: The current time. The timestamp never moves backwards, so an
                 earlier value than the stored one leaves it unchanged.
        """
        now = to_local_naive(now)
        self.usage_count += 1
        if now > self.last_used_at:
            self.last_used_at = now


class MatchResult(BaseModel):
    """A single match with its position in the input text."""
    text: str
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    pattern: str


class HistoryChange(str, Enum):
    """Kinds of history mutation announced to façade listeners."""
    RECORDED = "recorded"
    ADDED = "added"
    REMOVED = "removed"
    CLEARED = "cleared"
