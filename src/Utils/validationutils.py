from typing import Optional

from RegexHistory.Exceptions import InvalidArgument


def require_not_none(value, name: str):
    """
    Check that a required argument was supplied.
    
    Args:
        value: The argument value
        name: The argument name, used in the error message
        
    Returns:
        The value unchanged
        
    Raises:
        InvalidArgument: If the value is None
    """
    if value is None:
        raise InvalidArgument(f"{name} cannot be None")
    return value


def require_positive(value: int, name: str) -> int:
    """Check that an integer argument is greater than zero."""
    if value is None or value <= 0:
        raise InvalidArgument(f"{name} must be greater than 0, got {value}")
    return value


def require_non_blank(value: Optional[str], name: str) -> str:
    """Check that a string argument is neither None nor whitespace only."""
    if value is None or not value.strip():
        raise InvalidArgument(f"{name} cannot be None or empty")
    return value
