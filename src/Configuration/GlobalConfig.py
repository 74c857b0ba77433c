
class RegularExpressions:
    """Collection of regular expressions used throughout the application."""

    WORD_SPLIT_REGEX: str = r'\W+'
    """Regex for splitting text into words on runs of non-word characters."""

    WHITESPACE_REGEX: str = r'\s+'
    """Regex for splitting text on runs of whitespace."""
