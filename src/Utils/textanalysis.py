"""
Simple statistics over loaded input text.
"""

import re
from collections import Counter

from Configuration import RegularExpressions

from .validationutils import require_not_none, require_positive


def word_frequency(text: str) -> Counter:
    """
    Count words in the text, ignoring case.
    
    Args:
        text: The text to analyse
        
    Returns:
        A Counter mapping each lower-cased word to its number of occurrences
    """
    require_not_none(text, "text")
    words = re.split(RegularExpressions.WORD_SPLIT_REGEX, text.lower())
    return Counter(word for word in words if word)


def summarize_text(text: str, word_limit: int) -> str:
    """Return the first word_limit whitespace-separated words followed by '...'."""
    require_not_none(text, "text")
    require_positive(word_limit, "word_limit")
    words = re.split(RegularExpressions.WHITESPACE_REGEX, text.strip())
    return " ".join(words[:word_limit]) + "..."
