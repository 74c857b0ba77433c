"""
Regex helpers that do not touch pattern history.

Every helper validates its pattern strictly and raises InvalidPattern for a
pattern that does not compile. None input text raises InvalidArgument.
"""

from typing import List, Optional

from RegexHistory.PatternValidator import compile_pattern

from .validationutils import require_not_none


def full_match(pattern: str, text: str) -> bool:
    """Return True if the whole text matches the pattern."""
    require_not_none(text, "text")
    return compile_pattern(pattern).fullmatch(text) is not None


def find_all_matches(pattern: str, text: str) -> List[str]:
    """
    Find every non-overlapping match, left to right.
    
    Args:
        pattern: The regex source text
        text: The text to scan
        
    Returns:
        The matched substrings (whole match, not groups)
    """
    require_not_none(text, "text")
    return [m.group(0) for m in compile_pattern(pattern).finditer(text)]


def find_first_match(pattern: str, text: str) -> Optional[str]:
    """Return the first matched substring, or None if nothing matches."""
    require_not_none(text, "text")
    match = compile_pattern(pattern).search(text)
    return match.group(0) if match else None


def replace_all(pattern: str, text: str, replacement: str) -> str:
    """
    Replace every match with the replacement text.
    
    The replacement is inserted literally; backslashes and group references
    in it are not expanded.
    """
    require_not_none(text, "text")
    require_not_none(replacement, "replacement")
    return compile_pattern(pattern).sub(lambda _m: replacement, text)


def split(pattern: str, text: str) -> List[str]:
    """Split the text around matches of the pattern."""
    require_not_none(text, "text")
    return compile_pattern(pattern).split(text)


def count_matches(pattern: str, text: str) -> int:
    require_not_none(text, "text")
    return sum(1 for _ in compile_pattern(pattern).finditer(text))
