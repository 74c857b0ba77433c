"""
Pattern matching with usage recording.

This module runs find and replace operations and records each applied
pattern in a PatternHistoryStore. Invalid patterns degrade to an empty or
None result instead of raising.
"""

import logging
from typing import List, Optional

from Utils import regexutils
from Utils.validationutils import require_not_none

from .Exceptions import InvalidPattern
from .Models import MatchResult
from .PatternHistoryStore import PatternHistoryStore
from .PatternValidator import compile_pattern


class PatternMatcher:
    """
    Applies patterns to text and records them in a history store.
    
    Both find and replace are fail-soft: a pattern that does not validate is
    not recorded and produces an empty list or None. Missing input text is
    still a caller error and raises InvalidArgument.
    """
    
    def __init__(self, store: Optional[PatternHistoryStore] = None) -> None:
        """
        Initialize the matcher.
        
        Args:
            store: The history store to record usage in (default: a new, empty store)
        """
        self.logger = logging.getLogger(__name__)
        self.store = store if store is not None else PatternHistoryStore()
    
    def _record(self, pattern: str) -> bool:
        try:
            self.store.record_usage(pattern)
            return True
        except InvalidPattern as e:
            self.logger.warning(f"Ignoring invalid pattern: {e}")
            return False
    
    def find_all_and_record(self, pattern: str, input_text: str) -> List[str]:
        """
        Record the pattern and return all of its matches in the input.
        
        Args:
            pattern: The regex source text
            input_text: The text to scan
            
        Returns:
            Every non-overlapping match, left to right. Empty if nothing
            matches or the pattern is invalid.
            
        Raises:
            InvalidArgument: If input_text is None
        """
        require_not_none(input_text, "input_text")
        if not self._record(pattern):
            return []
        matches = regexutils.find_all_matches(pattern, input_text)
        self.logger.debug(f"Pattern {pattern!r} produced {len(matches)} matches")
        return matches
    
    def find_and_replace(self, pattern: str, input_text: str, replacement: str) -> Optional[str]:
        """
        Record the pattern and replace each of its matches with literal text.
        
        Args:
            pattern: The regex source text
            input_text: The text to transform; it is not modified
            replacement: Text inserted once per match
            
        Returns:
            The transformed text, or None if the pattern is invalid
            
        Raises:
            InvalidArgument: If input_text or replacement is None
        """
        require_not_none(input_text, "input_text")
        require_not_none(replacement, "replacement")
        if not self._record(pattern):
            return None
        return regexutils.replace_all(pattern, input_text, replacement)
    
    def find_matches_with_positions(self, pattern: str, input_text: str) -> List[MatchResult]:
        """Like find_all_and_record, but returns each match with its span."""
        require_not_none(input_text, "input_text")
        if not self._record(pattern):
            return []
        return [
            MatchResult(text=m.group(0), start=m.start(), end=m.end(), pattern=pattern)
            for m in compile_pattern(pattern).finditer(input_text)
        ]
