"""
Single entry point for UI collaborators.

The façade owns one PatternMatcher and the PatternHistoryStore it records
into, so that successive pattern executions accumulate in the same history.
Listeners can subscribe to be told about every history mutation, which
replaces binding the UI directly to entry fields.
"""

import logging
from typing import Callable, List, Optional

import pandas as pd

from Configuration import RegexHistoryConfig

from .Models import HistoryChange, MatchResult, PatternHistoryEntry
from .PatternHistoryStore import PatternHistoryStore
from .PatternMatcher import PatternMatcher

HistoryListener = Callable[[HistoryChange, Optional[PatternHistoryEntry]], None]


class HistoryQueryFacade:
    """Composes a matcher and its store behind the operations the UI needs."""
    
    def __init__(self, store: Optional[PatternHistoryStore] = None) -> None:
        """
        Initialize the façade.
        
        Args:
            store: The history store to use (default: a new, empty store)
        """
        self.logger = logging.getLogger(__name__)
        self.store = store if store is not None else PatternHistoryStore()
        self.matcher = PatternMatcher(self.store)
        self._listeners: List[HistoryListener] = []
    
    def subscribe(self, listener: HistoryListener) -> None:
        """Register a callable invoked as listener(change, entry) after each mutation."""
        self._listeners.append(listener)
    
    def unsubscribe(self, listener: HistoryListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
    
    def _notify(self, change: HistoryChange, entry: Optional[PatternHistoryEntry] = None) -> None:
        for listener in list(self._listeners):
            listener(change, entry)
    
    def _notify_recorded(self, pattern: str, count_before: int) -> None:
        entry = self.store.get(pattern)
        if entry is not None and entry.usage_count != count_before:
            self._notify(HistoryChange.RECORDED, entry)
    
    def _count(self, pattern: str) -> int:
        entry = self.store.get(pattern)
        return entry.usage_count if entry is not None else 0
    
    def record_and_match(self, pattern: str, input_text: str) -> List[str]:
        """Record the pattern and return its matches; empty for an invalid pattern."""
        before = self._count(pattern)
        matches = self.matcher.find_all_and_record(pattern, input_text)
        self._notify_recorded(pattern, before)
        return matches
    
    def record_and_replace(self, pattern: str, input_text: str, replacement: str) -> Optional[str]:
        """Record the pattern and return the replaced text; None for an invalid pattern."""
        before = self._count(pattern)
        result = self.matcher.find_and_replace(pattern, input_text, replacement)
        self._notify_recorded(pattern, before)
        return result
    
    def record_and_locate(self, pattern: str, input_text: str) -> List[MatchResult]:
        """Record the pattern and return its matches with their spans."""
        before = self._count(pattern)
        results = self.matcher.find_matches_with_positions(pattern, input_text)
        self._notify_recorded(pattern, before)
        return results
    
    def add_history(self, pattern: str, entry: PatternHistoryEntry) -> None:
        """Store an entry explicitly. Raises InvalidPattern or InvalidArgument on bad input."""
        self.store.add(pattern, entry)
        self._notify(HistoryChange.ADDED, entry)
    
    def get_history(self, pattern: str) -> Optional[PatternHistoryEntry]:
        return self.store.get(pattern)
    
    def recent_history(self, limit: int) -> List[PatternHistoryEntry]:
        return self.store.recent(limit)
    
    def search_history(self, substring: str) -> List[PatternHistoryEntry]:
        return self.store.search(substring)
    
    def most_used(self) -> List[PatternHistoryEntry]:
        return self.store.most_used()
    
    def last_used(self) -> Optional[PatternHistoryEntry]:
        return self.store.last_used()
    
    def remove_history(self, pattern: str) -> Optional[PatternHistoryEntry]:
        """Remove a pattern's entry. Returns it, or None if it was not stored."""
        entry = self.store.remove(pattern)
        if entry is not None:
            self._notify(HistoryChange.REMOVED, entry)
        return entry
    
    def clear_history(self) -> None:
        self.store.clear()
        self._notify(HistoryChange.CLEARED)
    
    def history_table(self, limit: Optional[int] = None) -> pd.DataFrame:
        """
        Build a display table of the history, most recent first.
        
        Args:
            limit: Maximum number of rows (default: every entry)
            
        Returns:
            A DataFrame with the columns listed in RegexHistoryConfig.HISTORY_TABLE_COLUMNS
        """
        columns = RegexHistoryConfig.HISTORY_TABLE_COLUMNS
        if len(self.store) == 0:
            return pd.DataFrame(columns=columns)
        entries = self.store.recent(limit if limit is not None else len(self.store))
        return pd.DataFrame([e.model_dump() for e in entries], columns=columns)
