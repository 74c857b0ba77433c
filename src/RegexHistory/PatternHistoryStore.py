"""
In-memory pattern history store.

This module owns the mapping from pattern text to its usage record. It is
the only component that creates, updates or deletes history entries.
"""

import logging
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional

from Utils.validationutils import require_non_blank, require_not_none, require_positive

from .Exceptions import InvalidArgument
from .Models import PatternHistoryEntry
from .PatternValidator import is_valid_lenient, is_valid_strict


class PatternHistoryStore:
    """
    Mapping of pattern text to PatternHistoryEntry.
    
    Entries are keyed by the exact, case-sensitive pattern string. The store
    is not thread-safe; callers sharing an instance across threads must
    serialize access themselves.
    """
    
    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        """
        Initialize an empty store.
        
        Args:
            clock: Callable returning the current time (default: datetime.now)
        """
        self.logger = logging.getLogger(__name__)
        self._clock = clock
        self._entries: Dict[str, PatternHistoryEntry] = {}
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __contains__(self, pattern: object) -> bool:
        return pattern in self._entries
    
    def _upsert(self, pattern: str) -> PatternHistoryEntry:
        now = self._clock()
        entry = self._entries.get(pattern)
        if entry is None:
            entry = PatternHistoryEntry(pattern=pattern, last_used_at=now)
            self._entries[pattern] = entry
            self.logger.debug(f"Created history entry for pattern: {pattern}")
        else:
            entry.increment_usage(now)
            self.logger.debug(f"Updated history entry for pattern: {pattern} (count={entry.usage_count})")
        return entry
    
    def record_usage(self, pattern: str) -> PatternHistoryEntry:
        """
        Record one use of a pattern, validating it strictly first.
        
        Args:
            pattern: The regex source text
            
        Returns:
            The created or updated entry
            
        Raises:
            InvalidPattern: If the pattern is blank or does not compile. The
                store is left unchanged.
        """
        is_valid_strict(pattern)
        return self._upsert(pattern)
    
    def try_record_usage(self, pattern: Optional[str]) -> Optional[PatternHistoryEntry]:
        """Record one use of a pattern, returning None without changes if it is invalid."""
        if not is_valid_lenient(pattern):
            self.logger.debug(f"Skipped recording invalid pattern: {pattern!r}")
            return None
        return self._upsert(pattern)
    
    def add(self, pattern: str, entry: PatternHistoryEntry) -> None:
        """
        Store a prepared entry under its pattern, replacing any existing one.
        
        An existing entry is never rolled back: the stored entry keeps the
        larger usage count and the later timestamp of the two.
        
        Args:
            pattern: The regex source text used as the key
            entry: The entry to store; its pattern must equal `pattern`
            
        Raises:
            InvalidArgument: If the entry is None or its pattern differs from the key
            InvalidPattern: If the pattern is blank or does not compile
        """
        require_not_none(entry, "entry")
        is_valid_strict(pattern)
        if entry.pattern != pattern:
            raise InvalidArgument(
                f"entry pattern '{entry.pattern}' does not match key '{pattern}'"
            )
        existing = self._entries.get(pattern)
        if existing is not None:
            entry.usage_count = max(entry.usage_count, existing.usage_count)
            entry.last_used_at = max(entry.last_used_at, existing.last_used_at)
        self._entries[pattern] = entry
        self.logger.debug(f"Added history entry for pattern: {pattern}")
    
    def get(self, pattern: str) -> Optional[PatternHistoryEntry]:
        return self._entries.get(pattern)
    
    def remove(self, pattern: str) -> Optional[PatternHistoryEntry]:
        """Delete the entry for a pattern. Returns the removed entry, or None if absent."""
        entry = self._entries.pop(pattern, None)
        if entry is not None:
            self.logger.debug(f"Removed history entry for pattern: {pattern}")
        return entry
    
    def list_all(self) -> List[PatternHistoryEntry]:
        return list(self._entries.values())
    
    def as_mapping(self) -> Mapping[str, PatternHistoryEntry]:
        """Read-only view of the underlying pattern-to-entry mapping."""
        return MappingProxyType(self._entries)
    
    def clear(self) -> None:
        self.logger.debug(f"Clearing {len(self._entries)} history entries")
        self._entries.clear()
    
    def _by_recency(self, entries) -> List[PatternHistoryEntry]:
        return sorted(entries, key=lambda e: e.last_used_at, reverse=True)
    
    def recent(self, limit: int) -> List[PatternHistoryEntry]:
        """
        Get the most recently used entries.
        
        Args:
            limit: Maximum number of entries to return; larger than the store
                   size returns every entry
            
        Returns:
            Entries sorted by last use, most recent first
            
        Raises:
            InvalidArgument: If limit is not greater than 0
        """
        require_positive(limit, "limit")
        return self._by_recency(self._entries.values())[:limit]
    
    def search(self, substring: str) -> List[PatternHistoryEntry]:
        """
        Find entries whose pattern contains a substring, ignoring case.
        
        Args:
            substring: The text to look for
            
        Returns:
            Matching entries sorted by last use, most recent first
            
        Raises:
            InvalidArgument: If substring is None or blank
        """
        require_non_blank(substring, "substring")
        term = substring.lower()
        hits = [e for e in self._entries.values() if term in e.pattern.lower()]
        return self._by_recency(hits)
    
    def most_used(self) -> List[PatternHistoryEntry]:
        """All entries sharing the highest usage count; empty if the store is empty."""
        if not self._entries:
            return []
        top = max(e.usage_count for e in self._entries.values())
        return [e for e in self._entries.values() if e.usage_count == top]
    
    def last_used(self) -> Optional[PatternHistoryEntry]:
        """The entry with the latest timestamp, or None if the store is empty."""
        if not self._entries:
            return None
        return max(self._entries.values(), key=lambda e: e.last_used_at)
