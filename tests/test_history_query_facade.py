"""
Unit tests for the history query façade.
"""

import unittest

from clock import FakeClock
from RegexHistory.Exceptions import InvalidArgument, InvalidPattern
from RegexHistory.HistoryQueryFacade import HistoryQueryFacade
from RegexHistory.Models import HistoryChange, PatternHistoryEntry
from RegexHistory.PatternHistoryStore import PatternHistoryStore


class TestHistoryQueryFacade(unittest.TestCase):
    """Test cases for the HistoryQueryFacade class."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.clock = FakeClock()
        self.facade = HistoryQueryFacade(PatternHistoryStore(clock=self.clock))
        self.events = []
        self.facade.subscribe(lambda change, entry: self.events.append((change, entry)))
    
    def test_history_accumulates_across_operations(self):
        """Test that match and replace record into the same history."""
        self.assertEqual(self.facade.record_and_match(r"\d+", "abc123def456"), ["123", "456"])
        self.clock.advance()
        self.assertEqual(self.facade.record_and_replace(r"\d+", "a1b2", "#"), "a#b#")
        
        entry = self.facade.get_history(r"\d+")
        self.assertEqual(entry.usage_count, 2)
        self.assertIs(self.facade.matcher.store, self.facade.store)
    
    def test_recent_and_search_delegate(self):
        """Test that retrieval goes through to the store."""
        self.facade.record_and_match("cat", "concatenate")
        self.clock.advance()
        self.facade.record_and_match("dog", "hotdog")
        
        self.assertEqual([e.pattern for e in self.facade.recent_history(1)], ["dog"])
        self.assertEqual([e.pattern for e in self.facade.search_history("CA")], ["cat"])
        with self.assertRaises(InvalidArgument):
            self.facade.recent_history(0)
        with self.assertRaises(InvalidArgument):
            self.facade.search_history(" ")
    
    def test_most_used_and_last_used(self):
        """Test ranking queries exposed on the façade."""
        self.facade.record_and_match("a", "aaa")
        self.facade.record_and_match("a", "aaa")
        self.clock.advance()
        self.facade.record_and_match("b", "bbb")
        
        self.assertEqual([e.pattern for e in self.facade.most_used()], ["a"])
        self.assertEqual(self.facade.last_used().pattern, "b")
    
    def test_listeners_notified_on_record(self):
        """Test that each successful recording notifies listeners."""
        self.facade.record_and_match("a", "a")
        self.facade.record_and_replace("a", "a", "b")
        self.facade.record_and_locate("a", "a")
        
        self.assertEqual([c for c, _ in self.events], [HistoryChange.RECORDED] * 3)
        self.assertEqual([e.usage_count for _, e in self.events], [1, 2, 3])
    
    def test_invalid_pattern_does_not_notify(self):
        """Test that fail-soft calls with invalid patterns change nothing."""
        self.assertEqual(self.facade.record_and_match("[a-z", "test"), [])
        self.assertIsNone(self.facade.record_and_replace("[a-z", "test", "x"))
        
        self.assertEqual(self.events, [])
        self.assertEqual(len(self.facade.store), 0)
    
    def test_remove_and_clear(self):
        """Test removal and clearing, including their notifications."""
        self.facade.record_and_match("a", "a")
        self.facade.record_and_match("b", "b")
        self.events.clear()
        
        self.assertIsNone(self.facade.remove_history("nonexistent"))
        self.assertEqual(self.events, [])
        
        removed = self.facade.remove_history("a")
        self.assertEqual(removed.pattern, "a")
        self.assertEqual(self.events, [(HistoryChange.REMOVED, removed)])
        
        self.facade.clear_history()
        self.assertEqual(self.events[-1], (HistoryChange.CLEARED, None))
        self.assertEqual(len(self.facade.store), 0)
    
    def test_add_history(self):
        """Test explicit add, strict on invalid patterns."""
        entry = PatternHistoryEntry(pattern="z+", usage_count=4, last_used_at=self.clock.now)
        self.facade.add_history("z+", entry)
        
        self.assertIs(self.facade.get_history("z+"), entry)
        self.assertEqual(self.events, [(HistoryChange.ADDED, entry)])
        
        bad = PatternHistoryEntry(pattern="(", last_used_at=self.clock.now)
        with self.assertRaises(InvalidPattern):
            self.facade.add_history("(", bad)
        self.assertEqual(len(self.events), 1)
    
    def test_unsubscribe(self):
        """Test that an unsubscribed listener is no longer called."""
        calls = []
        listener = lambda change, entry: calls.append(change)
        self.facade.subscribe(listener)
        self.facade.record_and_match("a", "a")
        self.facade.unsubscribe(listener)
        self.facade.record_and_match("a", "a")
        
        self.assertEqual(calls, [HistoryChange.RECORDED])
    
    def test_history_table(self):
        """Test that the display table lists entries most recent first."""
        empty = self.facade.history_table()
        self.assertTrue(empty.empty)
        self.assertEqual(list(empty.columns), ["pattern", "usage_count", "last_used_at"])
        
        self.facade.record_and_match("a", "a")
        self.clock.advance()
        self.facade.record_and_match("b", "b")
        self.facade.record_and_match("b", "b")
        
        table = self.facade.history_table()
        self.assertEqual(table["pattern"].tolist(), ["b", "a"])
        self.assertEqual(table["usage_count"].tolist(), [2, 1])
        self.assertEqual(len(self.facade.history_table(limit=1)), 1)


if __name__ == "__main__":
    unittest.main()
