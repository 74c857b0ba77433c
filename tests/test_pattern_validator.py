"""
Unit tests for pattern validation.
"""

import unittest

from RegexHistory.Exceptions import InvalidArgument, InvalidPattern, MissingPattern
from RegexHistory.PatternValidator import compile_pattern, is_valid_lenient, is_valid_strict


class TestPatternValidator(unittest.TestCase):
    """Test cases for strict and lenient validation."""
    
    def test_strict_accepts_valid_pattern(self):
        """Test that a compilable pattern is reported valid."""
        self.assertTrue(is_valid_strict(r"\d+"))
        self.assertTrue(is_valid_strict("[a-z]+@example\\.com"))
    
    def test_strict_rejects_syntax_error(self):
        """Test that an unterminated class raises InvalidPattern with the diagnostic."""
        with self.assertRaises(InvalidPattern) as ctx:
            is_valid_strict("[a-z")
        
        error = ctx.exception
        self.assertNotIsInstance(error, MissingPattern)
        self.assertEqual(error.pattern, "[a-z")
        self.assertIn("unterminated character set", error.diagnostic)
        self.assertEqual(error.position, 0)
        self.assertIn("[a-z", str(error))
    
    def test_strict_rejects_missing_pattern(self):
        """Test that None and blank patterns fail with the distinct MissingPattern kind."""
        for pattern in (None, "", "   "):
            with self.assertRaises(MissingPattern):
                is_valid_strict(pattern)
    
    def test_missing_pattern_is_not_invalid_argument(self):
        """Test that pattern errors and argument errors stay separate kinds."""
        with self.assertRaises(MissingPattern) as ctx:
            is_valid_strict("")
        self.assertNotIsInstance(ctx.exception, InvalidArgument)
    
    def test_lenient_never_raises(self):
        """Test that lenient validation answers False instead of raising."""
        self.assertTrue(is_valid_lenient("a|b"))
        self.assertFalse(is_valid_lenient(None))
        self.assertFalse(is_valid_lenient(""))
        self.assertFalse(is_valid_lenient("   "))
        self.assertFalse(is_valid_lenient("(unclosed"))
        self.assertFalse(is_valid_lenient("*leading"))
    
    def test_oversized_repeat_count_is_invalid(self):
        """Test that a repeat count the engine cannot hold is an invalid pattern."""
        with self.assertRaises(InvalidPattern) as ctx:
            is_valid_strict("a{4294967296}")
        self.assertEqual(ctx.exception.pattern, "a{4294967296}")
        self.assertFalse(is_valid_lenient("a{4294967296}"))
    
    def test_compile_pattern_returns_compiled(self):
        """Test that the compiled pattern is usable."""
        compiled = compile_pattern(r"(\w+)@")
        self.assertEqual(compiled.search("me@host").group(1), "me")


if __name__ == "__main__":
    unittest.main()
