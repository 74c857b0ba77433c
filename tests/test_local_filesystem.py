"""
Unit tests for the local filesystem implementation.
"""

import os
import shutil
import tempfile
import unittest
from pathlib import Path

from FileSystem import FileSystem, LocalFileSystem
from RegexHistory.Exceptions import InvalidArgument


class TestLocalFileSystem(unittest.TestCase):
    """Test cases for the LocalFileSystem class."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.fs = LocalFileSystem()
        
        os.makedirs(os.path.join(self.temp_dir, "dir1"))
        
        self.text_path = os.path.join(self.temp_dir, "Notes.TXT")
        with open(self.text_path, "w", encoding="utf-8") as f:
            f.write("first line 123\nsecond line 456\nthird ünïcode line\n")
    
    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.temp_dir)
    
    def test_exists(self):
        """Test that existence is correctly determined."""
        self.assertTrue(self.fs.exists(self.text_path))
        self.assertTrue(self.fs.exists(Path(self.temp_dir) / "dir1"))
        self.assertFalse(self.fs.exists(os.path.join(self.temp_dir, "nonexistent.txt")))
    
    def test_read_text(self):
        """Test that the full contents are returned as a string."""
        content = self.fs.read_text(Path(self.text_path))
        self.assertTrue(content.startswith("first line 123\n"))
        self.assertIn("ünïcode", content)
    
    def test_read_text_missing_file(self):
        """Test that a missing file raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            self.fs.read_text(os.path.join(self.temp_dir, "nonexistent.txt"))
    
    def test_read_text_directory(self):
        """Test that a directory is not readable as text."""
        with self.assertRaises(FileNotFoundError):
            self.fs.read_text(os.path.join(self.temp_dir, "dir1"))
    
    def test_read_text_blank_path(self):
        """Test that a blank path raises InvalidArgument."""
        for path in (None, "", "  "):
            with self.assertRaises(InvalidArgument):
                self.fs.read_text(path)
    
    def test_file_info(self):
        """Test that file metadata is reported."""
        info = self.fs.file_info(self.text_path)
        
        self.assertEqual(info.file_name, "Notes.TXT")
        self.assertEqual(info.file_size, os.path.getsize(self.text_path))
        self.assertEqual(info.line_count, 3)
        self.assertEqual(info.extension, "txt")
        self.assertEqual(info.file_path, Path(self.text_path))
    
    def test_file_info_without_extension(self):
        """Test that a name without a dot has an empty extension."""
        path = os.path.join(self.temp_dir, "README")
        with open(path, "w", encoding="utf-8") as f:
            f.write("")
        
        info = self.fs.file_info(path)
        self.assertEqual(info.extension, "")
        self.assertEqual(info.line_count, 0)
    
    def test_is_a_file_system(self):
        """Test that the local implementation satisfies the FileSystem interface."""
        self.assertIsInstance(self.fs, FileSystem)
        self.assertTrue(self.fs.exists(self.temp_dir))


if __name__ == "__main__":
    unittest.main()
