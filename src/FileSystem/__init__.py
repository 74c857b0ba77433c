"""
Filesystem abstraction module for the regex history tool.

This module provides a filesystem abstraction layer that supplies input text
to the regex tester from different storage backends.
"""

from .base import FileSystem
from .filedata import FileData
from .local import LocalFileSystem

__all__ = ["FileSystem", "FileData", "LocalFileSystem"]
