"""
Local filesystem implementation.

This module provides a filesystem implementation for the local file system.
"""

import logging
from pathlib import Path
from typing import Union

import fsspec

from Utils.validationutils import require_non_blank

from .base import FileSystem
from .filedata import FileData


class LocalFileSystem(FileSystem):
    """
    Implementation of FileSystem for the local file system.
    
    This class provides methods for interacting with the local file system.
    It uses fsspec for file access to ensure compatibility with the fsspec API.
    """
    
    def __init__(self) -> None:
        """Initialize the local file system."""
        self.logger = logging.getLogger(__name__)
        self.fs = fsspec.filesystem("file")
    
    def _checked_path(self, path: Union[str, Path]) -> str:
        path_str = require_non_blank(None if path is None else str(path), "path")
        if not self.fs.isfile(path_str):
            raise FileNotFoundError(f"File does not exist: {path_str}")
        return path_str
    
    def exists(self, path: Union[str, Path]) -> bool:
        return self.fs.exists(str(path))
    
    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        path_str = self._checked_path(path)
        self.logger.debug(f"Reading text file: {path_str}")
        with self.fs.open(path_str, "r", encoding=encoding) as f:
            return f.read()
    
    def file_info(self, path: Union[str, Path], encoding: str = "utf-8") -> FileData:
        path_str = self._checked_path(path)
        with self.fs.open(path_str, "r", encoding=encoding) as f:
            line_count = sum(1 for _ in f)
        file_data = FileData(
            file_name=Path(path_str).name,
            file_size=self.fs.size(path_str),
            file_path=Path(path_str),
            line_count=line_count,
        )
        self.logger.info(f"Loaded file info for {file_data.file_name}: {file_data.file_size} bytes, {line_count} lines")
        return file_data
