"""
Base filesystem abstraction.

This module defines the abstract base class for the file loaders that supply
input text to the regex tester.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .filedata import FileData


class FileSystem(ABC):
    """
    Abstract base class for filesystem implementations.
    
    This class defines the interface that all filesystem implementations must follow.
    It provides methods for checking, describing and reading text files.
    """
    
    @abstractmethod
    def exists(self, path: Union[str, Path]) -> bool:
        """
        Check if a file exists.
        
        Args:
            path: The path of the file to check
            
        Returns:
            True if the file exists, False otherwise
        """
        pass
    
    @abstractmethod
    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """
        Read a file's full contents as a string.
        
        Args:
            path: The path of the file to read
            encoding: The text encoding (default: 'utf-8')
            
        Returns:
            The file contents
            
        Raises:
            InvalidArgument: If the path is None or blank
            FileNotFoundError: If the file does not exist
        """
        pass
    
    @abstractmethod
    def file_info(self, path: Union[str, Path], encoding: str = "utf-8") -> FileData:
        """
        Describe a file: name, size, line count and extension.
        
        Args:
            path: The path of the file to describe
            encoding: The text encoding used to count lines (default: 'utf-8')
            
        Raises:
            InvalidArgument: If the path is None or blank
            FileNotFoundError: If the file does not exist
        """
        pass
