"""
Logging utilities for the regex history tool.

This module provides utilities for setting up logging with rotation.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from Configuration import RegexHistoryConfig

def setup_logging(
    log_dir: str, 
    log_level: int = logging.INFO,
    log_file_name: str = RegexHistoryConfig.LOG_FILE_NAME,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 10
) -> None:
    """
    Set up logging with rotation.
    
    Args:
        log_dir: The directory to store log files in
        log_level: The logging level (default: logging.INFO)
        log_file_name: The name of the log file (default: "regex_history.log")
        max_bytes: The maximum size of each log file in bytes (default: 10 MB)
        backup_count: The number of backup files to keep (default: 10)
    """
    if not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)
    
    log_file = os.path.join(log_dir, log_file_name)
    
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s"
    )
    
    file_handler = RotatingFileHandler(
        log_file, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
    )
    file_handler.setFormatter(file_formatter)
    
    # Console output stays on stderr so command results on stdout remain clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(max(log_level, logging.WARNING))
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    
    logging.debug(f"Logging configured with level {logging.getLevelName(log_level)}")
    logging.debug(f"Log file: {log_file}")
    logging.debug(f"Max log file size: {max_bytes} bytes, backup count: {backup_count}")
