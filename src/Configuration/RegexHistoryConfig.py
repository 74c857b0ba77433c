"""
Constants used by the regex history tool.
"""

class RegexHistoryConfig:
    """Constants for history retrieval, logging and the command line interface."""

    DEFAULT_RECENT_LIMIT: int = 10
    """Number of entries shown when no explicit limit is given."""

    DEFAULT_SUMMARY_WORD_LIMIT: int = 20
    """Number of words kept by the text summary."""

    DEFAULT_TOP_WORDS: int = 10
    """Number of word frequencies printed by the analyze command."""

    DEFAULT_ENCODING: str = "utf-8"
    """Encoding used when loading input files."""

    LOG_FILE_NAME: str = "regex_history.log"
    """Name of the log file written under the log directory."""

    CONFIG_FILE_NAME: str = "regex_history.yml"
    """Default name of the YAML settings file."""

    HISTORY_TABLE_COLUMNS: list = ["pattern", "usage_count", "last_used_at"]
    """Columns of the history display table, in order."""

    SHELL_PROMPT: str = "regex"
    """Prompt shown by the interactive shell."""
