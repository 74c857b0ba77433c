"""
Runtime settings for the regex history tool, loaded from YAML.
"""

from pydantic import BaseModel, Field

from .RegexHistoryConfig import RegexHistoryConfig


class AppSettings(BaseModel):
    """Settings that may be overridden in the YAML settings file."""
    log_dir: str = Field("./logs", description="Directory for log files.")
    log_level: str = Field("INFO", description="Logging level name.")
    recent_limit: int = Field(
        RegexHistoryConfig.DEFAULT_RECENT_LIMIT, gt=0,
        description="Number of entries shown by history listings."
    )
    summary_word_limit: int = Field(
        RegexHistoryConfig.DEFAULT_SUMMARY_WORD_LIMIT, gt=0,
        description="Number of words kept by the text summary."
    )
    encoding: str = Field(RegexHistoryConfig.DEFAULT_ENCODING, description="Encoding of input files.")
