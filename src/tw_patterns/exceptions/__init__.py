"""Exception hierarchy for tw-pattern-analyzer."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ReportWriteError,
)
from .base import TwPatternsError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPatternError,
)

__all__ = [
    "TwPatternsError",
    "AnalysisError",
    "FileAccessError",
    "ReportWriteError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPatternError",
]
