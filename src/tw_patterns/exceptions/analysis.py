"""Analysis-related exceptions: reading sources, writing reports."""

from pathlib import Path

from .base import TwPatternsError


class AnalysisError(TwPatternsError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file or directory cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ReportWriteError(AnalysisError):
    """Raised when the JSON report cannot be written."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot write report: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
