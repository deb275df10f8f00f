"""
Safe file operations for tw-pattern-analyzer.

Every failure is converted into a domain exception so the caller can decide
whether it is fatal: reads are skipped per file, report writes are surfaced
but never discard the computed report.
"""

from pathlib import Path

from .exceptions import FileAccessError, ReportWriteError


def safe_read_file(
    filepath: Path,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """
    Read a source file as text.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def safe_write_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write a report file, creating parent directories as needed.

    Args:
        filepath: File to write
        content: Content to write
        encoding: Text encoding

    Raises:
        ReportWriteError: If file cannot be written
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise ReportWriteError(filepath, f"Write failed: {e}")
