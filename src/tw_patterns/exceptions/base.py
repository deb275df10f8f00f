"""Base exception for tw-pattern-analyzer."""

from typing import Dict, Optional


class TwPatternsError(Exception):
    """Base exception for all tw-pattern-analyzer errors.

    ``details`` holds string context for the message: ``filepath`` and
    ``reason`` for file errors, ``key``/``value``/``reason`` for invalid
    settings, ``strategy``/``pattern``/``reason`` for extraction patterns.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
