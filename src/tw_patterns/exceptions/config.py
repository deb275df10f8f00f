"""Configuration exceptions: invalid settings and extraction patterns."""

from typing import Any

from .base import TwPatternsError


class ConfigurationError(TwPatternsError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidPatternError(ConfigurationError):
    """Raised when an extraction regular expression does not compile."""

    def __init__(self, strategy: str, pattern: str, reason: str):
        super().__init__(
            f"Invalid extraction pattern for strategy {strategy!r}",
            details={"strategy": strategy, "pattern": pattern, "reason": reason},
        )
        self.strategy = strategy
        self.pattern = pattern
        self.reason = reason
