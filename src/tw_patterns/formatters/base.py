"""Base formatter interface for report rendering."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Report


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: Report, top: Optional[int] = None) -> None:
        """Render the report to the terminal."""

    @abstractmethod
    def format(self, report: Report, top: Optional[int] = None) -> str:
        """Return formatted string representation of the report."""
