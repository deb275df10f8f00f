"""Output formatters for tw-pattern-analyzer."""

from typing import Dict, Type

from .base import BaseFormatter
from .json_formatter import JsonFormatter, write_json_report
from .rich_formatter import RichFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "rich": RichFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str, **options) -> BaseFormatter:
    """Instantiate the formatter registered as ``name``.

    Keyword options go to the formatter's constructor (e.g. ``console`` for
    the rich formatter).

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls(**options)


__all__ = [
    "BaseFormatter",
    "FORMATTERS",
    "JsonFormatter",
    "RichFormatter",
    "get_formatter",
    "write_json_report",
]
