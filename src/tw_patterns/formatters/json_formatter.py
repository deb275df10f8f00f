"""JSON formatter and report writer."""

import json
from pathlib import Path
from typing import Optional

from ..file_ops import safe_write_file
from ..models import Report
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as pretty-printed JSON.

    ``top`` limits the serialized clusters; the file written by
    ``write_json_report`` always carries every ranked cluster.
    """

    def render(self, report: Report, top: Optional[int] = None) -> None:
        print(self.format(report, top))

    def format(self, report: Report, top: Optional[int] = None) -> str:
        data = report.to_dict()
        if top is not None:
            data["clusters"] = data["clusters"][:top]
        return json.dumps(data, indent=2)


def write_json_report(report: Report, path: Path) -> Path:
    """Write the full report to ``path``, creating parent directories.

    Raises:
        ReportWriteError: If the file cannot be written
    """
    path = Path(path)
    safe_write_file(path, JsonFormatter().format(report) + "\n")
    return path
