"""Workspace root detection.

Globs in the config are relative to the monorepo root, which is the nearest
ancestor whose ``package.json`` declares ``workspaces``. Running the tool
from inside ``packages/foo`` or ``apps/bar`` therefore still scans the whole
workspace.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)

NESTED_PROJECT_DIRS = ("packages", "apps")


def _declares_workspaces(directory: Path) -> bool:
    manifest = directory / "package.json"
    if not manifest.is_file():
        return False
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug(f"Skipping unreadable {manifest}: {e}")
        return False
    return isinstance(data, dict) and bool(data.get("workspaces"))


def find_workspace_root(start: Optional[Path] = None) -> Path:
    """Locate the workspace root for ``start`` (default: current directory).

    Walks up to the first directory with a workspaces manifest. Without one,
    ``start`` itself is used, lifted above an enclosing ``packages``/``apps``
    directory when it sits inside one.
    """
    start = Path(start or Path.cwd()).resolve()

    for candidate in (start, *start.parents):
        if _declares_workspaces(candidate):
            logger.debug(f"Workspace root: {candidate}")
            return candidate

    root = start
    for index, part in enumerate(root.parts):
        if part in NESTED_PROJECT_DIRS and index > 0:
            root = Path(*root.parts[:index])
            break
    logger.debug(f"No workspaces manifest above {start}; using {root}")
    return root
