"""Glob expansion for source discovery.

Include and ignore patterns use the usual workspace glob dialect:

    *       any run of characters within one path segment
    ?       one character within a segment
    **      any number of segments (``**/`` may match none)
    {a,b}   alternatives, expanded before matching

Like most JavaScript globbers, wildcards never descend into dot-directories
or match dot-files. Results are relative POSIX paths in sorted order, which
fixes the fold order of the aggregator and therefore the clustering output.
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Sequence

from ..exceptions import FileAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternatives, including nested groups.

    >>> expand_braces("src/**/*.{tsx,jsx}")
    ['src/**/*.tsx', 'src/**/*.jsx']
    """
    start = pattern.find("{")
    if start == -1:
        return [pattern]

    depth = 0
    parts: List[str] = []
    segment_start = start + 1
    for i in range(start, len(pattern)):
        char = pattern[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                parts.append(pattern[segment_start:i])
                prefix, suffix = pattern[:start], pattern[i + 1 :]
                expanded: List[str] = []
                for part in parts:
                    expanded.extend(expand_braces(prefix + part + suffix))
                return expanded
        elif char == "," and depth == 1:
            parts.append(pattern[segment_start:i])
            segment_start = i + 1

    # Unbalanced brace: treat literally
    return [pattern]


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern:
    """Translate a brace-free glob into an anchored regular expression."""
    out: List[str] = []
    i, n = 0, len(pattern)
    while i < n:
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == n:
            out.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            out.append("[^/]")
            i += 1
        elif pattern[i] == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape("["))
                i += 1
                continue
            body = pattern[i + 1 : end]
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append(f"[{body}]")
            i = end + 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(out) + r"\Z")


def _compile(patterns: Iterable[str]) -> List[re.Pattern]:
    compiled = []
    for pattern in patterns:
        pattern = pattern.strip()
        if pattern.startswith("./"):
            pattern = pattern[2:]
        for expanded in expand_braces(pattern):
            compiled.append(glob_to_regex(expanded))
    return compiled


def _matches_any(rel_path: str, patterns: Sequence[re.Pattern]) -> bool:
    return any(p.match(rel_path) for p in patterns)


def discover_files(
    root: Path,
    globs: Sequence[str],
    ignore_globs: Sequence[str] = (),
) -> List[str]:
    """List files under ``root`` matching any include glob and no ignore glob.

    Args:
        root: Workspace root the globs are relative to
        globs: Include patterns
        ignore_globs: Exclude patterns; directories they cover are pruned

    Returns:
        Sorted, de-duplicated relative POSIX paths

    Raises:
        FileAccessError: If ``root`` is not a readable directory
    """
    root = Path(root)
    if not root.is_dir():
        raise FileAccessError(root, "Workspace root is not a directory")

    include = _compile(globs)
    ignore = _compile(ignore_globs)
    if not include:
        return []

    found = set()
    try:
        for dirpath, dirnames, filenames in os.walk(root):
            rel_dir = Path(dirpath).relative_to(root).as_posix()
            rel_dir = "" if rel_dir == "." else rel_dir + "/"

            kept = []
            for name in dirnames:
                if name.startswith("."):
                    continue
                # "dist" style patterns name the directory, "dist/**" ones its contents
                if _matches_any(f"{rel_dir}{name}", ignore) or _matches_any(
                    f"{rel_dir}{name}/", ignore
                ):
                    logger.debug(f"Pruned ignored directory {rel_dir}{name}")
                    continue
                kept.append(name)
            dirnames[:] = sorted(kept)

            for name in filenames:
                if name.startswith("."):
                    continue
                rel_path = f"{rel_dir}{name}"
                if _matches_any(rel_path, include) and not _matches_any(rel_path, ignore):
                    found.add(rel_path)
    except OSError as e:
        raise FileAccessError(root, f"Directory scan failed: {e}")

    files = sorted(found)
    logger.debug(f"Discovered {len(files)} files under {root}")
    return files
