"""Starter configuration presets for ``tw-patterns init``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .config import (
    DEFAULT_CONSOLE_TOP,
    DEFAULT_IGNORE_GLOBS,
    DEFAULT_JSON_PATH,
    DEFAULT_FREQUENCY_WEIGHT,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_VARIANT_WEIGHT,
)
from .scanning.dialects import DEFAULT_FILE_TYPES

PROJECT_TYPES: Tuple[str, ...] = ("react", "astro", "vue", "svelte", "mixed")

DEFAULT_INCLUDE_PATHS: Dict[str, Tuple[str, ...]] = {
    "react": ("src/**/*.{tsx,jsx}", "app/**/*.{tsx,jsx}", "components/**/*.{tsx,jsx}"),
    "astro": ("src/**/*.astro", "src/**/*.{tsx,jsx}", "components/**/*.astro"),
    "vue": ("src/**/*.vue", "src/**/*.{tsx,jsx}", "components/**/*.vue"),
    "svelte": ("src/**/*.svelte", "src/**/*.{tsx,jsx}", "components/**/*.svelte"),
    "mixed": (
        "src/**/*.{tsx,jsx,astro,vue,svelte}",
        "components/**/*.{tsx,jsx,astro,vue,svelte}",
    ),
}

# Extensions appended to bare directory paths given for each project type
PROJECT_EXTENSIONS: Dict[str, Tuple[str, ...]] = {
    "react": ("tsx", "jsx"),
    "astro": ("astro", "html", "tsx", "jsx"),
    "vue": ("vue", "tsx", "jsx"),
    "svelte": ("svelte", "tsx", "jsx"),
    "mixed": ("tsx", "jsx", "astro", "html", "vue", "svelte"),
}


@dataclass
class InitOptions:
    """Answers collected by ``tw-patterns init``."""

    project_type: str = "mixed"
    include_paths: List[str] = field(default_factory=list)
    ignore_paths: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_GLOBS))
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    min_occurrences: int = 2
    min_variants: int = 1
    output_path: str = DEFAULT_JSON_PATH
    top_results: int = DEFAULT_CONSOLE_TOP


def build_globs(project_type: str, include_paths: Sequence[str] = ()) -> List[str]:
    """Preset include globs plus custom paths.

    A custom entry that is already a recursive glob is kept as-is; a bare
    directory becomes ``dir/**/*.{<project extensions>}``.
    """
    extensions = PROJECT_EXTENSIONS.get(project_type, PROJECT_EXTENSIONS["mixed"])
    globs = list(DEFAULT_INCLUDE_PATHS.get(project_type, DEFAULT_INCLUDE_PATHS["mixed"]))
    for path in include_paths:
        path = path.strip()
        if not path:
            continue
        if "**/*" in path:
            globs.append(path)
        else:
            globs.append(f"{path.rstrip('/')}/**/*.{{{','.join(extensions)}}}")
    return globs


def _toml_list(values: Sequence[str], indent: str = "  ") -> str:
    if not values:
        return "[]"
    # JSON string escapes are valid TOML basic strings
    items = "".join(f"{indent}{json.dumps(v)},\n" for v in values)
    return f"[\n{items}]"


def render_config(options: InitOptions) -> str:
    """Render a commented ``tw-patterns.toml`` for ``options``."""
    threshold = max(0.0, min(1.0, float(options.similarity_threshold)))
    globs = build_globs(options.project_type, options.include_paths)
    file_types = "\n".join(
        f'"{ext}" = {json.dumps(list(names))}' for ext, names in DEFAULT_FILE_TYPES.items()
    )

    return f"""# tw-pattern-analyzer configuration ({options.project_type} project)

# File patterns to analyze, relative to the workspace root
globs = {_toml_list(globs)}

# Patterns to ignore
ignore_globs = {_toml_list(options.ignore_paths)}

# Jaccard similarity needed to join a cluster (0.0-1.0)
similarity_threshold = {threshold}
# Minimum occurrences for a pattern to be clustered
min_occurrences = {max(1, int(options.min_occurrences))}
# Minimum member patterns for a cluster to be reported
min_variants = {max(1, int(options.min_variants))}

[output.console]
enabled = true
top = {max(1, int(options.top_results))}

[output.json]
enabled = true
path = {json.dumps(options.output_path)}

# Extraction regexes per dialect can be overridden or added under
# [parsing.patterns], e.g.  react = '''className=\\s*"([^"]+)"'''
[parsing.file_types]
{file_types}

[clustering.scoring]
variants = {DEFAULT_VARIANT_WEIGHT:g}
frequency = {DEFAULT_FREQUENCY_WEIGHT:g}
"""
