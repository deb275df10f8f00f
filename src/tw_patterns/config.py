"""Configuration loading and management for tw-pattern-analyzer.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalyzerConfig)
    2. Project config (./tw-patterns.toml, or an explicit file)
    3. Environment variables (TW_PATTERNS_* prefix)
    4. Call-time overrides (passed as kwargs)

A missing or malformed config file never aborts a run: the loader logs a
warning and continues with the defaults. Out-of-range numeric values are
replaced by their documented default, also with a warning. Only extraction
patterns that fail to compile are fatal, since no file could be scanned
reliably with them.

Example:
    >>> config = load_config(similarity_threshold=0.5, min_occurrences=2)
    >>> config.similarity_threshold
    0.5
"""

from __future__ import annotations

import math
import numbers
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .exceptions import InvalidConfigError
from .logging_config import get_logger
from .scanning.dialects import (
    DEFAULT_FILE_TYPES,
    DEFAULT_STRATEGIES,
    DialectStrategy,
    build_strategies,
)

logger = get_logger(__name__)

CONFIG_FILENAME = "tw-patterns.toml"
ENV_PREFIX = "TW_PATTERNS_"

# The library default. Heterogeneous codebases often cluster better with the
# aggressive value; callers opt into it explicitly.
DEFAULT_SIMILARITY_THRESHOLD = 0.75
AGGRESSIVE_SIMILARITY_THRESHOLD = 0.5

DEFAULT_MIN_OCCURRENCES = 1
DEFAULT_MIN_VARIANTS = 1
DEFAULT_CONSOLE_TOP = 20
DEFAULT_JSON_PATH = "reports/tw-patterns.json"
DEFAULT_VARIANT_WEIGHT = 60.0
DEFAULT_FREQUENCY_WEIGHT = 40.0

DEFAULT_GLOBS: Tuple[str, ...] = (
    "apps/**/*.{tsx,jsx,astro,html,mdx,vue,svelte}",
    "packages/**/*.{tsx,jsx,astro,html,mdx,vue,svelte}",
    "src/**/*.{tsx,jsx,astro,html,mdx,vue,svelte}",
)

DEFAULT_IGNORE_GLOBS: Tuple[str, ...] = (
    "**/node_modules/**",
    "**/.next/**",
    "**/dist/**",
    "**/.astro/**",
    "**/build/**",
    "**/.output/**",
    "**/coverage/**",
    "**/.turbo/**",
)


# ---------------------------------------------------------------------------
# Value sanitizers
# ---------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def sanitize_threshold(key: str, value: Any, default: float) -> float:
    """Return ``value`` as a float in [0, 1], or ``default`` with a warning."""
    if _is_number(value) and 0.0 <= float(value) <= 1.0:
        return float(value)
    logger.warning(f"Invalid {key} {value!r} (expected a number in [0, 1]); using {default}")
    return default


def sanitize_count(key: str, value: Any, default: int, minimum: int = 1) -> int:
    """Return ``value`` as an int >= ``minimum``, or ``default`` with a warning."""
    if (
        _is_number(value)
        and math.isfinite(value)
        and float(value).is_integer()
        and int(value) >= minimum
    ):
        return int(value)
    logger.warning(f"Invalid {key} {value!r} (expected an integer >= {minimum}); using {default}")
    return default


def sanitize_weight(key: str, value: Any, default: float) -> float:
    """Return ``value`` as a finite non-negative float, or ``default`` with a warning."""
    if _is_number(value) and math.isfinite(value) and float(value) >= 0.0:
        return float(value)
    logger.warning(f"Invalid {key} {value!r} (expected a finite non-negative number); using {default}")
    return default


# ---------------------------------------------------------------------------
# Configuration dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoringWeights:
    """Maximum points each component contributes to the 0-100 likelihood.

    Attributes:
        variants: Points for variant count (maxed out at 5 members)
        frequency: Points for the cluster's share of all occurrences
    """

    variants: float = DEFAULT_VARIANT_WEIGHT
    frequency: float = DEFAULT_FREQUENCY_WEIGHT

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "variants", sanitize_weight("scoring.variants", self.variants, DEFAULT_VARIANT_WEIGHT)
        )
        object.__setattr__(
            self,
            "frequency",
            sanitize_weight("scoring.frequency", self.frequency, DEFAULT_FREQUENCY_WEIGHT),
        )


@dataclass(frozen=True)
class OutputConfig:
    """Console preview and JSON report settings.

    ``json_path`` of None disables the JSON report regardless of
    ``json_enabled``.
    """

    console_enabled: bool = True
    console_top: int = DEFAULT_CONSOLE_TOP
    json_enabled: bool = True
    json_path: Optional[str] = DEFAULT_JSON_PATH

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "console_top",
            sanitize_count("output.console.top", self.console_top, DEFAULT_CONSOLE_TOP),
        )

    @property
    def writes_json(self) -> bool:
        return self.json_enabled and bool(self.json_path)


@dataclass(frozen=True)
class ParsingConfig:
    """Extraction strategies per dialect and the file-type dispatch table."""

    strategies: Mapping[str, DialectStrategy] = field(
        default_factory=lambda: dict(DEFAULT_STRATEGIES)
    )
    file_types: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_FILE_TYPES)
    )

    def strategies_for(self, file_path: str) -> List[DialectStrategy]:
        """Strategies applicable to ``file_path`` by extension, in table order."""
        extension = Path(file_path).suffix.lower()
        names = self.file_types.get(extension, ())
        resolved = []
        for name in names:
            strategy = self.strategies.get(name)
            if strategy is None:
                logger.debug(f"No extraction strategy named {name!r} for {extension}")
                continue
            resolved.append(strategy)
        return resolved


@dataclass(frozen=True)
class AnalyzerConfig:
    """Configuration for a single analysis run.

    Attributes:
        globs: Include patterns, relative to the workspace root
        ignore_globs: Exclude patterns
        similarity_threshold: Minimum Jaccard similarity to join a cluster
        min_occurrences: Patterns seen fewer times are dropped before clustering
        min_variants: Clusters with fewer members are dropped from the report
        output: Console and JSON output settings
        parsing: Extraction strategies and file-type table
        scoring: Likelihood weights
    """

    globs: Tuple[str, ...] = DEFAULT_GLOBS
    ignore_globs: Tuple[str, ...] = DEFAULT_IGNORE_GLOBS
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    min_occurrences: int = DEFAULT_MIN_OCCURRENCES
    min_variants: int = DEFAULT_MIN_VARIANTS
    output: OutputConfig = field(default_factory=OutputConfig)
    parsing: ParsingConfig = field(default_factory=ParsingConfig)
    scoring: ScoringWeights = field(default_factory=ScoringWeights)

    def __post_init__(self) -> None:
        object.__setattr__(self, "globs", tuple(self.globs))
        object.__setattr__(self, "ignore_globs", tuple(self.ignore_globs))
        object.__setattr__(
            self,
            "similarity_threshold",
            sanitize_threshold(
                "similarity_threshold", self.similarity_threshold, DEFAULT_SIMILARITY_THRESHOLD
            ),
        )
        object.__setattr__(
            self,
            "min_occurrences",
            sanitize_count("min_occurrences", self.min_occurrences, DEFAULT_MIN_OCCURRENCES),
        )
        object.__setattr__(
            self,
            "min_variants",
            sanitize_count("min_variants", self.min_variants, DEFAULT_MIN_VARIANTS),
        )

    def summary(self) -> Dict[str, Any]:
        """Settings recorded in the JSON report."""
        return {
            "similarityThreshold": self.similarity_threshold,
            "minOccurrences": self.min_occurrences,
            "minVariants": self.min_variants,
        }


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

# Flat keys understood by _build_config, with the TOML location they come from
_TOML_KEYS: Dict[Tuple[str, ...], str] = {
    ("globs",): "globs",
    ("ignore_globs",): "ignore_globs",
    ("similarity_threshold",): "similarity_threshold",
    ("min_occurrences",): "min_occurrences",
    ("min_variants",): "min_variants",
    ("output", "console", "enabled"): "console_enabled",
    ("output", "console", "top"): "console_top",
    ("output", "json", "enabled"): "json_enabled",
    ("output", "json", "path"): "json_path",
    ("parsing", "patterns"): "patterns",
    ("parsing", "file_types"): "file_types",
    ("clustering", "scoring", "variants"): "scoring_variants",
    ("clustering", "scoring", "frequency"): "scoring_frequency",
}

# Environment variables: TW_PATTERNS_<NAME> -> (flat key, parser)
_ENV_KEYS: Dict[str, Tuple[str, type]] = {
    "SIMILARITY_THRESHOLD": ("similarity_threshold", float),
    "MIN_OCCURRENCES": ("min_occurrences", int),
    "MIN_VARIANTS": ("min_variants", int),
    "CONSOLE_TOP": ("console_top", int),
    "JSON_PATH": ("json_path", str),
}


def load_config(
    config_file: Optional[Path] = None,
    workspace_root: Optional[Path] = None,
    use_project_config: bool = True,
    **overrides: Any,
) -> AnalyzerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Explicit config file; replaces the project config lookup
        workspace_root: Directory searched for ``tw-patterns.toml``
            (default: current directory)
        use_project_config: When False, skip config files entirely
        **overrides: Direct overrides using flat keys (``globs``,
            ``ignore_globs``, ``similarity_threshold``, ``min_occurrences``,
            ``min_variants``, ``console_enabled``, ``console_top``,
            ``json_enabled``, ``json_path``, ``patterns``, ``file_types``,
            ``scoring_variants``, ``scoring_frequency``). None values are
            ignored. ``ignore_globs`` is appended to the configured list.

    Returns:
        A sanitized AnalyzerConfig

    Raises:
        InvalidPatternError: If a configured extraction pattern does not compile
        InvalidConfigError: If an override key is unknown
    """
    merged: Dict[str, Any] = {}

    if use_project_config:
        merged.update(_load_file_layer(config_file, workspace_root))

    merged.update(_load_env_vars())

    extra_ignores = overrides.pop("ignore_globs", None)
    for key, value in overrides.items():
        if key not in _TOML_KEYS.values():
            raise InvalidConfigError(key, value, "unknown configuration key")
        if value is not None:
            merged[key] = value
    if extra_ignores:
        base = merged.get("ignore_globs", DEFAULT_IGNORE_GLOBS)
        merged["ignore_globs"] = tuple(base) + tuple(extra_ignores)

    return _build_config(merged)


def _load_file_layer(config_file: Optional[Path], workspace_root: Optional[Path]) -> Dict[str, Any]:
    """Read the TOML layer, returning {} (with a warning) when unusable."""
    explicit = config_file is not None
    path = Path(config_file) if explicit else Path(workspace_root or Path.cwd()) / CONFIG_FILENAME

    if not path.is_file():
        if explicit:
            logger.warning(f"Config file not found: {path}; using default configuration")
        else:
            logger.debug(f"No project config at {path}")
        return {}

    try:
        raw = _load_toml_file(path)
        flat = _flatten_toml(raw)
    except (OSError, ValueError, InvalidConfigError) as e:
        # tomllib.TOMLDecodeError is a ValueError
        logger.warning(f"Failed to load config file {path}, using defaults: {e}")
        return {}

    logger.debug(f"Loaded configuration from {path}")
    return flat


def _flatten_toml(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Map the nested TOML document onto flat keys, checking shapes."""
    flat: Dict[str, Any] = {}
    for path, key in _TOML_KEYS.items():
        node: Any = data
        for part in path:
            if not isinstance(node, Mapping) or part not in node:
                node = None
                break
            node = node[part]
        if node is not None:
            flat[key] = node

    for key in ("globs", "ignore_globs"):
        if key in flat and not _is_string_list(flat[key]):
            raise InvalidConfigError(key, flat[key], "expected a list of strings")

    patterns = flat.get("patterns")
    if patterns is not None:
        if not isinstance(patterns, Mapping) or not all(
            isinstance(v, str) for v in patterns.values()
        ):
            raise InvalidConfigError("parsing.patterns", patterns, "expected a table of strings")

    file_types = flat.get("file_types")
    if file_types is not None:
        if not isinstance(file_types, Mapping) or not all(
            _is_string_list(v) for v in file_types.values()
        ):
            raise InvalidConfigError(
                "parsing.file_types", file_types, "expected a table of string lists"
            )

    json_path = flat.get("json_path")
    if json_path is not None and not isinstance(json_path, str):
        raise InvalidConfigError("output.json.path", json_path, "expected a string")

    known_top = {"globs", "ignore_globs", "similarity_threshold", "min_occurrences",
                 "min_variants", "output", "parsing", "clustering"}
    for unknown in sorted(set(data) - known_top):
        logger.warning(f"Ignoring unknown config key: {unknown}")

    return flat


def _is_string_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def _load_env_vars() -> Dict[str, Any]:
    """Load configuration from TW_PATTERNS_* environment variables.

    Unparseable values are skipped with a warning.
    """
    result: Dict[str, Any] = {}
    for name, (key, parser) in _ENV_KEYS.items():
        env_key = f"{ENV_PREFIX}{name}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[key] = parser(env_value)
        except ValueError:
            logger.warning(f"Ignoring {env_key}={env_value!r}: expected {parser.__name__}")
    return result


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def _build_config(merged: Mapping[str, Any]) -> AnalyzerConfig:
    """Construct the AnalyzerConfig from flat merged values."""
    defaults = AnalyzerConfig()

    output = replace(
        defaults.output,
        console_enabled=bool(merged.get("console_enabled", defaults.output.console_enabled)),
        console_top=merged.get("console_top", defaults.output.console_top),
        json_enabled=bool(merged.get("json_enabled", defaults.output.json_enabled)),
        json_path=merged.get("json_path", defaults.output.json_path),
    )

    parsing = defaults.parsing
    if "patterns" in merged or "file_types" in merged:
        strategies = build_strategies(merged.get("patterns"))
        file_types = dict(DEFAULT_FILE_TYPES)
        if "file_types" in merged:
            file_types = {
                _normalize_extension(ext): tuple(names)
                for ext, names in merged["file_types"].items()
            }
        parsing = ParsingConfig(strategies=strategies, file_types=file_types)

    scoring = ScoringWeights(
        variants=merged.get("scoring_variants", DEFAULT_VARIANT_WEIGHT),
        frequency=merged.get("scoring_frequency", DEFAULT_FREQUENCY_WEIGHT),
    )

    return AnalyzerConfig(
        globs=tuple(merged.get("globs", DEFAULT_GLOBS)),
        ignore_globs=tuple(merged.get("ignore_globs", DEFAULT_IGNORE_GLOBS)),
        similarity_threshold=merged.get("similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD),
        min_occurrences=merged.get("min_occurrences", DEFAULT_MIN_OCCURRENCES),
        min_variants=merged.get("min_variants", DEFAULT_MIN_VARIANTS),
        output=output,
        parsing=parsing,
        scoring=scoring,
    )


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        OSError: If the file cannot be read
        ValueError: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)
