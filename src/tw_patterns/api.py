"""Public API for tw-pattern-analyzer.

``analyze()`` is the main entry point: it discovers files, reads them,
runs the pattern pipeline, prints the console preview and writes the JSON
report. The report is always returned, even when writing it fails.

Example:
    >>> from tw_patterns import analyze
    >>>
    >>> # Project config + defaults
    >>> report = analyze(root="/path/to/workspace")
    >>>
    >>> # Explicit globs bypass the project config file
    >>> report = analyze(
    ...     ["src/**/*.tsx"],
    ...     similarity_threshold=0.5,
    ...     min_occurrences=2,
    ...     out=None,
    ... )
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from rich.console import Console

from .analysis import PatternAnalyzer
from .config import AnalyzerConfig, load_config
from .exceptions import FileAccessError, ReportWriteError
from .file_ops import safe_read_file
from .formatters import get_formatter, write_json_report
from .logging_config import get_logger
from .models import Report
from .scanning import discover_files

logger = get_logger(__name__)

# Distinguishes "no out argument" (use the configured path) from out=None (disable)
_UNSET = object()

PathLike = Union[str, Path]


def analyze_sources(
    sources: Iterable[Tuple[str, str]],
    config: Optional[AnalyzerConfig] = None,
) -> Report:
    """Run the pipeline over in-memory ``(file_path, contents)`` pairs.

    Pairs are folded in the order given; no discovery, reading or output.
    """
    pairs = list(sources)
    analyzer = PatternAnalyzer(config or AnalyzerConfig())
    analyzer.add_sources(pairs)
    return analyzer.build_report(total_files=len(pairs))


def analyze_files(
    files: Sequence[str],
    config: AnalyzerConfig,
    root: Optional[Path] = None,
    read: Callable[[Path], str] = safe_read_file,
) -> Report:
    """Read ``files`` (relative to ``root``) and run the pipeline.

    Unreadable files are logged, listed in ``Report.failed_files`` and
    skipped. Files are processed in sorted path order.
    """
    analyzer = PatternAnalyzer(config)
    failed: List[str] = []
    ordered = sorted(files)

    for file_path in ordered:
        full_path = Path(root) / file_path if root is not None else Path(file_path)
        try:
            source = read(full_path)
        except FileAccessError as e:
            logger.warning(f"Failed to read file {file_path}: {e.reason}")
            failed.append(file_path)
            continue
        analyzer.add_source(file_path, source)

    return analyzer.build_report(total_files=len(ordered), failed_files=failed)


def analyze(
    globs: Optional[Sequence[str]] = None,
    *,
    root: PathLike = ".",
    config_file: Optional[PathLike] = None,
    out=_UNSET,
    top: Optional[int] = None,
    ignore_globs: Optional[Sequence[str]] = None,
    similarity_threshold: Optional[float] = None,
    min_occurrences: Optional[int] = None,
    min_variants: Optional[int] = None,
    console_enabled: Optional[bool] = None,
    console: Optional[Console] = None,
) -> Report:
    """Analyze a workspace and return the ranked cluster report.

    Args:
        globs: Include patterns; when given, the project config file is
            not consulted (an explicit ``config_file`` still is)
        root: Workspace root that globs and relative output paths resolve against
        config_file: Explicit TOML config file
        out: JSON report path; None disables the JSON report, omitted uses
            the configured path
        top: Number of clusters in the console preview
        ignore_globs: Extra exclude patterns, appended to the configured ones
        similarity_threshold: Minimum Jaccard similarity to join a cluster
        min_occurrences: Drop patterns seen fewer times
        min_variants: Drop clusters with fewer members
        console_enabled: Override the console preview setting
        console: Rich console for the preview (default: stdout)

    Returns:
        Report with totals and ranked clusters

    Raises:
        FileAccessError: If ``root`` cannot be scanned
        InvalidPatternError: If a configured extraction pattern is invalid
    """
    root = Path(root)
    explicit_globs = list(globs) if globs else None

    config = load_config(
        config_file=Path(config_file) if config_file is not None else None,
        workspace_root=root,
        use_project_config=explicit_globs is None or config_file is not None,
        globs=explicit_globs,
        ignore_globs=list(ignore_globs) if ignore_globs else None,
        similarity_threshold=similarity_threshold,
        min_occurrences=min_occurrences,
        min_variants=min_variants,
        console_top=top,
        console_enabled=console_enabled,
    )
    logger.info(
        f"Analyzing {root} (threshold={config.similarity_threshold}, "
        f"min_occurrences={config.min_occurrences}, min_variants={config.min_variants})"
    )

    files = discover_files(root, config.globs, config.ignore_globs)
    if not files:
        logger.warning(f"No files matched {', '.join(config.globs)} under {root}")

    report = analyze_files(files, config, root=root)

    if config.output.console_enabled:
        get_formatter("rich", console=console).render(report, config.output.console_top)

    out_path = _resolve_output(out, config)
    if out_path is not None:
        target = out_path if out_path.is_absolute() else root / out_path
        try:
            write_json_report(report, target)
            report.output_path = str(target)
            logger.info(f"Wrote JSON report to {target}")
        except ReportWriteError as e:
            logger.error(f"Could not write JSON report: {e}")

    return report


def _resolve_output(out, config: AnalyzerConfig) -> Optional[Path]:
    if out is None or not config.output.json_enabled:
        return None
    if out is _UNSET:
        return Path(config.output.json_path) if config.output.writes_json else None
    return Path(out)
