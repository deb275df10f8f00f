"""Analyze command."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from ..api import analyze as run_analysis
from ..config import AGGRESSIVE_SIMILARITY_THRESHOLD
from ..exceptions import ConfigurationError, FileAccessError, TwPatternsError
from ..logging_config import setup_logging
from ..workspace import find_workspace_root
from . import app
from ._common import (
    ExitCode,
    console,
    min_occurrences_option,
    min_variants_option,
    threshold_option,
    top_option,
)


@app.command()
def analyze(
    globs: Optional[List[str]] = typer.Argument(
        None,
        help="Glob patterns to scan, relative to the workspace root (default: from config)",
        show_default=False,
    ),
    ignore: Optional[List[str]] = typer.Option(
        None, "--ignore", "-i",
        help="Additional glob to ignore (repeatable)",
    ),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t",
        help="Jaccard similarity needed to join a cluster (0-1, default 0.75)",
    ),
    aggressive: bool = typer.Option(
        False, "--aggressive",
        help=f"Cluster loosely (threshold {AGGRESSIVE_SIMILARITY_THRESHOLD}) unless --threshold is given",
    ),
    min_occurrences: Optional[int] = typer.Option(
        None, "--min-occurrences", "-m",
        help="Ignore patterns seen fewer times than this",
    ),
    min_variants: Optional[int] = typer.Option(
        None, "--min-variants", "-v",
        help="Only report clusters with at least this many variants",
    ),
    top: Optional[int] = typer.Option(
        None, "--top",
        help="Number of clusters shown in the console table",
    ),
    out: Optional[Path] = typer.Option(
        None, "--out", "-o",
        help="JSON report path (relative paths resolve against the workspace root)",
    ),
    no_json: bool = typer.Option(
        False, "--no-json",
        help="Do not write the JSON report",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
    ),
    root: Optional[Path] = typer.Option(
        None, "--root",
        help="Workspace root (default: detected from the current directory)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False, "--quiet",
        help="Only log errors",
    ),
):
    """Scan a workspace for similar Tailwind class lists and rank them."""
    logger = setup_logging(verbose=verbose, quiet=quiet)

    if root is not None:
        if not root.is_dir():
            console.print(f"[red]Error:[/red] Workspace root not found: {root}")
            raise typer.Exit(ExitCode.PATH_NOT_FOUND)
        workspace_root = root
    else:
        workspace_root = find_workspace_root()

    similarity = threshold_option(threshold)
    if similarity is None and aggressive:
        similarity = AGGRESSIVE_SIMILARITY_THRESHOLD

    options: Dict[str, Any] = {}
    if no_json:
        options["out"] = None
    elif out is not None:
        options["out"] = out

    try:
        report = run_analysis(
            globs or None,
            root=workspace_root,
            config_file=config,
            top=top_option(top),
            ignore_globs=ignore or None,
            similarity_threshold=similarity,
            min_occurrences=min_occurrences_option(min_occurrences),
            min_variants=min_variants_option(min_variants),
            console=console,
            **options,
        )
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)
    except FileAccessError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(ExitCode.PATH_NOT_FOUND)
    except TwPatternsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    if report.output_path:
        console.print(f"[green]Wrote JSON report[/green] → {report.output_path}")
    if report.failed_files:
        logger.warning(f"{len(report.failed_files)} file(s) could not be read")
