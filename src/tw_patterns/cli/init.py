"""Init command: write a starter tw-patterns.toml."""

from pathlib import Path
from typing import List, Optional

import typer

from ..config import CONFIG_FILENAME, DEFAULT_CONSOLE_TOP, DEFAULT_JSON_PATH
from ..exceptions import ReportWriteError
from ..file_ops import safe_write_file
from ..logging_config import setup_logging
from ..presets import PROJECT_TYPES, InitOptions, render_config
from . import app
from ._common import (
    INIT_MIN_OCCURRENCES,
    ExitCode,
    console,
    min_occurrences_option,
    min_variants_option,
    threshold_option,
    top_option,
)


@app.command()
def init(
    project_type: str = typer.Option(
        "mixed", "--project-type", "-p",
        help=f"Project preset: {', '.join(PROJECT_TYPES)}",
    ),
    include: Optional[List[str]] = typer.Option(
        None, "--include",
        help="Extra directory or glob to scan (repeatable)",
    ),
    threshold: float = typer.Option(
        0.75, "--threshold", "-t",
        help="Similarity threshold (0-1)",
    ),
    min_occurrences: int = typer.Option(
        INIT_MIN_OCCURRENCES, "--min-occurrences", "-m",
        help="Minimum occurrences for a pattern to be clustered",
    ),
    min_variants: int = typer.Option(
        1, "--min-variants", "-v",
        help="Minimum variants for a cluster to be reported",
    ),
    out: str = typer.Option(
        DEFAULT_JSON_PATH, "--out", "-o",
        help="JSON report path written by analyze",
    ),
    top: int = typer.Option(
        DEFAULT_CONSOLE_TOP, "--top",
        help="Number of clusters shown in the console table",
    ),
    directory: Path = typer.Option(
        Path("."), "--dir",
        help="Directory to write the config file into",
        file_okay=False, dir_okay=True,
    ),
    force: bool = typer.Option(
        False, "--force", "-f",
        help="Overwrite an existing config file without asking",
    ),
):
    """Create a tw-patterns.toml for this project."""
    setup_logging()

    if project_type not in PROJECT_TYPES:
        console.print(
            f"[red]Configuration error:[/red] Unknown project type {project_type!r} "
            f"(choose from {', '.join(PROJECT_TYPES)})"
        )
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    target = directory / CONFIG_FILENAME
    if target.exists() and not force:
        if not typer.confirm(f"{target} already exists. Overwrite?", default=False):
            console.print("[yellow]Aborted; existing config kept.[/yellow]")
            raise typer.Exit(0)

    options = InitOptions(
        project_type=project_type,
        include_paths=list(include or []),
        similarity_threshold=threshold_option(threshold),
        min_occurrences=min_occurrences_option(min_occurrences, INIT_MIN_OCCURRENCES),
        min_variants=min_variants_option(min_variants),
        output_path=out,
        top_results=top_option(top),
    )

    try:
        safe_write_file(target, render_config(options))
    except ReportWriteError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Created {target}[/green] ({project_type} preset)")
    console.print("Run [bold]tw-patterns analyze[/bold] to scan your workspace.")
