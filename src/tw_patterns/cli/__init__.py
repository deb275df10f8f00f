"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="tw-patterns",
    help="tw-pattern-analyzer - find repeated Tailwind class patterns worth extracting",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit",
    ),
):
    if version:
        console.print(f"[bold cyan]tw-pattern-analyzer[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .init import init as _init  # noqa: F401, E402


def main() -> None:
    app()
