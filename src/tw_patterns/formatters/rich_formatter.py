"""Rich terminal formatter: summary line and top-N cluster table."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import DEFAULT_CONSOLE_TOP
from ..models import Report
from .base import BaseFormatter


def _likelihood_label(likelihood: int) -> str:
    if likelihood >= 75:
        return f"[red bold]{likelihood}%[/red bold]"
    elif likelihood >= 50:
        return f"[yellow]{likelihood}%[/yellow]"
    elif likelihood >= 25:
        return f"[cyan]{likelihood}%[/cyan]"
    else:
        return f"[dim]{likelihood}%[/dim]"


class RichFormatter(BaseFormatter):
    """Tabular preview of the highest-ranked clusters."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: Report, top: Optional[int] = None) -> None:
        top = DEFAULT_CONSOLE_TOP if top is None else top
        self.console.print(self._summary(report))
        if not report.clusters:
            self.console.print("[yellow]No class patterns found.[/yellow]")
            return
        self.console.print(self._table(report, top))

    def format(self, report: Report, top: Optional[int] = None) -> str:
        # Render into a capture buffer so the table can be embedded elsewhere
        with self.console.capture() as capture:
            self.render(report, top)
        return capture.get()

    def _summary(self, report: Report) -> str:
        text = (
            f"Scanned [bold]{report.total_files}[/bold] files  |  "
            f"[cyan]{report.total_class_lists}[/cyan] class lists  |  "
            f"[cyan]{report.unique_patterns}[/cyan] unique patterns  |  "
            f"[yellow]{len(report.clusters)}[/yellow] clusters"
        )
        if report.failed_files:
            text += f"  |  [red]{len(report.failed_files)} unreadable[/red]"
        return text

    def _table(self, report: Report, top: int) -> Table:
        shown = report.clusters[:top]
        table = Table(title=f"Top {len(shown)} Class Pattern Clusters", expand=False)
        table.add_column("#", style="dim", width=4)
        table.add_column("Occurrences", justify="right")
        table.add_column("Variants", justify="right")
        table.add_column("Likelihood", justify="right")
        table.add_column("Sample", style="green", no_wrap=False)

        for i, cluster in enumerate(shown, 1):
            table.add_row(
                str(i),
                str(cluster.occurrences),
                str(cluster.variant_count),
                _likelihood_label(cluster.likelihood),
                # Arbitrary-value classes like w-[200px] look like markup
                escape(cluster.representative),
            )
        return table
