"""CLI interface for DNA Matrix."""

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import get_config
from .logging import configure_logging
from .models.grid import ComparisonGrid, ComparisonMetric
from .session import MatchSession

app = typer.Typer(
    name="dna-matrix",
    help="Compare DNA matches from a per-segment match export",
    add_completion=False,
)
console = Console()


class LogLevelOption(str, Enum):
    """Accepted values for --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@app.callback()
def main(
    log_level: LogLevelOption = typer.Option(
        None, "--log-level", case_sensitive=False, help="Override DNA_MATRIX_LOG_LEVEL"
    ),
):
    """Configure logging before any command runs."""
    try:
        config = get_config()
    except ValueError as e:
        # pydantic.ValidationError is a ValueError too
        console.print(f"[red]Error: Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    configure_logging(log_level.value if log_level else config.log_level)


def _load_session(file_path: Path) -> MatchSession:
    """Load an export into a fresh session, exiting on validation errors."""
    from .exceptions import ValidationError

    if not file_path.exists():
        console.print(f"[red]Error: File not found: {file_path}[/red]")
        raise typer.Exit(1)

    session = MatchSession(get_config())
    try:
        # utf-8-sig drops the BOM some spreadsheet exports add
        dataset = session.load(file_path.read_text(encoding="utf-8-sig"))
    except ValidationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    for warning in dataset.warnings:
        console.print(f"[yellow]Skipped line {warning.line_number}: {warning.reason}[/yellow]")

    return session


@app.command()
def summary(
    file_path: Path = typer.Argument(..., help="Path to the match export"),
):
    """Show totals for a match export."""
    session = _load_session(file_path)
    dataset = session.dataset

    table = Table(title=f"Summary of {file_path.name}")
    table.add_column("Metric")
    table.add_column("Value")

    table.add_row("Segments", str(dataset.segment_count))
    table.add_row("Total cM", f"{dataset.total_centimorgans:.1f}")
    table.add_row("Matches", str(len(session.available)))
    table.add_row("Skipped Rows", str(len(dataset.warnings)))

    console.print(table)


@app.command("matches")
def list_matches(
    file_path: Path = typer.Argument(..., help="Path to the match export"),
    search: str = typer.Option("", "--search", "-s", help="Filter by name"),
    limit: int = typer.Option(None, "--limit", "-l", help="Maximum results"),
):
    """List aggregated matches."""
    session = _load_session(file_path)
    matches = session.search(search, limit)

    if not matches:
        console.print(f"[yellow]No matches found matching '{search}'[/yellow]")
        return

    table = Table(title=f"{len(session.available)} available matches")
    table.add_column("Match Name")
    table.add_column("Total cM", justify="right")
    table.add_column("Longest", justify="right")
    table.add_column("Segments", justify="right")

    for match in matches:
        table.add_row(
            match.match_name,
            f"{match.total_centimorgans:.1f}",
            f"{match.longest_segment:.1f}",
            str(match.segment_count),
        )

    console.print(table)


@app.command()
def classify(
    centimorgans: float = typer.Argument(..., min=0.0, help="Shared centiMorgans"),
):
    """Estimate the relationship range for a shared cM value."""
    from .dna.relationship import classify_relationship

    try:
        estimate = classify_relationship(centimorgans)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if estimate is None:
        console.print(f"{centimorgans:.1f} cM: [dim]No classifiable relationship[/dim]")
        return

    console.print(
        f"{centimorgans:.1f} cM: [bold {estimate.color}]{estimate.label}[/bold {estimate.color}]"
        f" (confidence: {estimate.confidence.value})"
    )


@app.command()
def compare(
    file_path: Path = typer.Argument(..., help="Path to the match export"),
    names: list[str] = typer.Argument(..., help="Match names to compare (at least 2)"),
    metric: ComparisonMetric = typer.Option(
        ComparisonMetric.RELATIONSHIP, "--metric", "-m", help="Value shown in each cell"
    ),
    synthetic: bool = typer.Option(
        False, "--synthetic", help="Use random placeholder values instead of segment overlap"
    ),
    seed: int = typer.Option(None, "--seed", help="Seed for --synthetic values"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the grid as JSON"),
):
    """Build a pairwise comparison grid for selected matches."""
    from .dna.grid import SyntheticSource
    from .exceptions import SelectionError

    session = _load_session(file_path)

    try:
        for name in names:
            session.select(name)
        grid = session.grid(metric, SyntheticSource(seed) if synthetic else None)
    except SelectionError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _display_grid(grid)

    if output:
        from .export.json_export import export_grid_json

        path = export_grid_json(grid, output)
        console.print(f"[green]Grid saved to {path}[/green]")


def _short_name(name: str) -> str:
    return f"{name[:12]}..." if len(name) > 12 else name


def _display_grid(grid: ComparisonGrid):
    """Render a comparison grid with relationship colours."""
    from .dna.grid import format_cell

    if grid.synthetic:
        console.print(
            Panel(
                "Cell values are random placeholders, not shared DNA.",
                title="[bold yellow]Synthetic Data[/bold yellow]",
            )
        )

    table = Table(
        title=f"Comparison Matrix ({grid.size} × {grid.size}) - {grid.metric.display_name}"
    )
    table.add_column("Match Name")
    for name in grid.match_names:
        table.add_column(_short_name(name), justify="center")

    for name, row in zip(grid.match_names, grid.rows):
        cells = []
        for cell in row:
            text = format_cell(cell, grid.metric)
            if cell.is_self:
                cells.append(Text(text, style="dim"))
            elif cell.relationship:
                cells.append(Text(text, style=f"bold white on {cell.relationship.color}"))
            else:
                cells.append(Text(text))
        table.add_row(name, *cells)

    console.print(table)


if __name__ == "__main__":
    app()
