"""Import and export commands."""

from enum import Enum
from pathlib import Path

import typer

from project_dashboard.cli.context import console, get_dashboard, print_error
from project_dashboard.config import get_settings
from project_dashboard.exceptions import DashboardError
from project_dashboard.exporters import export_csv, export_json, read_csv_upload, write_template
from project_dashboard.models import ALL, FilterOptions
from project_dashboard.reconciler import ImportSummary
from project_dashboard.validation import validate


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


STDIN_PATH = "-"


def import_projects(
    path: Path = typer.Argument(
        ..., help="CSV file to import, or '-' to read CSV text from stdin"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Import without confirmation"),
):
    """Import projects from a CSV file or from CSV text piped to stdin.

    First row should contain headers. Use semicolons (;) to separate items
    within list fields like tags and activityLog.
    """
    from_stdin = str(path) == STDIN_PATH
    if from_stdin and not yes:
        # The prompt would read from the already consumed stream
        print_error("Reading CSV from stdin requires --yes")
        raise typer.Exit(1)

    def confirm(summary: ImportSummary) -> bool:
        console.print(f"[bold]Confirm Import[/bold]\n{summary.describe()}")
        return yes or typer.confirm("Import projects?", abort=True)

    try:
        if from_stdin:
            csv_content = typer.get_text_stream("stdin").read()
        else:
            csv_content = read_csv_upload(path)
        outcome = get_dashboard().import_csv(csv_content, confirm)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e

    if not outcome.committed:
        raise typer.Exit(1)


@validate(FilterOptions)
def export(
    export_format: ExportFormat = typer.Option(
        ExportFormat.JSON, "--format", "-f", help="Export format"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Target directory"),
    search: str = typer.Option("", "--search", "-s"),
    status: str = typer.Option(ALL, "--status"),
    type: str = typer.Option(ALL, "--type"),
    usefulness: str = typer.Option(ALL, "--usefulness", "-u"),
    show_monetized_only: bool = typer.Option(False, "--monetized"),
    tags: list[str] | None = typer.Option(None, "--tag", "-t"),
):
    """Export the (filtered) projects to a dated JSON or CSV file."""
    filters = FilterOptions(
        search=search,
        status=status,
        type=type,
        usefulness=usefulness,
        show_monetized_only=show_monetized_only,
    )
    dashboard = get_dashboard()
    projects = dashboard.visible(filters, tags or [])
    directory = output or get_settings().export_dir

    try:
        if export_format is ExportFormat.CSV:
            path = export_csv(projects, directory)
        else:
            path = export_json(projects, directory)
    except OSError as e:
        print_error(e)
        raise typer.Exit(1) from e

    dashboard.notifier.notify("success", f"Projects exported as {export_format.value.upper()}")
    console.print(f"Wrote [cyan]{path}[/cyan]")


def template(
    output: Path | None = typer.Option(None, "--output", "-o", help="Target directory"),
):
    """Write an example CSV showing every supported column."""
    try:
        path = write_template(output or get_settings().export_dir)
    except OSError as e:
        print_error(e)
        raise typer.Exit(1) from e

    console.print(f"[bold green]✓ Template downloaded successfully![/bold green] {path}")
