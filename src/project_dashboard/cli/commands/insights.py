from dataclasses import asdict
import json as json_lib

from rich.table import Table
import typer

from project_dashboard.cli.context import console, get_dashboard
from project_dashboard.insights import progress_by_month, stage_distribution


def insights(json_output: bool = typer.Option(False, "--json", help="Output as JSON")):
    """Show stage distribution and average progress per month."""
    projects = get_dashboard().projects
    stages = stage_distribution(projects)
    monthly = progress_by_month(projects)

    if json_output:
        payload = {
            "stages": [{"name": s.stage.value, "value": s.count} for s in stages],
            "progress": [asdict(m) for m in monthly],
        }
        typer.echo(json_lib.dumps(payload, indent=2))
        return

    stage_table = Table(title="Project Stages")
    stage_table.add_column("Stage", style="magenta")
    stage_table.add_column("Projects", justify="right")
    for s in stages:
        stage_table.add_row(s.stage.value, str(s.count))
    console.print(stage_table)

    progress_table = Table(title="Average Progress")
    progress_table.add_column("Month", style="cyan")
    progress_table.add_column("Progress", justify="right")
    for m in monthly:
        progress_table.add_row(m.month, f"{m.progress}%")
    console.print(progress_table)
