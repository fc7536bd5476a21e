import json as json_lib

import typer

from project_dashboard.cli.context import console, get_dashboard, print_error
from project_dashboard.cli.models import TagName
from project_dashboard.exceptions import DashboardError
from project_dashboard.validation import validate

app = typer.Typer()


@app.command("list")
def list_tags(json_output: bool = typer.Option(False, "--json", help="Output as JSON")):
    """List every tag used by any project."""
    tags = get_dashboard().tags()

    if json_output:
        typer.echo(json_lib.dumps(tags, indent=2))
        return

    if not tags:
        console.print("[yellow]No tags yet.[/yellow]")
        return
    for tag in tags:
        console.print(f"[cyan]{tag}[/cyan]")


@app.command()
@validate(TagName)
def add(
    project_id: str = typer.Argument(..., help="Project ID"),
    tag: str = typer.Argument(..., help="Tag to add"),
):
    """Add a tag to a project."""
    try:
        get_dashboard().add_tag(project_id, tag)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e


@app.command()
def remove(
    project_id: str = typer.Argument(..., help="Project ID"),
    tag: str = typer.Argument(..., help="Tag to remove"),
):
    """Remove a tag from a project."""
    try:
        get_dashboard().remove_tag(project_id, tag)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e
