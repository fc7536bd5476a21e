import json as json_lib

from pydantic import ValidationError
from rich.table import Table
import typer

from project_dashboard.cli.context import console, get_dashboard, print_error
from project_dashboard.cli.models import ProjectCreate
from project_dashboard.exceptions import DashboardError
from project_dashboard.models import (
    ALL,
    FilterOptions,
    Project,
    ProjectStage,
    ProjectStatus,
    ProjectType,
    SortKey,
)
from project_dashboard.storage import projects_to_json
from project_dashboard.validation import validate

app = typer.Typer()

STATUS_COLORS = {
    ProjectStatus.IDEA: "magenta",
    ProjectStatus.IN_PROGRESS: "blue",
    ProjectStatus.LIVE: "green",
    ProjectStatus.ABANDONED: "red",
}


def render_projects(projects: list[Project], title: str = "Projects") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Status")
    table.add_column("Type")
    table.add_column("Useful", justify="right")
    table.add_column("Progress", justify="right")
    table.add_column("Tags")

    for p in projects:
        color = STATUS_COLORS[p.status]
        table.add_row(
            p.id,
            p.name,
            f"[{color}]{p.status.value}[/{color}]",
            p.type.value,
            str(p.usefulness),
            f"{p.progress or 0}%",
            ", ".join(p.tags),
        )
    return table


def _echo_project(project: Project) -> None:
    typer.echo(json_lib.dumps(project.to_record(), indent=2))


@app.command("list")
@validate(FilterOptions)
def list_projects(
    search: str = typer.Option("", "--search", "-s", help="Text in name, summary or description"),
    status: str = typer.Option(ALL, "--status", help="Status to show, or 'all'"),
    type: str = typer.Option(ALL, "--type", help="Project type to show, or 'all'"),
    usefulness: str = typer.Option(ALL, "--usefulness", "-u", help="Rating 1-5, or 'all'"),
    show_monetized_only: bool = typer.Option(False, "--monetized", help="Only monetized projects"),
    tags: list[str] | None = typer.Option(None, "--tag", "-t", help="Required tag (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List projects matching the given filters."""
    filters = FilterOptions(
        search=search,
        status=status,
        type=type,
        usefulness=usefulness,
        show_monetized_only=show_monetized_only,
    )
    projects = get_dashboard().visible(filters, tags or [])

    if json_output:
        typer.echo(projects_to_json(projects))
        return

    if not projects:
        console.print("[yellow]No projects match the current filters.[/yellow]")
        return
    console.print(render_projects(projects))


@app.command()
def show(
    project_id: str,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show details of a specific project."""
    try:
        project = get_dashboard().get_project(project_id)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e

    if json_output:
        _echo_project(project)
        return

    color = STATUS_COLORS[project.status]
    console.print(f"[bold]{project.name}[/bold] (#{project.id})")
    if project.summary:
        console.print(f"[italic]{project.summary}[/italic]")
    console.print(project.description)
    console.print(f"Status: [{color}]{project.status.value}[/{color}]  Type: {project.type.value}")
    if project.stage:
        console.print(f"Stage: {project.stage.value}")
    console.print(f"Usefulness: {project.usefulness}/5  Progress: {project.progress or 0}%")
    console.print(f"Monetized: {'Yes' if project.is_monetized else 'No'}")
    for label, value in (
        ("GitHub", project.github_url),
        ("Website", project.website_url),
        ("Next action", project.next_action),
        ("Updated", project.last_updated),
    ):
        if value:
            console.print(f"{label}: {value}")
    if project.tags:
        console.print(f"Tags: [cyan]{', '.join(project.tags)}[/cyan]")
    if project.activity_log:
        console.print(f"Activity Log ({len(project.activity_log)}):")
        for entry in project.activity_log:
            console.print(f"  • {entry}", highlight=False)


@app.command()
@validate(ProjectCreate)
def add(
    name: str = typer.Option(..., "--name", "-n", help="Project name"),
    description: str = typer.Option(..., "--description", "-d", help="Project description"),
    type: ProjectType = typer.Option(ProjectType.PERSONAL, "--type", help="Project type"),
    status: ProjectStatus = typer.Option(ProjectStatus.IDEA, "--status", help="Project status"),
    usefulness: int = typer.Option(3, "--usefulness", "-u", help="Usefulness rating 1-5"),
    summary: str | None = typer.Option(None, "--summary", help="One-line summary"),
    stage: ProjectStage | None = typer.Option(None, "--stage", help="Project stage"),
    monetized: bool = typer.Option(False, "--monetized", help="Project makes money"),
    github_url: str | None = typer.Option(None, "--github-url"),
    website_url: str | None = typer.Option(None, "--website-url"),
    next_action: str | None = typer.Option(None, "--next-action"),
    last_updated: str | None = typer.Option(None, "--last-updated", help="YYYY-MM-DD"),
    progress: int | None = typer.Option(None, "--progress", "-p", help="Progress 0-100"),
    tags: list[str] | None = typer.Option(None, "--tag", "-t", help="Tag (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Add a new project. The project ID is generated automatically."""
    try:
        project = Project(
            name=name,
            description=description,
            type=type,
            status=status,
            usefulness=usefulness,
            summary=summary,
            stage=stage,
            is_monetized=monetized,
            github_url=github_url,
            website_url=website_url,
            next_action=next_action,
            last_updated=last_updated,
            progress=progress,
            tags=tags or [],
        )
        project = get_dashboard().add_project(project)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e

    if json_output:
        _echo_project(project)
        return
    console.print(f"ID: [cyan]{project.id}[/cyan]")


@app.command()
def update(
    project_id: str,
    name: str | None = typer.Option(None, "--name", "-n"),
    description: str | None = typer.Option(None, "--description", "-d"),
    type: ProjectType | None = typer.Option(None, "--type"),
    status: ProjectStatus | None = typer.Option(None, "--status"),
    usefulness: int | None = typer.Option(None, "--usefulness", "-u"),
    summary: str | None = typer.Option(None, "--summary"),
    stage: ProjectStage | None = typer.Option(None, "--stage"),
    monetized: bool | None = typer.Option(None, "--monetized/--not-monetized"),
    github_url: str | None = typer.Option(None, "--github-url"),
    website_url: str | None = typer.Option(None, "--website-url"),
    next_action: str | None = typer.Option(None, "--next-action"),
    last_updated: str | None = typer.Option(None, "--last-updated", help="YYYY-MM-DD"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Update fields of an existing project."""
    changes = {
        "name": name,
        "description": description,
        "type": type,
        "status": status,
        "usefulness": usefulness,
        "summary": summary,
        "stage": stage,
        "is_monetized": monetized,
        "github_url": github_url,
        "website_url": website_url,
        "next_action": next_action,
        "last_updated": last_updated,
    }
    changes = {k: v for k, v in changes.items() if v is not None}

    try:
        project = get_dashboard().edit_project(project_id, **changes)
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            typer.echo(f"✗ {loc}: {err['msg']}", err=True)
        raise typer.Exit(1) from e
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e

    if json_output:
        _echo_project(project)


@app.command()
def delete(
    project_id: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete a project."""
    try:
        dashboard = get_dashboard()
        project = dashboard.get_project(project_id)
        if not yes and not typer.confirm(f"Delete project '{project.name}'?"):
            raise typer.Abort()
        dashboard.delete_project(project_id)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e


@app.command()
def sort(
    key: SortKey = typer.Argument(..., help="Field to sort the collection by"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Reorder the stored collection by one field."""
    try:
        projects = get_dashboard().sort(key)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e

    if json_output:
        typer.echo(projects_to_json(projects))
        return
    console.print(render_projects(projects))


@app.command()
def progress(project_id: str, value: int = typer.Argument(..., help="Progress 0-100")):
    """Set a project's progress; values outside 0-100 are clamped."""
    try:
        project = get_dashboard().set_progress(project_id, value)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e

    console.print(f"{project.name}: [green]{project.progress}%[/green]")


@app.command()
def log(project_id: str, entry: str = typer.Argument(..., help="What did you accomplish?")):
    """Add a dated entry to a project's activity log."""
    try:
        get_dashboard().log_activity(project_id, entry)
    except DashboardError as e:
        print_error(e)
        raise typer.Exit(1) from e
