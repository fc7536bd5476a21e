import typer

from project_dashboard.cli.commands import insights, project, tag, transfer
from project_dashboard.config import get_settings
from project_dashboard.logging_config import setup_logging

app = typer.Typer(
    name="project-dashboard",
    help="Track side projects: filter, sort, tag, import and export them",
    add_completion=False,
)

# Register sub-commands
app.add_typer(project.app, name="project", help="Manage projects")
app.add_typer(tag.app, name="tag", help="Manage project tags")

app.command("import")(transfer.import_projects)
app.command()(transfer.export)
app.command()(transfer.template)
app.command()(insights.insights)


@app.callback()
def callback():
    """
    Project Dashboard
    """
    settings = get_settings()
    setup_logging(log_format=settings.log_format, log_level=settings.log_level)


if __name__ == "__main__":
    app()
