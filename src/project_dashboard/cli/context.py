from rich.console import Console

from project_dashboard.config import Settings, get_settings
from project_dashboard.dashboard import Dashboard
from project_dashboard.logging_config import get_logger
from project_dashboard.notifications import ConsoleNotifier
from project_dashboard.storage import JsonFileStore

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)


def get_dashboard(settings: Settings | None = None) -> Dashboard:
    """Build a dashboard over the configured file store and load it."""
    settings = settings or get_settings()
    store = JsonFileStore(settings.data_dir, settings.store_key)
    logger.debug("dashboard_opening", path=str(store.path))
    dashboard = Dashboard(store, ConsoleNotifier(err_console))
    dashboard.load()
    return dashboard


def print_error(error: Exception | str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {error}", highlight=False)
