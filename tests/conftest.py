from datetime import date

import pytest
import structlog

from project_dashboard.dashboard import Dashboard
from project_dashboard.models import Project, ProjectStatus, ProjectType
from project_dashboard.notifications import RecordingNotifier
from project_dashboard.storage import InMemoryStore, projects_to_json

FIXED_TODAY = date(2024, 3, 9)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def make_project():
    """Factory for valid projects with overridable fields."""

    def _make(**overrides) -> Project:
        data = {
            "name": "Sample",
            "description": "A sample project",
            "type": ProjectType.PERSONAL,
            "status": ProjectStatus.IDEA,
        }
        data.update(overrides)
        return Project(**data)

    return _make


@pytest.fixture
def fixed_today():
    return FIXED_TODAY


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def dashboard(store, notifier, make_project, fixed_today):
    """Dashboard holding three known projects."""
    store.save(
        projects_to_json(
            [
                make_project(id="a", name="Alpha", tags=["web"], usefulness=2, progress=10),
                make_project(
                    id="b",
                    name="Beta",
                    type=ProjectType.SELL,
                    status=ProjectStatus.LIVE,
                    is_monetized=True,
                    tags=["web", "paid"],
                    usefulness=5,
                ),
                make_project(id="c", name="Gamma", usefulness=4, progress=60),
            ]
        )
    )
    board = Dashboard(store, notifier, today=lambda: fixed_today)
    board.load()
    return board
