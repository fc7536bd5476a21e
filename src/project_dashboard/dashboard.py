"""The dashboard owns the canonical project collection.

Every mutation builds a new collection value, swaps it in as a whole and
writes the full snapshot back to the store.
"""

from collections.abc import Callable, Sequence
from datetime import date

from pydantic import ValidationError
import structlog

from project_dashboard.csv_codec import parse_csv_to_projects
from project_dashboard.exceptions import DuplicateTagError, ProjectNotFoundError, StoreError
from project_dashboard.filters import collect_tags, filter_projects, sort_projects
from project_dashboard.models import FilterOptions, Project, SortKey, clamp_progress
from project_dashboard.notifications import ConsoleNotifier, Notifier
from project_dashboard.reconciler import (
    ConfirmImport,
    ImportOutcome,
    assign_unique_ids,
    reconcile_import,
)
from project_dashboard.seed import seed_projects
from project_dashboard.storage import BlobStore, projects_from_json, projects_to_json

logger = structlog.get_logger(__name__)


class Dashboard:
    def __init__(
        self,
        store: BlobStore,
        notifier: Notifier | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.notifier = notifier or ConsoleNotifier()
        self._today = today
        self._projects: list[Project] = []

    @property
    def projects(self) -> list[Project]:
        return list(self._projects)

    def load(self) -> list[Project]:
        """Load the stored collection, falling back to the seed projects.

        A missing, unreadable or malformed blob never fails the load.
        """
        try:
            blob = self.store.load()
        except StoreError as e:
            logger.error("projects_load_failed", error=str(e))
            blob = None

        if blob is None:
            logger.info("projects_seeded")
            self._projects = seed_projects()
            return self.projects

        try:
            self._projects = projects_from_json(blob)
        except ValidationError as e:
            logger.error("projects_load_failed", error=str(e))
            self._projects = seed_projects()
        return self.projects

    def _commit(self, projects: Sequence[Project]) -> None:
        self._projects = list(projects)
        self.store.save(projects_to_json(self._projects))

    # === Queries ===

    def visible(
        self, filters: FilterOptions | None = None, selected_tags: Sequence[str] = ()
    ) -> list[Project]:
        return filter_projects(self._projects, filters or FilterOptions(), selected_tags)

    def tags(self) -> list[str]:
        return collect_tags(self._projects)

    def get_project(self, project_id: str) -> Project:
        for project in self._projects:
            if project.id == project_id:
                return project
        raise ProjectNotFoundError(project_id)

    # === Mutations ===

    def add_project(self, project: Project) -> Project:
        (project,) = assign_unique_ids(self._projects, [project])
        self._commit([*self._projects, project])
        self.notifier.notify("success", "Project added successfully")
        logger.info("project_added", project_id=project.id)
        return project

    def update_project(self, project: Project) -> Project:
        """Replace the project with the same id."""
        self.get_project(project.id)
        self._commit([project if p.id == project.id else p for p in self._projects])
        logger.info("project_updated", project_id=project.id)
        return project

    def edit_project(self, project_id: str, **changes) -> Project:
        """Update selected fields of a project, re-validating the whole record."""
        current = self.get_project(project_id)
        updated = Project.model_validate({**current.model_dump(), **changes, "id": project_id})
        self.update_project(updated)
        self.notifier.notify("success", "Project updated successfully")
        return updated

    def delete_project(self, project_id: str) -> None:
        self.get_project(project_id)
        self._commit([p for p in self._projects if p.id != project_id])
        self.notifier.notify("success", "Project deleted successfully")
        logger.info("project_deleted", project_id=project_id)

    def sort(self, key: SortKey) -> list[Project]:
        key = SortKey(key)
        self._commit(sort_projects(self._projects, key))
        self.notifier.notify("info", f"Sorted projects by {key.value}")
        return self.projects

    def import_csv(self, csv_content: str, confirm: ConfirmImport) -> ImportOutcome:
        result = parse_csv_to_projects(csv_content)
        outcome = reconcile_import(self._projects, result, confirm, self.notifier)
        if outcome.committed:
            self._commit(outcome.projects)
        return outcome

    def set_progress(self, project_id: str, progress: int) -> Project:
        project = self.get_project(project_id)
        updated = project.model_copy(update={"progress": clamp_progress(progress)})
        return self.update_project(updated)

    def log_activity(self, project_id: str, entry: str) -> Project:
        """Prepend a dated entry to the activity log; blank entries are ignored."""
        project = self.get_project(project_id)
        entry = entry.strip()
        if not entry:
            return project

        log_entry = f"{self._today().isoformat()}: {entry}"
        updated = self.update_project(
            project.model_copy(update={"activity_log": [log_entry, *project.activity_log]})
        )
        self.notifier.notify("success", "Activity logged")
        return updated

    def add_tag(self, project_id: str, tag: str) -> Project:
        project = self.get_project(project_id)
        tag = tag.strip()
        if not tag:
            return project
        if tag in project.tags:
            raise DuplicateTagError(tag)

        updated = self.update_project(project.model_copy(update={"tags": [*project.tags, tag]}))
        self.notifier.notify("success", "Tag added")
        return updated

    def remove_tag(self, project_id: str, tag: str) -> Project:
        project = self.get_project(project_id)
        updated = self.update_project(
            project.model_copy(update={"tags": [t for t in project.tags if t != tag]})
        )
        self.notifier.notify("success", "Tag removed")
        return updated
