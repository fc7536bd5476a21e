"""Merge decoded CSV imports into the project collection."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import structlog

from project_dashboard.models import CSVImportResult, Project, generate_project_id
from project_dashboard.notifications import Notifier

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ImportSummary:
    """What an import would do, shown before it is committed."""

    successful: int
    failed: int

    def describe(self) -> str:
        text = f"This will import {self.successful} projects."
        if self.failed:
            text += f" {self.failed} rows could not be imported."
        return text


@dataclass
class ImportOutcome:
    projects: list[Project]
    imported: int
    failed: int
    committed: bool


ConfirmImport = Callable[[ImportSummary], bool]


def assign_unique_ids(existing: Iterable[Project], incoming: Iterable[Project]) -> list[Project]:
    """Give every incoming project an id unused by the collection and the batch."""
    taken = {project.id for project in existing}
    accepted: list[Project] = []

    for project in incoming:
        project_id = project.id
        while not project_id or project_id in taken:
            project_id = generate_project_id()

        if project_id != project.id:
            logger.debug("import_id_reassigned", old_id=project.id, new_id=project_id)
            project = project.model_copy(update={"id": project_id})

        taken.add(project_id)
        accepted.append(project)

    return accepted


def reconcile_import(
    existing: Sequence[Project],
    result: CSVImportResult,
    confirm: ConfirmImport,
    notifier: Notifier,
) -> ImportOutcome:
    """Apply a decoded import to a collection snapshot.

    Nothing is merged when no row decoded successfully or when ``confirm``
    declines. Otherwise the accepted projects are appended after the existing
    ones; ``existing`` itself is never modified.
    """
    if not result.successful:
        notifier.notify("error", f"Import failed: {', '.join(result.errors)}")
        logger.warning("import_rejected", failed=result.failed, errors=result.errors)
        return ImportOutcome(
            projects=list(existing), imported=0, failed=result.failed, committed=False
        )

    summary = ImportSummary(successful=len(result.successful), failed=result.failed)
    if not confirm(summary):
        logger.info("import_cancelled", successful=summary.successful, failed=summary.failed)
        return ImportOutcome(
            projects=list(existing), imported=0, failed=result.failed, committed=False
        )

    accepted = assign_unique_ids(existing, result.successful)
    projects = [*existing, *accepted]

    notifier.notify("success", f"Successfully imported {len(accepted)} projects")
    logger.info("projects_imported", imported=len(accepted), total=len(projects))

    if result.failed:
        notifier.notify("warning", f"Failed to import {result.failed} projects")
        for error in result.errors:
            logger.warning("import_row_failed", error=error)

    return ImportOutcome(
        projects=projects, imported=len(accepted), failed=result.failed, committed=True
    )
