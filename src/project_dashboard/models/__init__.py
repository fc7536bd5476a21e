"""Pydantic models for the project dashboard."""

from .filters import ALL, FilterOptions, SortKey
from .project import (
    CSVImportResult,
    Project,
    ProjectStage,
    ProjectStatus,
    ProjectType,
    clamp_progress,
    generate_project_id,
)

__all__ = [
    "ALL",
    "CSVImportResult",
    "FilterOptions",
    "Project",
    "ProjectStage",
    "ProjectStatus",
    "ProjectType",
    "SortKey",
    "clamp_progress",
    "generate_project_id",
]
