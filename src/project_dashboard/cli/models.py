"""Pydantic models for CLI input validation."""

from pydantic import BaseModel, Field

from project_dashboard.models import ProjectStatus, ProjectType
from project_dashboard.models.project import MAX_USEFULNESS, MIN_USEFULNESS


class ProjectCreate(BaseModel):
    """Model for manual project creation.

    The id is generated by the dashboard; usefulness typed by hand must be in
    range rather than silently defaulted.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Project name",
        examples=["Recipe Manager"],
    )
    description: str = Field(..., min_length=1, description="What the project is")
    type: ProjectType
    status: ProjectStatus
    usefulness: int = Field(default=3, ge=MIN_USEFULNESS, le=MAX_USEFULNESS)


class TagName(BaseModel):
    tag: str = Field(..., min_length=1, pattern=r"\S", description="Tag label")
