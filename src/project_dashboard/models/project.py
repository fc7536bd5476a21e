"""Pydantic models for dashboard projects."""

from enum import Enum
from typing import Any
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_USEFULNESS = 3
MIN_USEFULNESS = 1
MAX_USEFULNESS = 5
MIN_PROGRESS = 0
MAX_PROGRESS = 100


class ProjectType(str, Enum):
    PERSONAL = "personal"
    SELL = "sell"


class ProjectStatus(str, Enum):
    IDEA = "idea"
    IN_PROGRESS = "in_progress"
    LIVE = "live"
    ABANDONED = "abandoned"


class ProjectStage(str, Enum):
    IDEA = "Idea"
    BUILD = "Build"
    LAUNCH = "Launch"
    MARKET = "Market"


def generate_project_id() -> str:
    return str(uuid.uuid4())


def clamp_progress(value: int) -> int:
    """Clamp a progress percentage into [0, 100]."""
    return min(MAX_PROGRESS, max(MIN_PROGRESS, value))


class Project(BaseModel):
    """A tracked side project.

    Serialized field names are camelCase (``isMonetized``, ``activityLog``) so
    JSON exports and CSV headers keep the dashboard's wire format; Python code
    uses the snake_case attribute names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    id: str = Field(default_factory=generate_project_id, min_length=1)
    name: str = Field(..., min_length=1, description="Project name")
    description: str = Field(..., min_length=1)
    summary: str | None = None
    type: ProjectType
    usefulness: int = Field(
        default=DEFAULT_USEFULNESS,
        description="Usefulness rating from 1 to 5",
    )
    status: ProjectStatus
    stage: ProjectStage | None = None
    is_monetized: bool = False
    github_url: str | None = None
    website_url: str | None = None
    next_action: str | None = None
    last_updated: str | None = Field(
        default=None,
        description="ISO date (YYYY-MM-DD) of the last update",
        examples=["2023-05-10"],
    )
    progress: int | None = Field(default=None, description="Progress percentage 0-100")
    activity_log: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @field_validator("usefulness", mode="before")
    @classmethod
    def default_invalid_usefulness(cls, v: Any) -> int:
        """Out-of-range or unparsable ratings fall back to the default."""
        try:
            rating = int(v)
        except (TypeError, ValueError):
            return DEFAULT_USEFULNESS
        if MIN_USEFULNESS <= rating <= MAX_USEFULNESS:
            return rating
        return DEFAULT_USEFULNESS

    @field_validator("progress")
    @classmethod
    def clamp_progress_range(cls, v: int | None) -> int | None:
        if v is None:
            return None
        return clamp_progress(v)

    @field_validator("tags")
    @classmethod
    def drop_duplicate_tags(cls, v: list[str]) -> list[str]:
        # dict preserves first-seen order
        return list(dict.fromkeys(v))

    def to_record(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CSVImportResult(BaseModel):
    """Outcome of decoding a CSV document into projects."""

    successful: list[Project] = Field(default_factory=list)
    failed: int = 0
    errors: list[str] = Field(default_factory=list)
