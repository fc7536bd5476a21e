"""Filter and sort options for the project view."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from .project import MAX_USEFULNESS, MIN_USEFULNESS, ProjectStatus, ProjectType

ALL = "all"

UsefulnessRating = Annotated[int, Field(ge=MIN_USEFULNESS, le=MAX_USEFULNESS)]


class FilterOptions(BaseModel):
    """Standing filters applied to the project collection.

    ``"all"`` disables the status, type and usefulness predicates.
    """

    search: str = ""
    status: ProjectStatus | Literal["all"] = ALL
    type: ProjectType | Literal["all"] = ALL
    usefulness: UsefulnessRating | Literal["all"] = ALL
    show_monetized_only: bool = False


class SortKey(str, Enum):
    NAME = "name"
    STATUS = "status"
    USEFULNESS = "usefulness"
    TYPE = "type"
    PROGRESS = "progress"
