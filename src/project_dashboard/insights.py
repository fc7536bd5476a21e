"""Aggregates behind the dashboard's insight charts."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from project_dashboard.models import Project, ProjectStage


@dataclass(frozen=True)
class StageCount:
    stage: ProjectStage
    count: int


@dataclass(frozen=True)
class MonthlyProgress:
    month: str  # YYYY-MM
    progress: int


def stage_distribution(projects: Iterable[Project]) -> list[StageCount]:
    """Count projects per stage; projects without a stage count as Idea."""
    counts: dict[ProjectStage, int] = {}
    for project in projects:
        stage = project.stage or ProjectStage.IDEA
        counts[stage] = counts.get(stage, 0) + 1
    return [StageCount(stage=stage, count=count) for stage, count in counts.items()]


def progress_by_month(projects: Iterable[Project]) -> list[MonthlyProgress]:
    """Average progress of projects grouped by the month they were last updated."""
    totals: dict[str, list[int]] = {}
    for project in projects:
        if not project.last_updated or project.progress is None:
            continue
        try:
            updated = date.fromisoformat(project.last_updated)
        except ValueError:
            continue
        totals.setdefault(f"{updated:%Y-%m}", []).append(project.progress)

    return [
        MonthlyProgress(
            month=month,
            progress=int(
                (Decimal(sum(values)) / len(values)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
            ),
        )
        for month, values in sorted(totals.items())
    ]
