"""Derived views over the project collection."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from project_dashboard.models import ALL, FilterOptions, Project, SortKey


def _matches_search(project: Project, search: str) -> bool:
    needle = search.lower()
    return (
        needle in project.name.lower()
        or (project.summary is not None and needle in project.summary.lower())
        or needle in project.description.lower()
    )


def filter_projects(
    projects: Iterable[Project],
    filters: FilterOptions,
    selected_tags: Sequence[str] = (),
) -> list[Project]:
    """Return the projects matching every active filter, in collection order.

    A project passes the tag filter only when it carries all selected tags.
    """
    result = list(projects)

    if filters.search:
        result = [p for p in result if _matches_search(p, filters.search)]

    if filters.status != ALL:
        result = [p for p in result if p.status == filters.status]

    if filters.type != ALL:
        result = [p for p in result if p.type == filters.type]

    if filters.usefulness != ALL:
        result = [p for p in result if p.usefulness == filters.usefulness]

    if filters.show_monetized_only:
        result = [p for p in result if p.is_monetized]

    if selected_tags:
        result = [p for p in result if all(tag in p.tags for tag in selected_tags)]

    return result


# (sort key function, descending)
_SORT_ORDERS: dict[SortKey, tuple[Callable[[Project], Any], bool]] = {
    SortKey.NAME: (lambda p: p.name, False),
    SortKey.STATUS: (lambda p: p.status.value, False),
    SortKey.USEFULNESS: (lambda p: p.usefulness, True),
    SortKey.TYPE: (lambda p: p.type.value, False),
    SortKey.PROGRESS: (lambda p: p.progress or 0, True),
}


def sort_projects(projects: Iterable[Project], key: SortKey) -> list[Project]:
    """Return a new list ordered by ``key``; ties keep their relative order."""
    sort_key, descending = _SORT_ORDERS[SortKey(key)]
    return sorted(projects, key=sort_key, reverse=descending)


def collect_tags(projects: Iterable[Project]) -> list[str]:
    """Distinct non-empty tags across all projects, in first-seen order."""
    tags: dict[str, None] = {}
    for project in projects:
        tags.update((tag, None) for tag in project.tags if tag)
    return list(tags)
