from __future__ import annotations

from collections.abc import Sequence

from .entities import Task
from .enums import FilterMode, SortMode
from .filters import ViewSelection


def _matches_query(task: Task, needle: str) -> bool:
    return needle in task.title.lower()


def _matches_filter(task: Task, filter_mode: FilterMode) -> bool:
    if filter_mode == FilterMode.DONE:
        return task.done is True
    if filter_mode == FilterMode.TODO:
        return task.done is False
    return True


def _sort(tasks: list[Task], sort_mode: SortMode) -> list[Task]:
    manual = sorted(tasks, key=lambda t: t.order)
    if sort_mode == SortMode.MANUAL:
        return manual
    # Undated tasks go last in both date modes, in manual order.
    dated = [t for t in manual if t.due_date is not None]
    undated = [t for t in manual if t.due_date is None]
    dated.sort(key=lambda t: t.due_date, reverse=sort_mode == SortMode.DATE_DESC)
    return dated + undated


def project_tasks(tasks: Sequence[Task], selection: ViewSelection) -> list[Task]:
    result = list(tasks)

    needle = (selection.query or "").strip().lower()
    if needle:
        result = [task for task in result if _matches_query(task, needle)]

    result = [task for task in result if _matches_filter(task, selection.filter_mode)]

    return _sort(result, selection.sort_mode)
