from __future__ import annotations

from dataclasses import replace

from tasklist.domain.entities import Task
from tasklist.domain.enums import FilterMode, SortMode
from tasklist.domain.filters import ViewSelection
from tasklist.domain.projection import project_tasks


def _sample() -> list[Task]:
    return [
        Task(id="1", title="Buy milk", due_date="2026-01-10", done=False, order=1),
        Task(id="2", title="Buy bread", due_date="2026-01-05", done=True, order=2),
    ]


def test_query_filter_and_sort_compose() -> None:
    selection = ViewSelection(query="buy", filter_mode=FilterMode.TODO, sort_mode=SortMode.DATE_ASC)

    result = project_tasks(_sample(), selection)

    assert [t.title for t in result] == ["Buy milk"]


def test_query_is_trimmed_and_case_insensitive() -> None:
    tasks = [Task(id="1", title="Äpfel kaufen", order=1), Task(id="2", title="Other", order=2)]

    result = project_tasks(tasks, ViewSelection(query="  äPFEL "))

    assert [t.id for t in result] == ["1"]


def test_query_uses_plain_lowercase_matching() -> None:
    tasks = [Task(id="1", title="Straße fegen", order=1)]

    assert project_tasks(tasks, ViewSelection(query="STRASSE")) == []
    assert [t.id for t in project_tasks(tasks, ViewSelection(query="STRAßE"))] == ["1"]


def test_blank_query_keeps_everything() -> None:
    assert len(project_tasks(_sample(), ViewSelection(query="   "))) == 2


def test_done_filter() -> None:
    result = project_tasks(_sample(), ViewSelection(filter_mode=FilterMode.DONE))

    assert [t.id for t in result] == ["2"]


def test_manual_sort_uses_order() -> None:
    tasks = [Task(id="a", title="a", order=3), Task(id="b", title="b", order=1), Task(id="c", title="c", order=2)]

    result = project_tasks(tasks, ViewSelection())

    assert [t.id for t in result] == ["b", "c", "a"]


def test_date_sorts_put_undated_last() -> None:
    tasks = [
        Task(id="none", title="n", due_date=None, order=1),
        Task(id="late", title="l", due_date="2026-03-01", order=2),
        Task(id="early", title="e", due_date="2025-12-31", order=3),
    ]

    ascending = project_tasks(tasks, ViewSelection(sort_mode=SortMode.DATE_ASC))
    descending = project_tasks(tasks, ViewSelection(sort_mode=SortMode.DATE_DESC))

    assert [t.id for t in ascending] == ["early", "late", "none"]
    assert [t.id for t in descending] == ["late", "early", "none"]


def test_projection_does_not_touch_input() -> None:
    tasks = _sample()
    before = [replace(t) for t in tasks]

    result = project_tasks(tasks, ViewSelection(sort_mode=SortMode.DATE_ASC))

    assert tasks == before
    assert result is not tasks
    assert [t.id for t in tasks] == ["1", "2"]
