from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import replace

from tasklist.domain.entities import Task
from tasklist.domain.enums import FilterMode, SortMode
from tasklist.domain.filters import ViewSelection
from tasklist.domain.ordering import move_task, reconcile_order
from tasklist.domain.projection import project_tasks
from tasklist.domain.validation import normalize_date, normalize_title
from tasklist.infra.persistence import TaskPersistence

logger = logging.getLogger(__name__)

Listener = Callable[["TaskStore"], None]


def _new_task_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    def __init__(self, persistence: TaskPersistence) -> None:
        self._persistence = persistence
        self._tasks: list[Task] = persistence.load()
        reconcile_order(self._tasks)
        self._selection = ViewSelection()
        self._listeners: list[Listener] = []

    @property
    def tasks(self) -> list[Task]:
        return [replace(task) for task in self._tasks]

    @property
    def selection(self) -> ViewSelection:
        return self._selection

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    @property
    def is_empty(self) -> bool:
        return not self._tasks

    def get_task(self, task_id: str) -> Task | None:
        task = self._find(task_id)
        return replace(task) if task else None

    def view(self) -> tuple[Task, ...]:
        return tuple(replace(task) for task in project_tasks(self._tasks, self._selection))

    def get_stats(self) -> dict[str, int]:
        done = sum(1 for task in self._tasks if task.done)
        return {
            "total": len(self._tasks),
            "done": done,
            "todo": len(self._tasks) - done,
        }

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add(self, title: str, due_date: str | None = None) -> None:
        normalized = normalize_title(title)
        if normalized is None:
            logger.debug("Rejected task title on add")
            return
        next_order = max((task.order for task in self._tasks), default=0)
        task = Task(
            id=_new_task_id(),
            title=normalized,
            due_date=normalize_date(due_date),
            done=False,
            order=max(next_order, 0) + 1,
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s order=%s", task.id, task.order)
        self._commit(structural=True)

    def edit(self, task_id: str, title: str, due_date: str | None = None) -> None:
        task = self._find(task_id)
        if not task:
            return
        normalized = normalize_title(title)
        if normalized is None:
            logger.debug("Rejected task title on edit id=%s", task_id)
            return
        task.title = normalized
        task.due_date = normalize_date(due_date)
        self._commit(structural=False)

    def toggle_done(self, task_id: str, checked: bool) -> None:
        task = self._find(task_id)
        if not task:
            return
        task.done = bool(checked)
        self._commit(structural=False)

    def delete(self, task_id: str) -> None:
        task = self._find(task_id)
        if not task:
            return
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)
        self._commit(structural=True)

    def move(self, task_id: str, target_id: str) -> None:
        if not move_task(self._tasks, task_id, target_id):
            return
        # move_task already left the ranks dense.
        self._commit(structural=False)

    def set_query(self, text: str | None) -> None:
        if text is not None and not isinstance(text, str):
            logger.debug("Ignoring non-text query %r", text)
            return
        self._selection = replace(self._selection, query=text or "")
        self._notify()

    def set_filter(self, mode: str) -> None:
        try:
            filter_mode = FilterMode(mode)
        except ValueError:
            logger.debug("Ignoring unknown filter mode %r", mode)
            return
        self._selection = replace(self._selection, filter_mode=filter_mode)
        self._notify()

    def set_sort(self, mode: str) -> None:
        try:
            sort_mode = SortMode(mode)
        except ValueError:
            logger.debug("Ignoring unknown sort mode %r", mode)
            return
        self._selection = replace(self._selection, sort_mode=sort_mode)
        self._notify()

    def _find(self, task_id: str) -> Task | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    def _commit(self, *, structural: bool) -> None:
        if structural:
            reconcile_order(self._tasks)
        self._persistence.save(self._tasks)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:  # noqa: BLE001
                logger.exception("Task store listener %r failed", listener)
