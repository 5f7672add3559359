from __future__ import annotations

import json
import logging
import math
from collections.abc import Sequence
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from tasklist.config import DEFAULT_STORAGE_KEY
from tasklist.domain.entities import Task
from tasklist.domain.ordering import reconcile_order
from tasklist.domain.validation import normalize_date

from .repository import SlotRepository

logger = logging.getLogger(__name__)


def _task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "dueDate": task.due_date,
        "done": task.done,
        "order": task.order,
    }


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _coerce_id(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _coerce_done(value: Any) -> bool:
    if value is True:
        return True
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return _is_finite_number(value) and value == 1


def _repair_entry(raw: Any, position: int) -> Task | None:
    if not isinstance(raw, dict):
        return None
    raw_id = raw.get("id")
    if raw_id is None:
        return None

    raw_title = raw.get("title")
    raw_order = raw.get("order")
    return Task(
        id=_coerce_id(raw_id),
        title="" if raw_title is None else str(raw_title),
        due_date=normalize_date(raw.get("dueDate")),
        done=_coerce_done(raw.get("done")),
        order=raw_order if _is_finite_number(raw_order) else position,
    )


def repair_records(records: Sequence[Any]) -> list[Task]:
    tasks: list[Task] = []
    seen: set[str] = set()
    for position, raw in enumerate(records, start=1):
        task = _repair_entry(raw, position)
        if task is None:
            logger.warning("Dropping unrecoverable task entry at position %s", position)
            continue
        # First entry wins; later ones with the same id are dropped.
        if task.id in seen:
            logger.warning("Dropping duplicate task id=%s at position %s", task.id, position)
            continue
        seen.add(task.id)
        tasks.append(task)
    reconcile_order(tasks)
    return tasks


class TaskPersistence:
    def __init__(self, slots: SlotRepository, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._slots = slots
        self._storage_key = storage_key

    def save(self, tasks: Sequence[Task]) -> bool:
        try:
            payload = json.dumps([_task_to_record(task) for task in tasks], ensure_ascii=False)
            self._slots.set(self._storage_key, payload)
        except (SQLAlchemyError, OSError, TypeError, ValueError):
            logger.exception("Failed to save %s tasks to slot %r", len(tasks), self._storage_key)
            return False
        logger.debug("Saved %s tasks to slot %r", len(tasks), self._storage_key)
        return True

    def load(self) -> list[Task]:
        try:
            raw = self._slots.get(self._storage_key)
        except (SQLAlchemyError, OSError):
            logger.exception("Failed to read slot %r; starting with an empty list", self._storage_key)
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError):
            logger.warning("Slot %r does not hold valid JSON; starting with an empty list", self._storage_key)
            return []
        if not isinstance(data, list):
            logger.warning("Slot %r does not hold a task list; starting with an empty list", self._storage_key)
            return []

        tasks = repair_records(data)
        logger.info("Loaded %s tasks from slot %r", len(tasks), self._storage_key)
        return tasks
