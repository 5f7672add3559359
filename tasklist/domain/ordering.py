from __future__ import annotations

from collections.abc import Sequence

from .entities import Task


def manual_sequence(tasks: Sequence[Task]) -> list[Task]:
    return sorted(tasks, key=lambda task: task.order)


def reconcile_order(tasks: Sequence[Task]) -> list[Task]:
    sequence = manual_sequence(tasks)
    _renumber(sequence)
    return sequence


def move_task(tasks: Sequence[Task], task_id: str, target_id: str) -> bool:
    if task_id == target_id:
        return False
    sequence = manual_sequence(tasks)
    moved = _find(sequence, task_id)
    target = _find(sequence, target_id)
    if moved is None or target is None:
        return False

    sequence.remove(moved)
    sequence.insert(sequence.index(target), moved)
    _renumber(sequence)
    return True


def _find(sequence: list[Task], task_id: str) -> Task | None:
    return next((task for task in sequence if task.id == task_id), None)


def _renumber(sequence: list[Task]) -> None:
    for index, task in enumerate(sequence, start=1):
        task.order = index
