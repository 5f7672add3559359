from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy.exc import SQLAlchemyError

from tasklist.infra.db import init_db, make_engine, make_session_factory
from tasklist.infra.persistence import TaskPersistence
from tasklist.infra.repository import SlotRepository
from tasklist.services.task_store import TaskStore


class FakeSlots:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes += 1


class FailingSlots(FakeSlots):
    def set(self, key: str, value: str) -> None:
        raise SQLAlchemyError("disk full")


class UnreadableSlots(FakeSlots):
    def get(self, key: str) -> str | None:
        raise SQLAlchemyError("database is locked")


@pytest.fixture()
def slots() -> FakeSlots:
    return FakeSlots()


@pytest.fixture()
def store(slots: FakeSlots) -> TaskStore:
    return TaskStore(TaskPersistence(slots))


@pytest.fixture()
def sqlite_slots(tmp_path: Path) -> SlotRepository:
    engine = make_engine(f"sqlite:///{(tmp_path / 'tasks.db').as_posix()}")
    init_db(engine)
    return SlotRepository(make_session_factory(engine))
