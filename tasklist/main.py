from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.engine import make_url

from tasklist.config import SETTINGS, Settings
from tasklist.infra.db import init_db, make_engine, make_session_factory
from tasklist.infra.logging import setup_logging
from tasklist.infra.persistence import TaskPersistence
from tasklist.infra.repository import SlotRepository
from tasklist.services.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_task_store(settings: Settings = SETTINGS) -> TaskStore:
    _ensure_sqlite_dir(settings.database_url)
    engine = make_engine(settings.database_url)
    init_db(engine)
    slots = SlotRepository(make_session_factory(engine))
    return TaskStore(TaskPersistence(slots, settings.storage_key))


def main() -> TaskStore:
    setup_logging()
    store = create_task_store()
    logger.info("Task store ready with %s tasks", store.task_count)
    return store


if __name__ == "__main__":
    main()
