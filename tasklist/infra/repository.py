from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import sessionmaker

from .models import StorageSlotModel


class SlotRepository:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        with self._session_factory() as session:
            slot = session.get(StorageSlotModel, key)
            return slot.value if slot else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            slot = session.get(StorageSlotModel, key)
            if slot:
                slot.value = value
            else:
                session.add(StorageSlotModel(key=key, value=value))
            session.commit()
