from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from .db import Base


def utcnow() -> datetime:
    return datetime.utcnow()


class StorageSlotModel(Base):
    __tablename__ = "storage_slots"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
