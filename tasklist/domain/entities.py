from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

TITLE_MAX_LENGTH = 80


@dataclass
class Task:
    id: str
    title: str
    due_date: Optional[str] = None
    done: bool = False
    order: int = 0
