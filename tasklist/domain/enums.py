from __future__ import annotations

from enum import StrEnum


class FilterMode(StrEnum):
    ALL = "all"
    DONE = "done"
    TODO = "todo"


class SortMode(StrEnum):
    MANUAL = "manual"
    DATE_ASC = "dateAsc"
    DATE_DESC = "dateDesc"
