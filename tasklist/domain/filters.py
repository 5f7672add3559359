from __future__ import annotations

from dataclasses import dataclass

from .enums import FilterMode, SortMode


@dataclass(frozen=True)
class ViewSelection:
    query: str = ""
    filter_mode: FilterMode = FilterMode.ALL
    sort_mode: SortMode = SortMode.MANUAL
