from __future__ import annotations

import calendar
import re
from typing import Any

from .entities import TITLE_MAX_LENGTH

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def normalize_title(raw: Any) -> str | None:
    if not isinstance(raw, str):
        return None
    title = raw.strip()
    if not title or len(title) > TITLE_MAX_LENGTH:
        return None
    return title


def normalize_date(raw: Any) -> str | None:
    if not isinstance(raw, str):
        return None
    value = raw.strip()
    if not value:
        return None
    match = _DATE_RE.fullmatch(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        return None
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return None
    return value
