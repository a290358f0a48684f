"""Quarter of the year."""

from __future__ import annotations

from typing import Optional

from datecalc.config import CalendarSettings
from datecalc.utils.date import DateLike, to_date


def get_quarter(date: DateLike, settings: Optional[CalendarSettings] = None) -> int:
    """Quarter (1-4) of the calendar month of ``date``."""
    return (to_date(date, settings).month - 1) // 3 + 1
