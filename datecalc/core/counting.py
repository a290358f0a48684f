"""Integer calendar arithmetic: month lengths, period lengths, weekends, weeks."""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import Optional

import numpy as np

from datecalc.config import CalendarSettings
from datecalc.utils.date import MONDAY, DateLike, InvalidDateError, to_date, to_datetime

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)

# numpy weekmasks, Monday first
WEEKEND_MASK = "0000011"
MONDAY_MASK = "1000000"


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be within 1..12, got {month!r}")


def get_count_days_in_month(month: int, year: int) -> int:
    """
    Number of days in ``month`` (1 = January) of ``year``.

    Examples:
        1, 2024 -> 31
        2, 2024 -> 29
    """
    _check_month(month)
    return calendar.monthrange(year, month)[1]


def get_count_days_on_period(
    date_start: DateLike, date_end: DateLike, settings: Optional[CalendarSettings] = None
) -> int:
    """
    Total days between two instants, counting both the start and end day.

    Examples:
        '2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z' -> 12
    """
    elapsed = to_datetime(date_end, settings) - to_datetime(date_start, settings)
    return elapsed // _ONE_DAY + 1


def get_count_weekends_in_month(month: int, year: int) -> int:
    """
    Number of Saturdays and Sundays in ``month`` of ``year``.

    Examples:
        5, 2022 -> 9
        12, 2023 -> 10
        1, 2024 -> 8
    """
    days = get_count_days_in_month(month, year)
    first = np.datetime64(date(year, month, 1), "D")
    return int(np.busday_count(first, first + days, weekmask=WEEKEND_MASK))


def get_week_number_by_date(date: DateLike, settings: Optional[CalendarSettings] = None) -> int:
    """
    Week number of the year, where week 1 contains January 1 and weeks start on Monday.

    This is not ISO-8601 numbering. The counter starts at 1 unless January 1
    is itself a Monday, and every Monday from January 1 through ``date``
    (inclusive) adds one.

    Examples:
        2024-01-03 -> 1
        2024-01-31 -> 5
        2024-02-23 -> 8
    """
    day = to_date(date, settings)
    jan_first = day.replace(month=1, day=1)
    count = 0 if jan_first.weekday() == MONDAY else 1
    mondays = int(
        np.busday_count(
            np.datetime64(jan_first, "D"),
            np.datetime64(day, "D") + 1,
            weekmask=MONDAY_MASK,
        )
    )
    logger.debug("Week scan %s..%s: start=%s mondays=%s", jan_first, day, count, mondays)
    return count + mondays
