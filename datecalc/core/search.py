"""Forward searches for the next date satisfying a condition."""

from __future__ import annotations

import logging
from datetime import date as date_type
from datetime import datetime
from typing import Optional, Union

from dateutil.relativedelta import FR, relativedelta

from datecalc.config import CalendarSettings
from datecalc.utils.date import FRIDAY, DateLike, to_date

logger = logging.getLogger(__name__)


def _same_kind(original: DateLike, day: date_type) -> Union[date_type, datetime]:
    """Return ``day`` as a datetime carrying ``original``'s time and zone if it had one."""
    if isinstance(original, datetime):
        return original.replace(year=day.year, month=day.month, day=day.day)
    return day


def get_next_friday(
    date: DateLike, settings: Optional[CalendarSettings] = None
) -> Union[date_type, datetime]:
    """
    Date of the first Friday strictly after ``date``.

    Examples:
        2024-02-03 -> 2024-02-09
        2024-02-13 -> 2024-02-16
        2024-02-16 -> 2024-02-23
    """
    start = to_date(date, settings)
    # weekday=FR lands on the day itself when it is a Friday, hence days=1.
    friday = start + relativedelta(days=1, weekday=FR)
    return _same_kind(date, friday)


def get_next_friday_the_13th(
    date: DateLike, settings: Optional[CalendarSettings] = None
) -> Union[date_type, datetime]:
    """
    Date of the first Friday the 13th strictly after ``date``.

    Every Gregorian year has at least one, so the month scan terminates
    within fourteen months.

    Examples:
        2024-01-13 -> 2024-09-13
        2023-02-01 -> 2023-10-13
    """
    start = to_date(date, settings)
    candidate = start.replace(day=13)
    if start.day >= 13:
        candidate += relativedelta(months=1)

    scanned = 1
    while candidate.weekday() != FRIDAY:
        candidate += relativedelta(months=1)
        scanned += 1
    logger.debug("Friday the 13th after %s found after %s months: %s", start, scanned, candidate)
    return _same_kind(date, candidate)
