"""Boolean classification of dates."""

from __future__ import annotations

import calendar
import numbers
from typing import Optional, Union

from datecalc.config import CalendarSettings
from datecalc.schedule.core import DatePeriod, PeriodLike
from datecalc.utils.date import DateLike, to_date


def is_date_in_period(
    date: DateLike, period: PeriodLike, settings: Optional[CalendarSettings] = None
) -> bool:
    """
    True if ``date`` lies within ``period``, both endpoints included.

    Examples:
        '2024-02-01', {'start': '2024-02-02', 'end': '2024-03-02'} -> False
        '2024-02-02', {'start': '2024-02-02', 'end': '2024-03-02'} -> True
    """
    return DatePeriod.coerce(period).contains(date, settings)


def is_leap_year(date: Union[DateLike, int]) -> bool:
    """Gregorian leap-year rule for the year of ``date`` (or a bare year)."""
    if isinstance(date, numbers.Integral) and not isinstance(date, bool):
        year = int(date)
    else:
        year = to_date(date).year
    return calendar.isleap(year)
