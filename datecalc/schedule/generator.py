"""
Work schedule generation.

A schedule is the set of days in a period that fall in the "work" phase of a
repeating work/off cycle anchored on the period's first day. The phase of a
day depends only on its offset from that first day, so month and year
boundaries need no special handling.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

import numpy as np

from datecalc.config import CalendarSettings
from datecalc.utils.date import format_day_first

from .core import DatePeriod, InvalidScheduleError, PeriodLike, WorkCycle

logger = logging.getLogger(__name__)


def work_dates(first: date, last: date, cycle: WorkCycle) -> List[date]:
    """Return the work days in ``[first, last]`` for ``cycle`` starting at ``first``."""
    if first > last:
        raise InvalidScheduleError(f"Period start {first} is after end {last}")

    days = np.arange(np.datetime64(first, "D"), np.datetime64(last, "D") + 1)
    mask = cycle.is_work_day(np.arange(days.size))
    logger.debug(
        "Cycle %s/%s over %s days from %s: %s work days",
        cycle.work_days,
        cycle.off_days,
        days.size,
        first,
        int(mask.sum()),
    )
    return days[mask].tolist()


def get_work_schedule(
    period: PeriodLike,
    count_work_days: int,
    count_off_days: int,
    settings: Optional[CalendarSettings] = None,
) -> List[str]:
    """
    Generate the work days of a period as 'DD-MM-YYYY' strings.

    Args:
        period: start and end of the period (inclusive), as a DatePeriod, a
            ``{'start': ..., 'end': ...}`` mapping or a pair; strings are
            usually 'DD-MM-YYYY'
        count_work_days: consecutive working days per cycle
        count_off_days: consecutive days off per cycle

    Returns:
        Work days in chronological order.

    Raises:
        InvalidScheduleError: if start is after end or a count is not positive

    Examples:
        {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
            -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    cycle = WorkCycle(count_work_days, count_off_days)
    first, last = DatePeriod.coerce(period).civil_bounds(settings)
    return [format_day_first(d) for d in work_dates(first, last, cycle)]
