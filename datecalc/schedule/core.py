"""
Core data structures for schedule generation.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from datecalc.config import CalendarSettings
from datecalc.utils.date import DateLike, to_date, to_datetime

PeriodLike = Union["DatePeriod", Mapping[str, DateLike], Sequence[DateLike]]


class InvalidScheduleError(ValueError):
    """Raised for a reversed period or a non-positive work cycle."""


@dataclass(frozen=True)
class DatePeriod:
    """Closed interval ``[start, end]``; both ends are inclusive."""

    start: DateLike
    end: DateLike

    @classmethod
    def coerce(cls, period: PeriodLike) -> "DatePeriod":
        """Accept a DatePeriod, a ``{'start', 'end'}`` mapping or a pair."""
        if isinstance(period, DatePeriod):
            return period
        if isinstance(period, Mapping):
            try:
                return cls(period["start"], period["end"])
            except KeyError as exc:
                raise InvalidScheduleError(f"Period is missing {exc.args[0]!r}") from exc
        if isinstance(period, Sequence) and not isinstance(period, str) and len(period) == 2:
            return cls(period[0], period[1])
        raise TypeError(f"Unsupported type for period: {type(period)}")

    def contains(self, date_like: DateLike, settings: Optional[CalendarSettings] = None) -> bool:
        """True if the instant lies within the period, endpoints included."""
        moment = to_datetime(date_like, settings)
        return to_datetime(self.start, settings) <= moment <= to_datetime(self.end, settings)

    def __contains__(self, date_like: Any) -> bool:
        return self.contains(date_like)

    def civil_bounds(self, settings: Optional[CalendarSettings] = None) -> Tuple[date, date]:
        return to_date(self.start, settings), to_date(self.end, settings)


@dataclass(frozen=True)
class WorkCycle:
    """Repeating pattern of ``work_days`` on followed by ``off_days`` off."""

    work_days: int
    off_days: int

    def __post_init__(self):
        for name in ("work_days", "off_days"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise InvalidScheduleError(f"{name} must be a positive integer, got {value!r}")

    @property
    def length(self) -> int:
        return self.work_days + self.off_days

    def is_work_day(self, offset: int) -> bool:
        """Whether the day ``offset`` days after the cycle start is a work day."""
        return offset % self.length < self.work_days
