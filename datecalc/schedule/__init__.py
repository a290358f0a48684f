# Re-export schedule components
from .core import DatePeriod, InvalidScheduleError, PeriodLike, WorkCycle
from .generator import get_work_schedule, work_dates

__all__ = [
    "DatePeriod",
    "InvalidScheduleError",
    "PeriodLike",
    "WorkCycle",
    "get_work_schedule",
    "work_dates",
]
