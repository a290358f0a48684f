"""Date arithmetic utilities.

Key modules:
- core: conversions, predicates, counting, searches and quarters
- schedule: work/off cycle schedule generation
- utils.date: normalisation of date-like inputs
- config: explicit zone settings
"""

from .config import DEFAULT_SETTINGS, CalendarSettings, ConfigurationError
from .core import (
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    is_date_in_period,
    is_leap_year,
)
from .schedule import DatePeriod, InvalidScheduleError, WorkCycle, get_work_schedule
from .utils.date import InvalidDateError

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "CalendarSettings",
    "ConfigurationError",
    "DEFAULT_SETTINGS",
    "DatePeriod",
    "InvalidDateError",
    "InvalidScheduleError",
    "WorkCycle",
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap_year",
]
