"""Stateless calendar functions."""

from .conversion import date_to_timestamp, format_date, get_day_name, get_time
from .counting import (
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_week_number_by_date,
)
from .predicates import is_date_in_period, is_leap_year
from .quarter import get_quarter
from .search import get_next_friday, get_next_friday_the_13th

__all__ = [
    "date_to_timestamp",
    "format_date",
    "get_day_name",
    "get_time",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "is_date_in_period",
    "is_leap_year",
    "get_quarter",
    "get_next_friday",
    "get_next_friday_the_13th",
]
