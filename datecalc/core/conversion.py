"""Conversions from a date to a derived scalar or string."""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from datecalc.config import DEFAULT_SETTINGS, CalendarSettings
from datecalc.utils.date import EPOCH, WEEKDAY_NAMES, DateLike, to_datetime, to_utc

_ONE_MS = timedelta(milliseconds=1)


def date_to_timestamp(date: DateLike, settings: Optional[CalendarSettings] = None) -> int:
    """
    Return milliseconds elapsed since 1970-01-01T00:00:00Z.

    Examples:
        '01 Jan 1970 00:00:00 UTC' -> 0
        '04 Dec 1995 00:12:00 UTC' -> 818035920000
    """
    return (to_datetime(date, settings) - EPOCH) // _ONE_MS


def get_time(date: DateLike, settings: Optional[CalendarSettings] = None) -> str:
    """Return the wall-clock time of ``date`` as 'HH:MM:SS' (24-hour)."""
    dt = to_datetime(date, settings)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def get_day_name(date: DateLike, settings: Optional[CalendarSettings] = None) -> str:
    """Return the English weekday name of ``date`` evaluated in UTC."""
    return WEEKDAY_NAMES[to_utc(date, settings).weekday()]


def format_date(date: DateLike, settings: Optional[CalendarSettings] = None) -> str:
    """
    Format ``date`` as 'M/D/YYYY, h:mm:ss AM|PM' in the reference zone.

    The reference zone comes from ``settings``, never from the caller's locale.

    Examples:
        '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
        '1999-01-05T02:20:00.000Z' -> '1/5/1999, 2:20:00 AM'
    """
    settings = settings or DEFAULT_SETTINGS
    local = to_datetime(date, settings).astimezone(settings.reference_tz())
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year:04d}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )
