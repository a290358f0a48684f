"""Normalisation of date-like inputs.

Every public function accepts the same family of inputs (``DateLike``) and
runs it through :func:`to_datetime` or :func:`to_date` exactly once.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, tzinfo
from typing import Optional, Union

from dateutil import parser as du_parser
from dateutil import tz
from pandas import NaT, Timestamp

from datecalc.config import DEFAULT_SETTINGS, CalendarSettings

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, Timestamp]

DAY_FIRST_FMT = "%d-%m-%Y"
COMPACT_FMT = "%Y%m%d"

EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)

# Monday = 0 ... Sunday = 6, matching date.weekday()
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONDAY = 0
FRIDAY = 4

# Fills components a free-form string leaves out, instead of today's date.
_PARSE_DEFAULT = datetime(1970, 1, 1)

_ZONE_PREFIX_RE = re.compile(r"\b(?:GMT|UTC)(?=[+-]\d)")


class InvalidDateError(ValueError):
    """Raised when an input cannot be interpreted as a calendar date."""


def parse_datetime(text: str, settings: Optional[CalendarSettings] = None) -> datetime:
    """
    Parse a date string into a datetime (naive when the string has no zone).

    Tried in order: 'DD-MM-YYYY', 'YYYYMMDD', ISO-8601, then the free-form
    dateutil parser for strings like '04 Dec 1995 00:12:00 UTC'.
    """
    settings = settings or DEFAULT_SETTINGS
    value = text.strip()
    if not value:
        raise InvalidDateError("Empty date string")

    for fmt in (DAY_FIRST_FMT, COMPACT_FMT):
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    try:
        return du_parser.isoparse(value)
    except ValueError:
        logger.debug("Not ISO-8601, falling back to free-form parse: %r", value)

    # dateutil reads 'GMT+0200' POSIX-style (sign inverted); a bare '+0200' is read as written.
    value = _ZONE_PREFIX_RE.sub("", value)

    def lookup_zone(name: Optional[str], offset: Optional[int]) -> Optional[tzinfo]:
        # dateutil calls this for every string, named zone or not.
        if name is None:
            return None if offset is None else tz.tzoffset(None, offset)
        zone = settings.tzinfos.get(name.upper())
        if zone is None:
            raise InvalidDateError(f"Unknown time zone name {name!r} in {text!r}")
        return zone

    try:
        return du_parser.parse(value, default=_PARSE_DEFAULT, tzinfos=lookup_zone)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Unsupported date string: {text!r}") from exc


def to_datetime(date_like: DateLike, settings: Optional[CalendarSettings] = None) -> datetime:
    """
    Convert a date-like into a timezone-aware datetime (an instant).

    Naive values are placed in ``settings.parse_zone``; a bare date becomes
    midnight in that zone.
    """
    settings = settings or DEFAULT_SETTINGS
    if date_like is NaT:
        raise InvalidDateError("NaT is not a date")
    if isinstance(date_like, Timestamp):
        dt = date_like.to_pydatetime()
    elif isinstance(date_like, datetime):
        dt = date_like
    elif isinstance(date_like, date):
        dt = datetime(date_like.year, date_like.month, date_like.day)
    elif isinstance(date_like, str):
        dt = parse_datetime(date_like, settings)
    else:
        raise TypeError(f"Unsupported type for date: {type(date_like)}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=settings.parse_tz())
    return dt


def to_date(date_like: DateLike, settings: Optional[CalendarSettings] = None) -> date:
    """
    Convert a date-like into a civil date.

    Datetimes keep their own wall-clock date; no zone conversion happens.
    """
    if date_like is NaT:
        raise InvalidDateError("NaT is not a date")
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        return parse_datetime(date_like, settings).date()
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_utc(date_like: DateLike, settings: Optional[CalendarSettings] = None) -> datetime:
    """Return the instant expressed in UTC."""
    return to_datetime(date_like, settings).astimezone(tz.UTC)


def format_day_first(dt: Union[date, datetime]) -> str:
    """
    Format a date as 'DD-MM-YYYY' with a four-digit year.
    """
    return f"{dt.day:02d}-{dt.month:02d}-{dt.year:04d}"

