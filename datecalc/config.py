"""Explicit calendar settings.

Nothing in the package reads the process locale, the ``TZ`` variable or the
system clock. Zone-dependent functions take a :class:`CalendarSettings`
instead and fall back to :data:`DEFAULT_SETTINGS`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Dict, Mapping, Optional

from dateutil import tz

# Africa/Dakar is UTC+0 year round, so formatted output does not drift with DST.
DEFAULT_REFERENCE_ZONE = "Africa/Dakar"
DEFAULT_PARSE_ZONE = "UTC"

ENV_REFERENCE_ZONE = "DATECALC_REFERENCE_ZONE"
ENV_PARSE_ZONE = "DATECALC_PARSE_ZONE"


class ConfigurationError(ValueError):
    """Raised when a configured zone name cannot be resolved."""


# North American zone names from RFC 2822, as fixed offsets in hours.
_RFC2822_ZONES = {
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}


def _default_tzinfos() -> Dict[str, tzinfo]:
    zones: Dict[str, tzinfo] = {"UTC": tz.UTC, "UT": tz.UTC, "GMT": tz.UTC, "Z": tz.UTC}
    for name, hours in _RFC2822_ZONES.items():
        zones[name] = tz.tzoffset(name, hours * 3600)
    return zones


def resolve_zone(name: str) -> tzinfo:
    """Return the tzinfo for an IANA zone name."""
    if name.upper() in ("UTC", "Z"):
        return tz.UTC
    zone = tz.gettz(name)
    if zone is None:
        raise ConfigurationError(f"Unknown time zone: {name!r}")
    return zone


@dataclass(frozen=True)
class CalendarSettings:
    """Zones used for parsing and display.

    Attributes:
        reference_zone: zone used by ``format_date`` for display output
        parse_zone: zone attached to naive inputs (strings without an offset,
            bare dates, naive datetimes)
        tzinfos: zone names understood by the free-form string parser, keyed
            in upper case; any other name in a string is rejected
    """

    reference_zone: str = DEFAULT_REFERENCE_ZONE
    parse_zone: str = DEFAULT_PARSE_ZONE
    tzinfos: Mapping[str, tzinfo] = field(default_factory=_default_tzinfos)

    def reference_tz(self) -> tzinfo:
        return resolve_zone(self.reference_zone)

    def parse_tz(self) -> tzinfo:
        return resolve_zone(self.parse_zone)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalendarSettings":
        """Build settings from ``DATECALC_*`` variables, defaulting unset ones."""
        env = os.environ if environ is None else environ
        settings = cls(
            reference_zone=env.get(ENV_REFERENCE_ZONE) or DEFAULT_REFERENCE_ZONE,
            parse_zone=env.get(ENV_PARSE_ZONE) or DEFAULT_PARSE_ZONE,
        )
        # Both zones must resolve.
        settings.reference_tz()
        settings.parse_tz()
        return settings


DEFAULT_SETTINGS = CalendarSettings()
