# gridcal/util/clock.py
"""Clocks for the calendar timezone.

Grids and events hold naive wall-clock datetimes. A clock owns the calendar
timezone and turns instants into that wall clock. Timezones are named as
"local" (the host zone), "UTC", an IANA key, or a fixed "+HH:MM" offset.

"local" maps to no tzinfo at all: conversions then go through
`datetime.astimezone()`, which applies the host's offset for each value, so
both sides of a daylight-saving change come out right.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LOCAL = "local"
UTC = "UTC"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$")


def canonical_tz(name: Optional[str]) -> str:
    """`None`/blank/"local" -> "local", any case of "utc" -> "UTC", else as given."""
    s = str(name or "").strip()
    if not s or s.lower() == LOCAL:
        return LOCAL
    if s.lower() == "utc":
        return UTC
    return s


def zone_for(name: Optional[str]) -> Optional[dt.tzinfo]:
    """tzinfo for a calendar timezone, or None for the host's local zone.

    Raises ValueError for names that are not a known zone or a valid offset.
    """
    tz = canonical_tz(name)
    if tz == LOCAL:
        return None
    if tz == UTC:
        return dt.timezone.utc

    m = _OFFSET_RE.match(tz)
    if m:
        sign, hh, mm = m.group(1), int(m.group(2)), int(m.group(3))
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz!r}")
        minutes = hh * 60 + mm
        return dt.timezone(dt.timedelta(minutes=-minutes if sign == "-" else minutes))

    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError) as ex:
        raise ValueError(f"Invalid timezone identifier: {tz!r}") from ex


def to_wall_clock(value: dt.datetime, zone: Optional[dt.tzinfo]) -> dt.datetime:
    """Naive wall-clock time of `value` in `zone` (None = host local zone).

    Naive values are taken as already on the wall clock.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(zone).replace(tzinfo=None)


class Clock(Protocol):
    def now(self) -> dt.datetime:
        ...


class _ZonedClock:
    def __init__(self, tz: Optional[str]) -> None:
        self.tz_name = canonical_tz(tz)
        self.zone = zone_for(self.tz_name)

    def wall(self, value: dt.datetime) -> dt.datetime:
        return to_wall_clock(value, self.zone)


class SystemClock(_ZonedClock):
    """Real time, read on the calendar timezone's wall clock."""

    def __init__(self, tz: Optional[str] = LOCAL) -> None:
        super().__init__(tz)

    def now(self) -> dt.datetime:
        return dt.datetime.now(tz=self.zone).replace(tzinfo=None)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self.tz_name!r})"


class FixedClock(_ZonedClock):
    """Clock frozen at one instant (tests, reproducible renders)."""

    def __init__(self, now: dt.datetime, tz: Optional[str] = LOCAL) -> None:
        super().__init__(tz)
        self._now = self.wall(now)

    def now(self) -> dt.datetime:
        return self._now

    def __repr__(self) -> str:
        return f"FixedClock({self._now.isoformat()})"
