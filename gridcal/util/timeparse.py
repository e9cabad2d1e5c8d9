# gridcal/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Tuple, Union

from gridcal.errors import InvalidConfigurationError

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

TimeInput = Union[str, dt.time]


def parse_hhmm(s: str) -> Tuple[int, int]:
    m = _HHMM_RE.match(str(s).strip())
    if not m:
        raise InvalidConfigurationError(f"Invalid HH:MM: {s!r}")
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        raise InvalidConfigurationError(f"Invalid HH:MM: {s!r}")
    return hh, mm


def parse_time_of_day(value: TimeInput) -> dt.time:
    if isinstance(value, dt.time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    hh, mm = parse_hhmm(value)
    return dt.time(hh, mm)


def parse_time_window(s: str) -> Tuple[dt.time, dt.time]:
    """Parse "09:00-17:00". Equal ends mean a full 24 hour window."""
    parts = str(s).split("-")
    if len(parts) != 2:
        raise InvalidConfigurationError("time window must be like 09:00-17:00")
    return parse_time_of_day(parts[0]), parse_time_of_day(parts[1])


def format_hhmm(t: dt.time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"
