"""Date provider: parsing, calendar arithmetic and locale-aware names.

Everything downstream works on naive wall-clock datetimes. Aware inputs are
converted into the calendar timezone once, here, at the API boundary.
"""

from __future__ import annotations

import calendar
import datetime as dt
import functools
import locale
import logging
import re
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple, Union

from gridcal.errors import DateParseError
from gridcal.model import Weekday
from gridcal.util.clock import Clock, SystemClock, to_wall_clock, zone_for

logger = logging.getLogger(__name__)

DateInput = Union[str, dt.date, dt.datetime, None]

_RELATIVE_DAYS = {"today": 0, "tomorrow": 1, "yesterday": -1}
_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_datetime(value: DateInput, *, tz: Optional[str] = "local", clock: Optional[Clock] = None) -> dt.datetime:
    """Resolve a date input to a naive wall-clock datetime.

    Accepts datetime/date objects, ISO-8601 strings ("2024-02-14",
    "2024-02-14 09:30", "2024-02-14T09:30:00+01:00"), "2024-02" (first of
    the month), the keywords "now", "today", "tomorrow", "yesterday", and
    None (now). Dates and day keywords resolve to midnight.
    """
    if isinstance(value, dt.datetime):
        try:
            return to_wall_clock(value, zone_for(tz))
        except ValueError as ex:
            raise DateParseError(value, str(ex)) from ex
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time.min)

    if value is None:
        return (clock or SystemClock(tz)).now()
    if not isinstance(value, str):
        raise DateParseError(value, f"unsupported type {type(value).__name__}")

    s = value.strip()
    low = s.lower()
    if low == "now":
        return (clock or SystemClock(tz)).now()
    if low in _RELATIVE_DAYS:
        today = (clock or SystemClock(tz)).now().date()
        return dt.datetime.combine(today + dt.timedelta(days=_RELATIVE_DAYS[low]), dt.time.min)

    m = _YEAR_MONTH_RE.match(s)
    if m:
        try:
            return dt.datetime(int(m.group(1)), int(m.group(2)), 1)
        except ValueError as ex:
            raise DateParseError(value, str(ex)) from ex

    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        parsed = dt.datetime.fromisoformat(s)
    except ValueError as ex:
        raise DateParseError(value, str(ex)) from ex
    if parsed.tzinfo is not None:
        try:
            parsed = to_wall_clock(parsed, zone_for(tz))
        except ValueError as ex:
            raise DateParseError(value, str(ex)) from ex
    return parsed


def parse_date(value: DateInput, *, tz: Optional[str] = "local", clock: Optional[Clock] = None) -> dt.date:
    return parse_datetime(value, tz=tz, clock=clock).date()


def start_of_day(value: Union[dt.date, dt.datetime]) -> dt.datetime:
    d = value.date() if isinstance(value, dt.datetime) else value
    return dt.datetime.combine(d, dt.time.min)


def end_of_day(value: Union[dt.date, dt.datetime]) -> dt.datetime:
    d = value.date() if isinstance(value, dt.datetime) else value
    return dt.datetime.combine(d, dt.time.max)


def first_of_month(d: dt.date) -> dt.date:
    return d.replace(day=1)


def days_in_month(d: dt.date) -> int:
    return calendar.monthrange(d.year, d.month)[1]


def weekday_of(d: dt.date) -> Weekday:
    return Weekday.of(d)


def week_start(d: dt.date, starting_day: Weekday) -> dt.date:
    """Latest date on or before `d` whose weekday is `starting_day`."""
    back = (int(weekday_of(d)) - int(starting_day)) % 7
    return d - dt.timedelta(days=back)


def add_minutes(value: dt.datetime, minutes: int) -> dt.datetime:
    return value + dt.timedelta(minutes=minutes)


def same_hour(a: dt.datetime, b: dt.datetime) -> bool:
    return a.date() == b.date() and a.hour == b.hour


# --- locale names -------------------------------------------------------------

_C_LOCALES = {"", "c", "posix", "en", "en_us", "en_gb", "en_us.utf-8", "en_gb.utf-8"}


def _locale_candidates(name: str) -> Tuple[str, ...]:
    base = name.replace("-", "_")
    if base == "C":
        return (base,)
    if "." in base:
        return (base,)
    return (base + ".UTF-8", base + ".utf8", base)


@contextmanager
def _time_locale(name: str) -> Iterator[None]:
    old = locale.setlocale(locale.LC_TIME)
    last_err: Optional[locale.Error] = None
    for cand in _locale_candidates(name):
        try:
            locale.setlocale(locale.LC_TIME, cand)
            break
        except locale.Error as ex:
            last_err = ex
    else:
        raise last_err or locale.Error(name)
    try:
        yield
    finally:
        locale.setlocale(locale.LC_TIME, old)


def _ucfirst(s: str) -> str:
    return s[:1].upper() + s[1:]


@functools.lru_cache(maxsize=32)
def _names(locale_name: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """(day names indexed by Weekday, month names indexed 1..12 with a blank 0)."""

    def collect() -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        # calendar.day_name is Monday-first
        days = tuple(_ucfirst(calendar.day_name[(int(w) - 1) % 7]) for w in Weekday)
        months = tuple(_ucfirst(calendar.month_name[i]) for i in range(13))
        return days, months

    # English names come from the C locale, not whatever LC_TIME the host set.
    if (locale_name or "").strip().lower().replace("-", "_") in _C_LOCALES:
        with _time_locale("C"):
            return collect()
    try:
        with _time_locale(locale_name):
            return collect()
    except locale.Error:
        logger.warning("Locale %r is not available; falling back to English names", locale_name)
        with _time_locale("C"):
            return collect()


def day_name(day: Weekday, locale_name: str = "en_US") -> str:
    return _names(locale_name)[0][int(day)]


def day_initials(day: Weekday, locale_name: str = "en_US") -> str:
    return day_name(day, locale_name)[:2]


def month_name(month: int, locale_name: str = "en_US") -> str:
    return _names(locale_name)[1][month]
