# gridcal/interval.py
from __future__ import annotations

import datetime as dt
import enum
from typing import Iterable, List

from gridcal.model import Event
from gridcal.util.dates import end_of_day, start_of_day


class OverlapMode(str, enum.Enum):
    MONTH = "month"
    WEEK = "week"


def _between(value: dt.datetime, lo: dt.datetime, hi: dt.datetime) -> bool:
    return lo <= value <= hi


def overlaps_day(event: Event, at: dt.datetime) -> bool:
    """Month policy: `at` lies within the event's calendar days.

    Only the range start is consulted; the time of day of the event's start
    and end is ignored, so timed and whole-day events place identically.
    """
    return start_of_day(event.start) <= at <= end_of_day(event.end)


def overlaps_range(event: Event, start: dt.datetime, end: dt.datetime) -> bool:
    """Week policy: inclusive on every boundary, zero-length events included."""
    return (
        _between(event.start, start, end)
        or _between(event.end, start, end)
        or _between(end, event.start, event.end)
    )


def find_events(
    events: Iterable[Event],
    start: dt.datetime,
    end: dt.datetime,
    mode: OverlapMode = OverlapMode.MONTH,
) -> List[Event]:
    """Events overlapping [start, end] under `mode`, in store order."""
    if OverlapMode(mode) is OverlapMode.MONTH:
        return [ev for ev in events if overlaps_day(ev, start)]
    return [ev for ev in events if overlaps_range(ev, start, end)]
