"""Month grid layout.

Rows always hold seven cells. The first row is preceded by padding up to the
first day of the month, the last row is completed with padding, and a new
row opens whenever the running day falls on the configured starting day.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Iterable, List, Optional, Tuple

from gridcal.interval import OverlapMode, find_events
from gridcal.model import (
    PART_END,
    PART_MID,
    PART_START,
    CalendarConfig,
    Cell,
    Event,
    MonthGrid,
    Placement,
    Weekday,
    WeekRow,
)
from gridcal.util.clock import Clock, SystemClock
from gridcal.util.dates import days_in_month, end_of_day, first_of_month, start_of_day, weekday_of

logger = logging.getLogger(__name__)


def classify(event: Event, day: dt.date) -> Optional[str]:
    """Which part of `event` falls on `day`: start, mid, end, or None.

    Start wins over end for single-day events.
    """
    first = event.start.date()
    last = event.end.date()
    if day == first:
        return PART_START
    if first < day < last:
        return PART_MID
    if day == last:
        return PART_END
    return None


def placement_classes(event: Event, part: str) -> Tuple[str, ...]:
    if part == PART_START:
        return (("mask-start",) if event.mask else ()) + event.classes
    if part == PART_MID:
        return ("mask",) if event.mask else ()
    return ("mask-end",) if event.mask else ()


def merge_classes(placements: Iterable[Placement]) -> Tuple[str, ...]:
    out: List[str] = []
    for p in placements:
        for c in p.classes:
            if c not in out:
                out.append(c)
    return tuple(out)


def leading_padding(first: dt.date, starting_day: Weekday) -> int:
    return (int(weekday_of(first)) - int(starting_day)) % 7


def trailing_padding(day_after: dt.date, starting_day: Weekday) -> int:
    """Cells needed after the month's last day to finish the row.

    Sunday start: 7 - w. Monday start: 1 when the next day is a Sunday,
    else 7 - (w - 1). Both reduce to (start - w) mod 7, where w is the
    weekday of the day after the month ends.
    """
    return (int(starting_day) - int(weekday_of(day_after))) % 7


def _padding_cell(d: dt.date) -> Cell:
    return Cell(date=d, weekday=weekday_of(d), is_padding=True)


def _day_cell(day: dt.date, events: Iterable[Event], today: dt.date) -> Cell:
    placements: List[Placement] = []
    for ev in find_events(events, start_of_day(day), end_of_day(day), OverlapMode.MONTH):
        part = classify(ev, day)
        if part is None:
            continue
        placements.append(
            Placement(event=ev, part=part, classes=placement_classes(ev, part), show_summary=(part == PART_START))
        )
    return Cell(
        date=day,
        weekday=weekday_of(day),
        is_today=(day == today),
        events=tuple(placements),
        classes=merge_classes(placements),
    )


def build_month_grid(
    config: CalendarConfig,
    events: Iterable[Event],
    on: dt.date,
    clock: Optional[Clock] = None,
) -> MonthGrid:
    """Lay out the month containing `on`."""
    clock = clock or SystemClock(config.tz)
    today = clock.now().date()
    events = tuple(events)
    starting_day = config.starting_day

    first = first_of_month(on)
    total = days_in_month(first)

    rows: List[WeekRow] = []
    row: List[Cell] = []
    for back in range(leading_padding(first, starting_day), 0, -1):
        row.append(_padding_cell(first - dt.timedelta(days=back)))

    day = first
    for _ in range(total):
        if weekday_of(day) == starting_day and row:
            rows.append(tuple(row))
            row = []
        row.append(_day_cell(day, events, today))
        day += dt.timedelta(days=1)

    # `day` is now the first day after the month.
    for offset in range(trailing_padding(day, starting_day)):
        row.append(_padding_cell(day + dt.timedelta(days=offset)))
    rows.append(tuple(row))

    logger.debug(
        "Month grid %04d-%02d: %d rows, %d events considered",
        first.year,
        first.month,
        len(rows),
        len(events),
    )
    return MonthGrid(year=first.year, month=first.month, starting_day=starting_day, rows=tuple(rows))
