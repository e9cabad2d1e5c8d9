"""Week grid layout: one row per time slot, one column per day."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Iterable, List, Optional, Set

from gridcal.errors import InvalidConfigurationError
from gridcal.interval import OverlapMode, find_events
from gridcal.model import CalendarConfig, Cell, Event, Placement, SlotRow, TimeSlot, WeekGrid
from gridcal.month import classify, merge_classes, placement_classes
from gridcal.util.clock import Clock, SystemClock
from gridcal.util.dates import add_minutes, same_hour, week_start, weekday_of

logger = logging.getLogger(__name__)

# Any fixed date works; only times of day are read back.
_ANCHOR = dt.date(2000, 1, 1)


def time_slots(start: dt.time, end: dt.time, interval: int) -> List[TimeSlot]:
    """Slots from `start` (inclusive) to `end` (exclusive) every `interval` minutes.

    `start == end` means a full 24 hour window starting at `start`.
    Slot starts are unique; slot ends wrap past midnight.
    """
    if not isinstance(interval, int) or isinstance(interval, bool) or interval <= 0:
        raise InvalidConfigurationError(f"time interval must be a positive number of minutes; got {interval!r}")

    cur = dt.datetime.combine(_ANCHOR, start)
    stop = dt.datetime.combine(_ANCHOR, end)
    if stop == cur:
        stop += dt.timedelta(days=1)
    elif stop < cur:
        logger.warning("Week view end time %s is before start time %s; no time slots", end, start)

    step = dt.timedelta(minutes=interval)
    seen: Set[dt.time] = set()
    out: List[TimeSlot] = []
    while cur < stop:
        t = cur.time()
        if t not in seen:
            seen.add(t)
            out.append(TimeSlot(start=t, end=(cur + step).time()))
        cur += step
    return out


def build_week_grid(
    config: CalendarConfig,
    events: Iterable[Event],
    on: dt.date,
    clock: Optional[Clock] = None,
) -> WeekGrid:
    """Lay out the week containing `on`, starting at the configured weekday.

    An event's summary is shown in the first cell it touches (slot-major,
    then column order); every later cell of the same event gets a
    placeholder. That bookkeeping lives only for this call.
    """
    clock = clock or SystemClock(config.tz)
    now = clock.now()
    events = tuple(events)
    interval = config.time_interval

    first = week_start(on, config.starting_day)
    dates = [first + dt.timedelta(days=i) for i in range(7)]
    slots = time_slots(config.start_time, config.end_time, interval)

    labelled: Set[int] = set()
    rows: List[SlotRow] = []
    for slot in slots:
        cells: List[Cell] = []
        for day in dates:
            at = dt.datetime.combine(day, slot.start)
            placements: List[Placement] = []
            for ev in find_events(events, at, add_minutes(at, interval), OverlapMode.WEEK):
                show = id(ev) not in labelled
                labelled.add(id(ev))
                part = classify(ev, day)
                placements.append(
                    Placement(
                        event=ev,
                        part=part or "",
                        classes=placement_classes(ev, part) if part else (),
                        show_summary=show,
                    )
                )
            cells.append(
                Cell(
                    date=day,
                    weekday=weekday_of(day),
                    is_today=same_hour(at, now),
                    events=tuple(placements),
                    classes=merge_classes(placements),
                )
            )
        rows.append(SlotRow(slot=slot, cells=tuple(cells)))

    logger.debug(
        "Week grid from %s: %d slots, %d events considered",
        first.isoformat(),
        len(rows),
        len(events),
    )
    return WeekGrid(week_start=first, starting_day=config.starting_day, interval=interval, rows=tuple(rows))
