# gridcal/model.py
from __future__ import annotations

import datetime as dt
import enum
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, Optional, Tuple, Union

from gridcal.errors import UnsupportedOperationError


class Weekday(enum.IntEnum):
    """Weekday numbered the way the markup classes expect (Sunday = 0)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def css_name(self) -> str:
        return self.name.lower()

    @classmethod
    def of(cls, d: dt.date) -> "Weekday":
        # date.weekday() is Monday = 0
        return cls((d.weekday() + 1) % 7)

    @classmethod
    def parse(cls, value: Union["Weekday", str, int]) -> "Weekday":
        """Resolve "sunday", "Sundays", "sun" or "hideSundays" to a Weekday."""
        if isinstance(value, Weekday):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise UnsupportedOperationError(f"Not a weekday number: {value!r}") from None
        if not isinstance(value, str):
            raise UnsupportedOperationError(f"Not a weekday: {value!r}")
        s = value.strip().lower()
        if s.startswith("hide"):
            s = s[4:]
        for day in cls:
            name = day.css_name
            if s in (name, name + "s", name[:3]):
                return day
        raise UnsupportedOperationError(f"Unknown weekday directive: {value!r}")


class ViewType(str, enum.Enum):
    MONTH = "month"
    WEEK = "week"


class DayNameFormat(str, enum.Enum):
    INITIALS = "initials"
    FULL = "full"


PART_START = "start"
PART_MID = "mid"
PART_END = "end"


@dataclass(frozen=True)
class Event:
    start: dt.datetime
    end: dt.datetime
    summary: str = ""
    mask: bool = False
    classes: Tuple[str, ...] = ()
    box_classes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CalendarConfig:
    locale: str = "en_US"
    view: ViewType = ViewType.MONTH
    time_interval: int = 30
    start_time: dt.time = dt.time(0, 0)
    end_time: dt.time = dt.time(0, 0)
    day_format: DayNameFormat = DayNameFormat.INITIALS
    starting_day: Weekday = Weekday.SUNDAY
    hidden_days: FrozenSet[Weekday] = frozenset()
    table_classes: str = ""
    tz: str = "local"

    @property
    def visible_columns(self) -> int:
        return 7 - len(self.hidden_days)


@dataclass(frozen=True)
class Placement:
    """One event's presence in one cell."""

    event: Event
    part: str  # "start" | "mid" | "end", or "" when only a slot boundary touches the day
    classes: Tuple[str, ...] = ()
    show_summary: bool = True


@dataclass(frozen=True)
class Cell:
    date: dt.date
    weekday: Weekday
    is_padding: bool = False
    is_today: bool = False
    events: Tuple[Placement, ...] = ()
    classes: Tuple[str, ...] = ()

    @property
    def summaries(self) -> Tuple[str, ...]:
        return tuple(
            p.event.summary
            for p in self.events
            if p.show_summary and p.event.summary
        )


WeekRow = Tuple[Cell, ...]


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    starting_day: Weekday
    rows: Tuple[WeekRow, ...]

    @property
    def first(self) -> dt.date:
        return dt.date(self.year, self.month, 1)

    def cells(self) -> Iterator[Cell]:
        for row in self.rows:
            yield from row

    def day_cells(self) -> Iterator[Cell]:
        return (c for c in self.cells() if not c.is_padding)

    def cell_for(self, d: dt.date) -> Optional[Cell]:
        for c in self.day_cells():
            if c.date == d:
                return c
        return None


@dataclass(frozen=True)
class TimeSlot:
    start: dt.time
    end: dt.time


@dataclass(frozen=True)
class SlotRow:
    slot: TimeSlot
    cells: Tuple[Cell, ...]


@dataclass(frozen=True)
class WeekGrid:
    week_start: dt.date
    starting_day: Weekday
    interval: int
    rows: Tuple[SlotRow, ...] = field(default_factory=tuple)

    @property
    def dates(self) -> Tuple[dt.date, ...]:
        return tuple(self.week_start + dt.timedelta(days=i) for i in range(7))

    @property
    def slots(self) -> Tuple[TimeSlot, ...]:
        return tuple(r.slot for r in self.rows)

    def cells(self) -> Iterator[Cell]:
        for row in self.rows:
            yield from row.cells


__all__ = [
    "Weekday",
    "ViewType",
    "DayNameFormat",
    "PART_START",
    "PART_MID",
    "PART_END",
    "Event",
    "CalendarConfig",
    "Placement",
    "Cell",
    "WeekRow",
    "MonthGrid",
    "TimeSlot",
    "SlotRow",
    "WeekGrid",
]
