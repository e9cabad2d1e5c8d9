"""gridcal.api

Stable *library* entrypoint for gridcal.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from gridcal.config import (
    coerce_day_format,
    coerce_hidden_days,
    coerce_interval,
    coerce_tz,
    coerce_view,
    coerce_week_start,
    default_config,
    join_classes,
)
from gridcal.errors import (
    CalendarError,
    DateParseError,
    InvalidConfigurationError,
    MissingFieldError,
    UnsupportedOperationError,
)
from gridcal.events import ClassesInput, EventStore, event_from_mapping, make_event
from gridcal.export import grid_to_dict
from gridcal.model import (
    CalendarConfig,
    DayNameFormat,
    Event,
    MonthGrid,
    ViewType,
    Weekday,
    WeekGrid,
)
from gridcal.month import build_month_grid
from gridcal.render.inline_css import STYLESHEET
from gridcal.render.markup import render_month, render_week
from gridcal.util.clock import Clock, FixedClock, SystemClock
from gridcal.util.dates import DateInput, parse_date
from gridcal.util.timeparse import TimeInput, format_hhmm, parse_time_of_day
from gridcal.week import build_week_grid, time_slots

logger = logging.getLogger(__name__)

WeekdayInput = Union[Weekday, str, int]


class Calendar:
    """Month/week calendar renderer.

    Configuration setters and event mutators return `self` so calls chain:

        Calendar().use_monday_starting_date().add_event("2024-02-14", "2024-02-16", "Trip").render("2024-02-01")
    """

    def __init__(self, config: Optional[CalendarConfig] = None, clock: Optional[Clock] = None) -> None:
        self.config = config or default_config()
        self.clock = clock
        self._events = EventStore()

    # --- configuration ---------------------------------------------------------

    def _update(self, **changes: Any) -> "Calendar":
        self.config = dataclasses.replace(self.config, **changes)
        return self

    def set_locale(self, locale_name: str) -> "Calendar":
        return self._update(locale=str(locale_name or ""))

    def set_timezone(self, tz: Optional[str]) -> "Calendar":
        return self._update(tz=coerce_tz(tz))

    def set_day_name_format(self, fmt: Union[str, DayNameFormat]) -> "Calendar":
        return self._update(day_format=coerce_day_format(fmt))

    def use_initial_day_names(self) -> "Calendar":
        return self.set_day_name_format(DayNameFormat.INITIALS)

    def use_full_day_names(self) -> "Calendar":
        return self.set_day_name_format(DayNameFormat.FULL)

    def set_week_start(self, day: WeekdayInput) -> "Calendar":
        return self._update(starting_day=coerce_week_start(day))

    def use_sunday_starting_date(self) -> "Calendar":
        return self.set_week_start(Weekday.SUNDAY)

    def use_monday_starting_date(self) -> "Calendar":
        return self.set_week_start(Weekday.MONDAY)

    def hide_weekday(self, day: WeekdayInput) -> "Calendar":
        """Hide a weekday column: hide_weekday("sundays"), hide_weekday(Weekday.SUNDAY)."""
        return self._update(hidden_days=self.config.hidden_days | {Weekday.parse(day)})

    def toggle_hidden_weekday(self, day: WeekdayInput) -> "Calendar":
        wd = Weekday.parse(day)
        return self._update(hidden_days=self.config.hidden_days ^ {wd})

    def set_hidden_weekdays(self, days: Union[WeekdayInput, Iterable[WeekdayInput]]) -> "Calendar":
        return self._update(hidden_days=coerce_hidden_days(days))

    def add_table_classes(self, classes: Union[str, Iterable[str]]) -> "Calendar":
        """Set the extra classes on the calendar <table> (string or list)."""
        return self._update(table_classes=join_classes(classes))

    def set_view(self, view: Union[str, ViewType]) -> "Calendar":
        return self._update(view=coerce_view(view))

    def use_month_view(self) -> "Calendar":
        return self.set_view(ViewType.MONTH)

    def use_week_view(self) -> "Calendar":
        return self.set_view(ViewType.WEEK)

    def set_time_format(self, start_time: TimeInput = "00:00", end_time: TimeInput = "00:00", minutes: int = 30) -> "Calendar":
        """Week view window and slot length. Equal start/end means a full day."""
        return self._update(
            start_time=parse_time_of_day(start_time),
            end_time=parse_time_of_day(end_time),
            time_interval=coerce_interval(minutes),
        )

    def get_time_slots(self) -> List[dt.time]:
        cfg = self.config
        return [s.start for s in time_slots(cfg.start_time, cfg.end_time, cfg.time_interval)]

    def get_times(self) -> List[str]:
        return [format_hhmm(t) for t in self.get_time_slots()]

    # --- events ------------------------------------------------------------------

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events.snapshot()

    def add_event(
        self,
        start: DateInput,
        end: DateInput,
        summary: str = "",
        mask: bool = False,
        classes: ClassesInput = (),
        box_classes: ClassesInput = (),
    ) -> "Calendar":
        self._events.add(
            make_event(start, end, summary, mask, classes, box_classes, tz=self.config.tz, clock=self.clock)
        )
        return self

    def add_events(self, events: Iterable[Mapping[str, Any]]) -> "Calendar":
        """Bulk add. Entries before a malformed one stay added."""
        for i, entry in enumerate(events):
            self._events.add(event_from_mapping(entry, i, tz=self.config.tz, clock=self.clock))
        return self

    def clear_events(self) -> "Calendar":
        self._events.clear()
        return self

    # --- grids & rendering ---------------------------------------------------------

    def _clock(self) -> Clock:
        return self.clock or SystemClock(self.config.tz)

    def _date(self, date: DateInput) -> dt.date:
        return parse_date(date, tz=self.config.tz, clock=self._clock())

    def month_grid(self, date: DateInput = None) -> MonthGrid:
        return build_month_grid(self.config, self._events.snapshot(), self._date(date), self._clock())

    def week_grid(self, date: DateInput = None) -> WeekGrid:
        return build_week_grid(self.config, self._events.snapshot(), self._date(date), self._clock())

    def grid(self, date: DateInput = None) -> Union[MonthGrid, WeekGrid]:
        if self.config.view == ViewType.WEEK:
            return self.week_grid(date)
        return self.month_grid(date)

    def as_month_view(self, date: DateInput = None, color: str = "") -> str:
        return render_month(self.month_grid(date), self.config, color)

    def as_week_view(self, date: DateInput = None, color: str = "") -> str:
        return render_week(self.week_grid(date), self.config, color)

    def render(self, date: DateInput = None, color: str = "") -> str:
        logger.debug("Rendering %s view for %r (%d events)", self.config.view.value, date, len(self._events))
        if self.config.view == ViewType.WEEK:
            return self.as_week_view(date, color)
        return self.as_month_view(date, color)

    draw = render

    def to_dict(self, date: DateInput = None) -> Dict[str, Any]:
        return grid_to_dict(self.grid(date))

    def stylesheet(self, echo: bool = False) -> Optional[str]:
        if echo:
            print(STYLESHEET)
            return None
        return STYLESHEET

    def display(self, date: DateInput = None, color: str = "") -> None:
        print(STYLESHEET)
        print(self.render(date, color))


__all__ = [
    "Calendar",
    "CalendarConfig",
    "Event",
    "MonthGrid",
    "WeekGrid",
    "Weekday",
    "ViewType",
    "DayNameFormat",
    "Clock",
    "SystemClock",
    "FixedClock",
    "CalendarError",
    "DateParseError",
    "MissingFieldError",
    "UnsupportedOperationError",
    "InvalidConfigurationError",
]
