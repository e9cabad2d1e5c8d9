# gridcal/events.py
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from gridcal.errors import CalendarError, MissingFieldError
from gridcal.model import Event
from gridcal.util.clock import Clock
from gridcal.util.dates import DateInput, parse_datetime

logger = logging.getLogger(__name__)

ClassesInput = Union[str, Sequence[str], None]

_REQUIRED_FIELDS = ("start", "end")


def normalize_classes(classes: ClassesInput) -> Tuple[str, ...]:
    """Space-separated string or list of class names -> tuple of names."""
    if not classes:
        return ()
    if isinstance(classes, str):
        parts = classes.split()
    else:
        parts = []
        for c in classes:
            parts.extend(str(c).split())
    out: List[str] = []
    for p in parts:
        if p not in out:
            out.append(p)
    return tuple(out)


def make_event(
    start: DateInput,
    end: DateInput,
    summary: str = "",
    mask: bool = False,
    classes: ClassesInput = (),
    box_classes: ClassesInput = (),
    *,
    tz: Optional[str] = "local",
    clock: Optional[Clock] = None,
) -> Event:
    return Event(
        start=parse_datetime(start, tz=tz, clock=clock),
        end=parse_datetime(end, tz=tz, clock=clock),
        summary=str(summary or ""),
        mask=bool(mask),
        classes=normalize_classes(classes),
        box_classes=normalize_classes(box_classes),
    )


def event_from_mapping(
    entry: Mapping[str, Any],
    index: int,
    *,
    tz: Optional[str] = "local",
    clock: Optional[Clock] = None,
) -> Event:
    """Build an Event from a bulk-add entry.

    Required keys: start, end. Optional: summary, mask, classes,
    event_box_classes (box_classes is accepted as an alias).
    """
    if not isinstance(entry, Mapping):
        raise CalendarError(f"events[{index}] must be a mapping; got {type(entry).__name__}")
    for name in _REQUIRED_FIELDS:
        if entry.get(name) is None:
            raise MissingFieldError(name, index)
    box = entry.get("event_box_classes")
    if box is None:
        box = entry.get("box_classes")
    return make_event(
        entry["start"],
        entry["end"],
        summary=entry.get("summary") or "",
        mask=bool(entry.get("mask", False)),
        classes=entry.get("classes"),
        box_classes=box,
        tz=tz,
        clock=clock,
    )


class EventStore:
    """Insertion-ordered event collection. Not synchronized."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: List[Event] = list(events)

    def add(self, event: Event) -> Event:
        self._events.append(event)
        return event

    def extend(self, events: Iterable[Event]) -> None:
        for ev in events:
            self.add(ev)

    def clear(self) -> None:
        logger.debug("Clearing %d events", len(self._events))
        self._events.clear()

    def snapshot(self) -> Tuple[Event, ...]:
        return tuple(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"EventStore({len(self._events)} events)"
