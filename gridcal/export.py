# gridcal/export.py
from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from gridcal.model import Cell, MonthGrid, Placement, WeekGrid
from gridcal.util.timeparse import format_hhmm

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

Grid = Union[MonthGrid, WeekGrid]


def _placement(p: Placement) -> Dict[str, Any]:
    ev = p.event
    return {
        "part": p.part,
        "summary": ev.summary if p.show_summary else "",
        "mask": ev.mask,
        "classes": list(p.classes),
        "box_classes": list(ev.box_classes),
        "start": ev.start.isoformat(),
        "end": ev.end.isoformat(),
    }


def _cell(c: Cell) -> Dict[str, Any]:
    return {
        "date": c.date.isoformat(),
        "weekday": c.weekday.css_name,
        "padding": c.is_padding,
        "today": c.is_today,
        "classes": list(c.classes),
        "events": [_placement(p) for p in c.events],
    }


def grid_to_dict(grid: Grid) -> Dict[str, Any]:
    """Plain dict/list view of a grid (ISO dates, HH:MM times)."""
    if isinstance(grid, MonthGrid):
        return {
            "view": "month",
            "year": grid.year,
            "month": grid.month,
            "starting_day": grid.starting_day.css_name,
            "rows": [[_cell(c) for c in row] for row in grid.rows],
        }
    if isinstance(grid, WeekGrid):
        rows: List[Dict[str, Any]] = []
        for r in grid.rows:
            rows.append(
                {
                    "start": format_hhmm(r.slot.start),
                    "end": format_hhmm(r.slot.end),
                    "cells": [_cell(c) for c in r.cells],
                }
            )
        return {
            "view": "week",
            "week_start": grid.week_start.isoformat(),
            "starting_day": grid.starting_day.css_name,
            "interval": grid.interval,
            "dates": [d.isoformat() for d in grid.dates],
            "rows": rows,
        }
    raise TypeError(f"grid must be MonthGrid or WeekGrid, got {type(grid).__name__}")


def dumps(obj: Any) -> str:
    if orjson is not None:
        return orjson.dumps(obj).decode("utf-8")
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
