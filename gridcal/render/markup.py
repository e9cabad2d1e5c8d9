# gridcal/render/markup.py
from __future__ import annotations

import html
from typing import Iterable, List

from gridcal.model import CalendarConfig, Cell, DayNameFormat, MonthGrid, Weekday, WeekGrid
from gridcal.util.dates import day_initials, day_name, month_name
from gridcal.util.timeparse import format_hhmm

PLACEHOLDER = "&nbsp;"


def _cls(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def _esc(s: str) -> str:
    return html.escape(s, quote=True)


def hidden_day_styles(config: CalendarConfig) -> str:
    """One suppression rule per hidden weekday; columns stay in the grid."""
    out: List[str] = []
    for day in Weekday:
        if day not in config.hidden_days:
            continue
        n = day.css_name
        out.append(f"<style>.cal-th-{n},.cal-day-{n},.cal-{n}{{display:none!important;}}</style>")
    return "".join(out)


def header_days(starting_day: Weekday) -> List[Weekday]:
    return [Weekday((int(starting_day) + i) % 7) for i in range(7)]


def _header_label(day: Weekday, config: CalendarConfig) -> str:
    if config.day_format == DayNameFormat.FULL:
        return day_name(day, config.locale)
    return day_initials(day, config.locale)


def _month_cell(cell: Cell) -> str:
    n = cell.weekday.css_name
    if cell.is_padding:
        return f'<td class="pad cal-{n}"> </td>'

    rows: List[str] = []
    for p in cell.events:
        if not (p.show_summary and p.event.summary):
            continue
        span_cls = _cls("event-summary-row", *p.event.box_classes)
        rows.append(f'<span class="{span_cls}">{_esc(p.event.summary)}</span>')

    td_cls = _cls("day cal-day", f"cal-day-{n}", *cell.classes, "today" if cell.is_today else "")
    title = _esc(" ".join(cell.summaries))
    return (
        f'<td class="{td_cls}" title="{title}">'
        f'<div class="cal-day-box">{cell.date.day}</div>'
        f'<div class="cal-event-box">{"".join(rows)}</div>'
        "</td>"
    )


def render_month(grid: MonthGrid, config: CalendarConfig, color: str = "") -> str:
    parts: List[str] = [hidden_day_styles(config)]
    parts.append(f'<table class="{_cls("calendar", color, config.table_classes)}">')

    title = f"{month_name(grid.month, config.locale)} {grid.year}"
    parts.append("<thead>")
    parts.append(f'<tr class="calendar-title"><th colspan="{config.visible_columns}">{_esc(title)}</th></tr>')
    parts.append('<tr class="calendar-header">')
    for day in header_days(grid.starting_day):
        parts.append(f'<th class="cal-th cal-th-{day.css_name}">{_esc(_header_label(day, config))}</th>')
    parts.append("</tr>")
    parts.append("</thead>")

    parts.append("<tbody>")
    for i, row in enumerate(grid.rows, start=1):
        parts.append(f'<tr class="cal-week-{i}">')
        parts.extend(_month_cell(c) for c in row)
        parts.append("</tr>")
    parts.append("</tbody>")
    parts.append("</table>")
    return "".join(parts)


def _week_events(cell: Cell) -> Iterable[str]:
    for p in cell.events:
        text = _esc(p.event.summary) if p.show_summary else PLACEHOLDER
        ev_cls = _cls("cal-weekview-event", *p.classes, *p.event.box_classes)
        yield f'<div class="{ev_cls}">{text}</div>'


def render_week(grid: WeekGrid, config: CalendarConfig, color: str = "") -> str:
    parts: List[str] = ['<div class="weekly-calendar-container">', hidden_day_styles(config)]
    parts.append(f'<table class="{_cls("weekly-calendar calendar", color, config.table_classes)}">')

    parts.append("<thead>")
    parts.append('<tr class="calendar-header">')
    parts.append("<th></th>")
    for d in grid.dates:
        day = Weekday.of(d)
        parts.append(f'<th class="cal-th cal-th-{day.css_name}">')
        parts.append(f'<div class="cal-weekview-dow">{_esc(day_name(day, config.locale))}</div>')
        parts.append(f'<div class="cal-weekview-day">{d.day}</div>')
        parts.append(f'<div class="cal-weekview-month">{_esc(month_name(d.month, config.locale))}</div>')
        parts.append("</th>")
    parts.append("</tr>")
    parts.append("</thead>")

    parts.append("<tbody>")
    for row in grid.rows:
        parts.append("<tr>")
        label = f"{format_hhmm(row.slot.start)} - {format_hhmm(row.slot.end)}"
        parts.append(f'<td class="cal-weekview-time-th"><div>{label}</div></td>')
        for cell in row.cells:
            td_cls = _cls("cal-weekview-time", f"cal-day-{cell.weekday.css_name}", "today" if cell.is_today else "")
            parts.append(f'<td class="{td_cls}"><div>{"".join(_week_events(cell))}</div></td>')
        parts.append("</tr>")
    parts.append("</tbody>")
    parts.append("</table>")
    parts.append("</div>")
    return "".join(parts)
