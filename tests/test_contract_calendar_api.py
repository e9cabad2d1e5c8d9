from __future__ import annotations

import dataclasses
import datetime as dt
import unittest

from gridcal import Calendar, CalendarConfig, Event, FixedClock, Weekday
from gridcal.errors import (
    CalendarError,
    DateParseError,
    InvalidConfigurationError,
    MissingFieldError,
    UnsupportedOperationError,
)
from gridcal.model import DayNameFormat, MonthGrid, ViewType, WeekGrid


def _cal() -> Calendar:
    return Calendar(CalendarConfig(), clock=FixedClock(dt.datetime(2024, 2, 14, 9, 40)))


class TestCalendarApiContract(unittest.TestCase):
    def test_setters_chain_and_update_config(self) -> None:
        cal = _cal()
        out = (
            cal.use_monday_starting_date()
            .use_full_day_names()
            .use_week_view()
            .set_time_format("08:00", "12:00", 60)
            .hide_weekday("sat")
            .set_locale("en_GB")
            .add_table_classes("wide")
        )
        self.assertIs(out, cal)
        cfg = cal.config
        self.assertEqual(cfg.starting_day, Weekday.MONDAY)
        self.assertEqual(cfg.day_format, DayNameFormat.FULL)
        self.assertEqual(cfg.view, ViewType.WEEK)
        self.assertEqual((cfg.start_time, cfg.end_time, cfg.time_interval), (dt.time(8), dt.time(12), 60))
        self.assertEqual(cfg.hidden_days, frozenset({Weekday.SATURDAY}))
        self.assertEqual(cfg.locale, "en_GB")
        self.assertEqual(cfg.table_classes, "wide")

        cal.use_sunday_starting_date().use_initial_day_names().use_month_view()
        self.assertEqual(cal.config.starting_day, Weekday.SUNDAY)
        self.assertEqual(cal.config.day_format, DayNameFormat.INITIALS)
        self.assertEqual(cal.config.view, ViewType.MONTH)

    def test_week_start_rejects_other_days(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            _cal().set_week_start("wednesday")
        self.assertEqual(_cal().set_week_start("monday").config.starting_day, Weekday.MONDAY)

    def test_weekday_directives(self) -> None:
        self.assertEqual(Weekday.parse("hideSundays"), Weekday.SUNDAY)
        self.assertEqual(Weekday.parse("Mondays"), Weekday.MONDAY)
        self.assertEqual(Weekday.parse("tue"), Weekday.TUESDAY)
        self.assertEqual(Weekday.parse(6), Weekday.SATURDAY)
        for bad in ("funday", "hideFundays", 7, None):
            with self.subTest(value=bad):
                with self.assertRaises(UnsupportedOperationError):
                    _cal().hide_weekday(bad)  # type: ignore[arg-type]

    def test_toggle_and_set_hidden_weekdays(self) -> None:
        cal = _cal().toggle_hidden_weekday("sunday")
        self.assertEqual(cal.config.hidden_days, frozenset({Weekday.SUNDAY}))
        cal.toggle_hidden_weekday(Weekday.SUNDAY)
        self.assertEqual(cal.config.hidden_days, frozenset())
        cal.set_hidden_weekdays(["sat", "sun"])
        self.assertEqual(cal.config.hidden_days, frozenset({Weekday.SATURDAY, Weekday.SUNDAY}))
        self.assertEqual(cal.config.visible_columns, 5)

    def test_set_hidden_weekdays_accepts_a_single_name(self) -> None:
        cal = _cal().set_hidden_weekdays("sunday")
        self.assertEqual(cal.config.hidden_days, frozenset({Weekday.SUNDAY}))
        cal.set_hidden_weekdays(Weekday.MONDAY)
        self.assertEqual(cal.config.hidden_days, frozenset({Weekday.MONDAY}))
        cal.set_hidden_weekdays([])
        self.assertEqual(cal.config.hidden_days, frozenset())

    def test_add_event_normalizes_inputs(self) -> None:
        cal = _cal().add_event(
            dt.date(2024, 2, 14),
            "2024-02-16T10:30",
            "Trip",
            mask=True,
            classes=["holiday", "red", "holiday"],
            box_classes="a b",
        )
        (ev,) = cal.events
        self.assertIsInstance(ev, Event)
        self.assertEqual(ev.start, dt.datetime(2024, 2, 14))
        self.assertEqual(ev.end, dt.datetime(2024, 2, 16, 10, 30))
        self.assertEqual(ev.classes, ("holiday", "red"))
        self.assertEqual(ev.box_classes, ("a", "b"))
        self.assertTrue(ev.mask)

    def test_relative_date_keywords_use_the_clock(self) -> None:
        cal = _cal().add_event("today", "tomorrow", "Now-ish")
        (ev,) = cal.events
        self.assertEqual(ev.start, dt.datetime(2024, 2, 14))
        self.assertEqual(ev.end, dt.datetime(2024, 2, 15))
        self.assertEqual(cal.month_grid().month, 2)

    def test_aware_inputs_convert_to_calendar_timezone(self) -> None:
        cal = _cal().set_timezone("UTC").add_event("2024-02-14T09:00+02:00", "2024-02-14T10:00Z")
        (ev,) = cal.events
        self.assertEqual(ev.start, dt.datetime(2024, 2, 14, 7, 0))
        self.assertEqual(ev.end, dt.datetime(2024, 2, 14, 10, 0))

    def test_invalid_timezone_is_rejected(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            _cal().set_timezone("No/Such_Zone")

    def test_unparseable_dates_raise(self) -> None:
        with self.assertRaises(DateParseError) as ctx:
            _cal().add_event("not a date", "2024-02-14")
        self.assertEqual(ctx.exception.value, "not a date")
        with self.assertRaises(DateParseError):
            _cal().render("2024-13-01")
        self.assertTrue(issubclass(DateParseError, CalendarError))
        self.assertTrue(issubclass(CalendarError, ValueError))

    def test_add_events_reports_index_and_keeps_earlier_entries(self) -> None:
        cal = _cal()
        entries = [
            {"start": "2024-02-01", "end": "2024-02-01", "summary": "ok"},
            {"start": "2024-02-02", "summary": "no end"},
            {"start": "2024-02-03", "end": "2024-02-03"},
        ]
        with self.assertRaises(MissingFieldError) as ctx:
            cal.add_events(entries)
        self.assertEqual(ctx.exception.index, 1)
        self.assertEqual(ctx.exception.field, "end")
        self.assertEqual([e.summary for e in cal.events], ["ok"])

    def test_add_events_accepts_box_class_keys(self) -> None:
        cal = _cal().add_events(
            [
                {"start": "2024-02-01", "end": "2024-02-02", "event_box_classes": ["x"]},
                {"start": "2024-02-03", "end": "2024-02-03", "box_classes": "y", "mask": True},
            ]
        )
        self.assertEqual([e.box_classes for e in cal.events], [("x",), ("y",)])
        self.assertEqual([e.mask for e in cal.events], [False, True])

    def test_add_events_rejects_non_mapping_entries(self) -> None:
        with self.assertRaises(CalendarError):
            _cal().add_events(["2024-02-01"])  # type: ignore[list-item]

    def test_clear_events(self) -> None:
        cal = _cal().add_event("2024-02-14", "2024-02-14", "x")
        self.assertIs(cal.clear_events(), cal)
        self.assertEqual(cal.events, ())

    def test_render_reflects_current_state(self) -> None:
        cal = _cal()
        before = cal.render("2024-02-01")
        cal.add_event("2024-02-20", "2024-02-20", "Later")
        after = cal.render("2024-02-01")
        self.assertNotIn("Later", before)
        self.assertIn("Later", after)
        self.assertEqual(cal.draw("2024-02-01"), after)

    def test_grids_are_snapshots(self) -> None:
        cal = _cal().add_event("2024-02-14", "2024-02-14", "x")
        grid = cal.month_grid("2024-02-01")
        cal.use_monday_starting_date().clear_events()
        self.assertEqual(grid.starting_day, Weekday.SUNDAY)
        self.assertTrue(grid.rows[0][0].is_padding)
        self.assertEqual(grid.cell_for(dt.date(2024, 2, 14)).summaries, ("x",))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            grid.year = 2000  # type: ignore[misc]

    def test_view_selects_grid_type(self) -> None:
        cal = _cal()
        self.assertIsInstance(cal.grid("2024-02-14"), MonthGrid)
        cal.use_week_view()
        self.assertIsInstance(cal.grid("2024-02-14"), WeekGrid)
        self.assertIn("weekly-calendar", cal.render("2024-02-14"))
        self.assertIn("February 2024", cal.as_month_view("2024-02-14"))

    def test_to_dict(self) -> None:
        d = _cal().add_event("2024-02-14", "2024-02-16", "Trip", mask=True).to_dict("2024-02")
        self.assertEqual(d["view"], "month")
        self.assertEqual((d["year"], d["month"]), (2024, 2))
        self.assertEqual(len(d["rows"]), 5)
        cell = d["rows"][2][3]
        self.assertEqual(cell["date"], "2024-02-14")
        self.assertEqual(cell["classes"], ["mask-start"])
        self.assertEqual(cell["events"][0]["summary"], "Trip")


if __name__ == "__main__":
    unittest.main(verbosity=2)
