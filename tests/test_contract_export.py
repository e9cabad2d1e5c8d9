from __future__ import annotations

import datetime as dt
import json
import unittest

from gridcal import Calendar, CalendarConfig, FixedClock
from gridcal.export import dumps, grid_to_dict


class TestExportContract(unittest.TestCase):
    def _cal(self) -> Calendar:
        return Calendar(CalendarConfig(), clock=FixedClock(dt.datetime(2024, 2, 14, 9, 40)))

    def test_week_grid_dict(self) -> None:
        cal = (
            self._cal()
            .use_week_view()
            .set_time_format("09:00", "10:00", 30)
            .add_event("2024-02-14 09:15", "2024-02-14 09:45", "Standup", box_classes="b")
        )
        d = grid_to_dict(cal.week_grid("2024-02-14"))
        self.assertEqual(d["view"], "week")
        self.assertEqual(d["week_start"], "2024-02-11")
        self.assertEqual(d["starting_day"], "sunday")
        self.assertEqual(d["interval"], 30)
        self.assertEqual(len(d["dates"]), 7)
        self.assertEqual([(r["start"], r["end"]) for r in d["rows"]], [("09:00", "09:30"), ("09:30", "10:00")])

        first = d["rows"][0]["cells"][3]["events"][0]
        second = d["rows"][1]["cells"][3]["events"][0]
        self.assertEqual(first["summary"], "Standup")
        self.assertEqual(second["summary"], "")
        self.assertEqual(first["part"], "start")
        self.assertEqual(first["box_classes"], ["b"])
        self.assertEqual(first["start"], "2024-02-14T09:15:00")
        self.assertTrue(d["rows"][0]["cells"][3]["today"])

    def test_month_grid_dict_marks_padding(self) -> None:
        d = grid_to_dict(self._cal().month_grid("2024-02-01"))
        first_row = d["rows"][0]
        self.assertEqual([c["padding"] for c in first_row], [True] * 4 + [False] * 3)
        self.assertEqual(first_row[0]["date"], "2024-01-28")
        self.assertEqual(first_row[4]["weekday"], "thursday")

    def test_dumps_is_json(self) -> None:
        text = dumps(self._cal().to_dict("2024-02-01"))
        data = json.loads(text)
        self.assertEqual(data["month"], 2)

    def test_rejects_non_grids(self) -> None:
        with self.assertRaises(TypeError):
            grid_to_dict({"view": "month"})  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main(verbosity=2)
