from __future__ import annotations

import io
import json
import os
import subprocess
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from gridcal import cli

REPO_ROOT = Path(__file__).resolve().parents[1]

EVENTS = [
    {"start": "2024-02-14", "end": "2024-02-16", "summary": "Trip", "mask": True},
    {"start": "2024-02-20 09:00", "end": "2024-02-20 10:00", "summary": "Dentist", "classes": "health"},
]


def _run(argv: list) -> tuple:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        rc = cli.main(argv)
    return rc, out.getvalue(), err.getvalue()


class TestCliContract(unittest.TestCase):
    def test_default_out_is_build_relative_to_cwd(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            tmp = Path(td)
            old_cwd = Path.cwd()
            try:
                os.chdir(tmp)
                rc, out, _ = _run(["--no-open", "--date", "2024-02-01"])
            finally:
                os.chdir(old_cwd)

            page = tmp / "build" / "gridcal_calendar.html"
            self.assertEqual(rc, 0)
            self.assertTrue(page.exists())
            self.assertIn("gridcal_calendar.html", out)
            text = page.read_text(encoding="utf-8")
            self.assertTrue(text.startswith("<!doctype html>"))
            self.assertIn("<title>February 2024</title>", text)

    def test_html_with_events_and_options(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            tmp = Path(td)
            events = tmp / "events.json"
            events.write_text(json.dumps(EVENTS), encoding="utf-8")
            out_path = tmp / "cal.html"
            rc, _, _ = _run(
                [
                    "--no-open",
                    "--date", "2024-02-10",
                    "--events", str(events),
                    "--week-start", "monday",
                    "--hide", "saturday",
                    "--color", "green",
                    "--out", str(out_path),
                ]
            )
            self.assertEqual(rc, 0)
            text = out_path.read_text(encoding="utf-8")
            self.assertIn('<table class="calendar green">', text)
            self.assertIn("mask-start", text)
            self.assertIn("health", text)
            self.assertIn('<th colspan="6">February 2024</th>', text)
            self.assertIn("<style>.cal-th-saturday,", text)

    def test_json_to_stdout(self) -> None:
        rc, out, _ = _run(["--format", "json", "--out", "-", "--date", "2024-02-14", "--view", "week", "--time-format", "09:00-11:00", "--interval", "60"])
        self.assertEqual(rc, 0)
        data = json.loads(out)
        self.assertEqual(data["view"], "week")
        self.assertEqual(data["week_start"], "2024-02-11")
        self.assertEqual([r["start"] for r in data["rows"]], ["09:00", "10:00"])

    def test_bad_events_file_reports_user_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            events = Path(td) / "events.json"
            events.write_text(json.dumps([{"start": "2024-02-01"}]), encoding="utf-8")
            rc, _, err = _run(["--no-open", "--events", str(events), "--out", "-"])
        self.assertEqual(rc, 2)
        self.assertIn("[gridcal] ERROR:", err)
        self.assertIn("events[0]", err)

    def test_invalid_tz_reports_user_error(self) -> None:
        rc, _, err = _run(["--no-open", "--tz", "No/Such_Zone", "--out", "-"])
        self.assertEqual(rc, 2)
        self.assertIn("No/Such_Zone", err)

    def test_missing_events_file(self) -> None:
        rc, _, err = _run(["--no-open", "--events", "/nonexistent/events.json", "--out", "-"])
        self.assertEqual(rc, 2)
        self.assertIn("Failed to read input", err)

    def test_module_entrypoint(self) -> None:
        env = dict(os.environ)
        env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
        p = subprocess.run(
            [sys.executable, "-m", "gridcal.cli", "--format", "json", "--out", "-", "--date", "2024-02-01"],
            cwd=str(REPO_ROOT),
            env=env,
            capture_output=True,
            text=True,
        )
        self.assertEqual(p.returncode, 0, msg=p.stderr)
        self.assertEqual(json.loads(p.stdout)["month"], 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
