from __future__ import annotations

import argparse
import logging
import os
import sys
import webbrowser
from pathlib import Path
from typing import List, Optional

from .api import Calendar
from .config import ENV_LOCALE, ENV_TZ, config_from_mapping, default_config, load_config, load_events
from .errors import CalendarError
from .export import dumps, grid_to_dict
from .model import ViewType
from .render.inline_css import THEMES
from .render.page import build_page
from .util.dates import month_name
from .util.timeparse import format_hhmm, parse_time_window

logger = logging.getLogger(__name__)


def _die(msg: str, rc: int = 2) -> int:
    print(f"[gridcal] ERROR: {msg}", file=sys.stderr)
    return rc


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _build_calendar(args: argparse.Namespace) -> Calendar:
    cfg = default_config()
    if args.config:
        cfg = load_config(Path(args.config), base=cfg)

    overrides = {}
    if args.locale:
        overrides["locale"] = args.locale
    if args.tz:
        overrides["tz"] = args.tz
    if args.view:
        overrides["view"] = args.view
    if args.week_start:
        overrides["week_start"] = args.week_start
    if args.day_names:
        overrides["day_format"] = args.day_names
    if args.hide:
        overrides["hidden_days"] = list(args.hide)
    if args.table_classes is not None:
        overrides["table_classes"] = args.table_classes
    if args.time_format:
        start, end = parse_time_window(args.time_format)
        overrides["start_time"] = format_hhmm(start)
        overrides["end_time"] = format_hhmm(end)
    if args.interval is not None:
        overrides["interval"] = args.interval
    cfg = config_from_mapping(overrides, base=cfg)

    cal = Calendar(cfg)
    if args.events:
        cal.add_events(load_events(Path(args.events)))
    return cal


def _page_title(cal: Calendar, args: argparse.Namespace) -> str:
    grid = cal.grid(args.date)
    if cal.config.view == ViewType.WEEK:
        return f"Week of {grid.week_start.isoformat()}"  # type: ignore[union-attr]
    return f"{month_name(grid.month, cal.config.locale)} {grid.year}"  # type: ignore[union-attr]


def main(argv: Optional[List[str]] = None) -> int:
    default_out = os.path.join("build", "gridcal_calendar.html")
    ap = argparse.ArgumentParser(
        prog="gridcal",
        description="Render a month or week calendar with events as a standalone HTML page (or grid JSON).",
    )
    ap.add_argument("--date", default=None, help="Any date in the month/week to show, YYYY-MM-DD (default: today in --tz)")
    ap.add_argument("--view", choices=[v.value for v in ViewType], default=None, help="Calendar layout (default: month)")
    ap.add_argument("--events", default=None, help="JSON file: array of {start, end, summary?, mask?, classes?, event_box_classes?}")
    ap.add_argument("--config", default=None, help="JSON config file (locale, view, week_start, hidden_days, ...)")
    ap.add_argument("--locale", default=None, help=f"Locale for day/month names (default: env {ENV_LOCALE} or en_US)")
    ap.add_argument("--week-start", choices=["sunday", "monday"], default=None, help="First column of each week")
    ap.add_argument("--day-names", choices=["initials", "full"], default=None, help="Month view header style")
    ap.add_argument("--hide", action="append", default=None, metavar="DAY", help="Hide a weekday column (repeatable)")
    ap.add_argument("--time-format", default=None, help="Week view window, e.g. 09:00-17:00 (equal ends = full day)")
    ap.add_argument("--interval", type=int, default=None, help="Week view slot length in minutes (default: 30)")
    ap.add_argument("--color", default="", help=f"Colour theme: {', '.join(THEMES)}")
    ap.add_argument("--table-classes", default=None, help="Extra classes for the <table> element")
    ap.add_argument("--tz", default=None, help=f"Timezone for 'now' and aware inputs (default: env {ENV_TZ} or 'local')")
    ap.add_argument("--format", choices=["html", "json"], default="html", help="Output format (default: html)")
    ap.add_argument("--out", default=None, help=f"Output path, '-' for stdout (default: {default_out})")
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = ap.parse_args(argv)
    _setup_logging(bool(args.verbose))

    if args.color and args.color not in THEMES:
        logger.warning("Unknown colour theme %r; the class is emitted but no built-in style matches", args.color)

    try:
        cal = _build_calendar(args)
        if args.format == "json":
            text = dumps(grid_to_dict(cal.grid(args.date)))
        else:
            text = build_page(cal.render(args.date, args.color), _page_title(cal, args), cal.config.locale)
    except CalendarError as e:
        return _die(str(e))
    except OSError as e:
        return _die(f"Failed to read input: {e}")

    if args.out == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return 0

    if args.out:
        out_path = Path(args.out).expanduser()
    elif args.format == "json":
        out_path = Path("build") / "gridcal_calendar.json"
    else:
        out_path = Path(default_out)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8", newline="\n")
    except OSError as e:
        return _die(f"Cannot write '{out_path}': {e}")

    print(str(out_path.resolve()))
    logger.debug("Wrote %d bytes to %s", len(text), out_path)

    if args.format == "html" and not args.no_open:
        try:
            webbrowser.open("file://" + str(out_path.resolve()))
        except Exception:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
