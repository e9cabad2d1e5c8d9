"""Calendar configuration: defaults, environment, and JSON config files.

Keys understood by `config_from_mapping` / `load_config`:
  locale, view, day_format, week_start, hidden_days, table_classes,
  start_time, end_time, interval, tz
"""

from __future__ import annotations

import dataclasses
import json
import os
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from gridcal.errors import InvalidConfigurationError, UnsupportedOperationError
from gridcal.model import CalendarConfig, DayNameFormat, ViewType, Weekday
from gridcal.util.clock import LOCAL, canonical_tz, zone_for
from gridcal.util.timeparse import parse_time_of_day

ENV_TZ = "GRIDCAL_TZ"
ENV_LOCALE = "GRIDCAL_LOCALE"

_KEYS = {
    "locale",
    "view",
    "day_format",
    "week_start",
    "hidden_days",
    "table_classes",
    "start_time",
    "end_time",
    "interval",
    "tz",
}

_WEEK_STARTS = (Weekday.SUNDAY, Weekday.MONDAY)


def default_config() -> CalendarConfig:
    return CalendarConfig(
        locale=os.getenv(ENV_LOCALE) or "en_US",
        tz=canonical_tz(os.getenv(ENV_TZ, LOCAL)),
    )


def coerce_view(value: Union[str, ViewType]) -> ViewType:
    try:
        return ViewType(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        raise InvalidConfigurationError(f"view must be 'month' or 'week'; got {value!r}") from None


def coerce_day_format(value: Union[str, DayNameFormat]) -> DayNameFormat:
    try:
        return DayNameFormat(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        raise InvalidConfigurationError(f"day_format must be 'initials' or 'full'; got {value!r}") from None


def coerce_week_start(value: Union[str, int, Weekday]) -> Weekday:
    try:
        day = Weekday.parse(value)
    except UnsupportedOperationError as ex:
        raise InvalidConfigurationError(str(ex)) from ex
    if day not in _WEEK_STARTS:
        raise InvalidConfigurationError(f"week_start must be sunday or monday; got {value!r}")
    return day


def coerce_hidden_days(value: Union[str, int, Weekday, Iterable[Any], None]) -> FrozenSet[Weekday]:
    """One weekday or a list of them; a bare string names a single day."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return frozenset()
    if isinstance(value, (str, int)):
        return frozenset({Weekday.parse(value)})
    return frozenset(Weekday.parse(d) for d in value)


def coerce_interval(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfigurationError(f"interval must be a positive number of minutes; got {value!r}")
    return value


def coerce_tz(value: Optional[str]) -> str:
    name = canonical_tz(value)
    try:
        zone_for(name)
    except ValueError as ex:
        raise InvalidConfigurationError(str(ex)) from ex
    return name


def join_classes(classes: Union[str, Iterable[str], None]) -> str:
    if not classes:
        return ""
    if isinstance(classes, str):
        return classes.strip()
    return " ".join(str(c).strip() for c in classes if str(c).strip())


def config_from_mapping(data: Mapping[str, Any], base: Optional[CalendarConfig] = None) -> CalendarConfig:
    if not isinstance(data, Mapping):
        raise InvalidConfigurationError(f"config must be a JSON object; got {type(data).__name__}")
    unknown = sorted(set(data) - _KEYS)
    if unknown:
        raise InvalidConfigurationError(f"Unknown config key(s): {', '.join(unknown)}")

    cfg = base or default_config()
    changes: Dict[str, Any] = {}
    if "locale" in data:
        changes["locale"] = str(data["locale"] or "")
    if "view" in data:
        changes["view"] = coerce_view(data["view"])
    if "day_format" in data:
        changes["day_format"] = coerce_day_format(data["day_format"])
    if "week_start" in data:
        changes["starting_day"] = coerce_week_start(data["week_start"])
    if "hidden_days" in data:
        changes["hidden_days"] = coerce_hidden_days(data["hidden_days"])
    if "table_classes" in data:
        changes["table_classes"] = join_classes(data["table_classes"])
    if "start_time" in data:
        changes["start_time"] = parse_time_of_day(data["start_time"])
    if "end_time" in data:
        changes["end_time"] = parse_time_of_day(data["end_time"])
    if "interval" in data:
        changes["time_interval"] = coerce_interval(data["interval"])
    if "tz" in data:
        changes["tz"] = coerce_tz(data["tz"])
    return dataclasses.replace(cfg, **changes)


def _read_json(path: Union[str, Path]) -> Any:
    p = Path(path)
    try:
        return json.loads(p.read_text(encoding="utf-8", errors="replace"))
    except json.JSONDecodeError as ex:
        raise InvalidConfigurationError(f"{p}: invalid JSON ({ex})") from ex


def load_config(path: Union[str, Path], base: Optional[CalendarConfig] = None) -> CalendarConfig:
    return config_from_mapping(_read_json(path), base=base)


def load_events(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Event inputs from a JSON array or an object with an "events" array."""
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("events")
    if not isinstance(data, list):
        raise InvalidConfigurationError(f"{path}: expected a JSON array of events")
    return data
