"""gridcal: month and week calendars rendered as HTML tables.

Public API:
  - import from `gridcal.api` (preferred) or `import gridcal` (re-export)
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__all__ = list(_api.__all__)

from .api import (
    Calendar,
    CalendarConfig,
    Event,
    FixedClock,
    SystemClock,
    Weekday,
)
