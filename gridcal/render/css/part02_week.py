# gridcal/render/css/part02_week.py
from __future__ import annotations

CSS_PART = r'''  .weekly-calendar { min-width: 850px; }
  .calendar .cal-weekview-time { padding: 4px 2px 2px 4px; }
  .calendar .cal-weekview-time > div {
    background: rgba(0,0,0,0.03);
    padding: 10px;
    min-height: 50px;
  }
  .calendar .cal-weekview-event.mask-start,
  .calendar .cal-weekview-event.mask,
  .calendar .cal-weekview-event.mask-end {
    background: #c23b22;
    margin-bottom: 3px;
    padding: 5px;
  }
  .calendar .cal-weekview-time-th { background: rgba(0,0,0,.1); }
  .calendar .cal-weekview-time-th > div {
    padding: 10px;
    min-height: 50px;
  }

  @media screen and (max-width: 768px) {
    .weekly-calendar-container {
      display: block;
      overflow-x: scroll;
      overflow-y: hidden;
      white-space: nowrap;
    }
  }
'''
