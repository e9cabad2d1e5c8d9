# gridcal/render/css/part01_month.py
from __future__ import annotations

CSS_PART = r'''  .calendar {
    background: #2ca8c2;
    color: #fff;
    width: 100%;
    font-family: Oxygen, sans-serif;
    table-layout: fixed;
  }
  .calendar.purple { background: #913ccd; }
  .calendar.pink { background: #f15f74; }
  .calendar.orange { background: #f76d3c; }
  .calendar.yellow { background: #f7d842; }
  .calendar.green { background: #98cb4a; }
  .calendar.grey { background: #839098; }
  .calendar.blue { background: #5481e6; }

  .calendar-title th {
    font-size: 22px;
    font-weight: 700;
    padding: 20px;
    text-align: center;
    text-transform: uppercase;
    background: rgba(0,0,0,.05);
  }
  .calendar-header th {
    padding: 10px;
    text-align: center;
    background: rgba(0,0,0,.1);
  }

  .calendar tbody tr td {
    text-align: center;
    vertical-align: top;
    width: 14.28%;
  }
  .calendar tbody tr td.pad { background: rgba(255,255,255,.1); }
  .calendar tbody tr td.day div:first-child {
    padding: 4px;
    line-height: 17px;
    height: 25px;
  }
  .calendar tbody tr td.day div:last-child {
    font-size: 10px;
    padding: 4px;
    min-height: 25px;
  }
  .calendar tbody tr td.today { background: rgba(0,0,0,.25); }
  .calendar tbody tr td.mask,
  .calendar tbody tr td.mask-start,
  .calendar tbody tr td.mask-end { background: #c23b22; }
  .calendar .event-summary-row { display: block; }
'''
