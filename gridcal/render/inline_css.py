# gridcal/render/inline_css.py
from __future__ import annotations

from .css.part01_month import CSS_PART as CSS_01
from .css.part02_week import CSS_PART as CSS_02

CSS_BLOCK = "\n".join([
  CSS_01, CSS_02
])

STYLESHEET = "<style>\n" + CSS_BLOCK + "</style>"

THEMES = ("purple", "pink", "orange", "yellow", "green", "grey", "blue")
