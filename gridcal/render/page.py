# gridcal/render/page.py
from __future__ import annotations

import html

from .inline_css import CSS_BLOCK

PAGE_SHELL = r"""<!doctype html>
<html lang="__LANG__">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>__TITLE__</title>
<style>
__CSS_BLOCK__
</style>
</head>
<body>
__BODY_MARKUP__
</body>
</html>
"""

_BODY_MARKER = "__BODY_MARKUP__"


def build_page(markup: str, title: str = "Calendar", locale_name: str = "en_US") -> str:
    """Standalone HTML document holding the stylesheet and one calendar."""
    if PAGE_SHELL.count(_BODY_MARKER) != 1:
        raise RuntimeError(f"PAGE_SHELL must contain {_BODY_MARKER} exactly once")

    lang = (locale_name or "en").split(".")[0].replace("_", "-")
    out = (
        PAGE_SHELL
        .replace("__LANG__", html.escape(lang, quote=True))
        .replace("__TITLE__", html.escape(title))
        .replace("__CSS_BLOCK__", CSS_BLOCK)
    )
    # Body last so marker text inside calendar markup is left alone.
    return out.replace(_BODY_MARKER, markup)
