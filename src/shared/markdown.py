"""Minimal markdown-to-HTML rendering for model answers.

Supported grammar, applied in order:

* HTML special characters (``&``, ``<``, ``>``) are escaped first;
* ``**text**`` becomes ``<strong>text</strong>``;
* ``*text*`` becomes ``<em>text</em>``;
* a line starting with ``- `` becomes ``<li class="ml-4 list-disc">...</li>``;
* every newline becomes ``<br />``.

Matches never span lines. Everything else is passed through as text.
"""

from __future__ import annotations

import re
from html import escape

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_LIST_ITEM = re.compile(r"^- (.*)", re.MULTILINE)

LIST_ITEM_CLASS = "ml-4 list-disc"


def render_markdown(text: str) -> str:
    html = escape(text, quote=False)
    html = _BOLD.sub(r"<strong>\1</strong>", html)
    html = _ITALIC.sub(r"<em>\1</em>", html)
    html = _LIST_ITEM.sub(rf'<li class="{LIST_ITEM_CLASS}">\1</li>', html)
    return html.replace("\n", "<br />")
