# ui/feedback.py
from __future__ import annotations
from html import escape
from typing import Iterable

from services.alignment import Extra, Match, Omitted, Operation, Substituted

OMITTED_MARK = "[抜]"


def _span(txt: str, color: str) -> str:
    return f'<span style="color:{color}">{txt}</span>'


def render_operations_html(ops: Iterable[Operation], err_color: str = "#ef4444") -> str:
    """
    Annotated copy of the produced text: matches plain, substituted and extra
    characters in ``err_color``, omissions as a red [抜] marker.
    """
    parts: list[str] = []
    for op in ops:
        if isinstance(op, Match):
            parts.append(escape(op.char))
        elif isinstance(op, (Substituted, Extra)):
            parts.append(_span(escape(op.char), err_color))
        elif isinstance(op, Omitted):
            parts.append(_span(OMITTED_MARK, err_color))
    return "".join(parts).replace("\n", "<br>")
