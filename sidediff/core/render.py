# sidediff/core/render.py
from __future__ import annotations

from typing import List

from sidediff.config import CLI_DEFAULT_WIDTH, CLI_MIN_WIDTH, EMPTY_MODEL_MESSAGE
from sidediff.core.diff_types import RenderModel, Row, RowStyle

ORIGINAL = "original"
MODIFIED = "modified"

_MARKERS = {
    RowStyle.UNCHANGED: " ",
    RowStyle.ADDED: "+",
    RowStyle.REMOVED: "-",
    RowStyle.MODIFIED: "~",
    RowStyle.PLACEHOLDER: " ",
}


def _html_escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
         .replace("<", "&lt;")
         .replace(">", "&gt;")
         .replace("\t", "    ")
         .replace(" ", "&nbsp;")
    )


def line_label(row: Row) -> str:
    """Gutter text for a row; placeholders have no line number."""
    return "" if row.is_placeholder else str(row.line_number)


def row_to_html(row: Row, side: str) -> str:
    """Escaped HTML for one row; changed spans get class 'del' or 'ins' by side."""
    if row.spans is None:
        return _html_escape(row.content)
    cls = "del" if side == ORIGINAL else "ins"
    parts: List[str] = []
    for span in row.spans:
        if span.changed:
            parts.append(f'<span class="{cls}">{_html_escape(span.text)}</span>')
        else:
            parts.append(_html_escape(span.text))
    return "".join(parts)


def row_to_text(row: Row, side: str) -> str:
    """Plain text for one row; changed spans shown as [-x-] or {+x+}."""
    if row.spans is None:
        return row.content
    opening, closing = ("[-", "-]") if side == ORIGINAL else ("{+", "+}")
    return "".join(
        f"{opening}{s.text}{closing}" if s.changed else s.text for s in row.spans
    )


def _fit(s: str, width: int) -> str:
    s = s.replace("\t", "    ")
    if len(s) > width:
        return s[: max(0, width - 1)] + ">"
    return s.ljust(width)


def format_side_by_side(model: RenderModel, width: int = CLI_DEFAULT_WIDTH) -> str:
    """Two text columns with line-number gutters and a change marker per row."""
    if model.is_empty:
        return EMPTY_MODEL_MESSAGE
    width = max(CLI_MIN_WIDTH, width)
    num_w = max(3, len(str(len(model))))
    # "nnn m text | nnn m text"
    col = (width - 2 * (num_w + 3) - 3) // 2
    out: List[str] = []
    for left, right in model.pairs():
        lno = line_label(left)
        rno = line_label(right)
        line = (
            f"{lno:>{num_w}} {_MARKERS[left.style]} {_fit(row_to_text(left, ORIGINAL), col)}"
            f" | {rno:>{num_w}} {_MARKERS[right.style]} {_fit(row_to_text(right, MODIFIED), col)}"
        )
        out.append(line.rstrip())
    return "\n".join(out)
