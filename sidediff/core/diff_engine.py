# sidediff/core/diff_engine.py
from __future__ import annotations

from typing import Dict
import difflib

from sidediff.config import UNIFIED_CONTEXT
from sidediff.core.char_highlighter import whole_line_differ
from sidediff.core.differs import char_diff, line_diff, tokenize_lines
from sidediff.core.diff_types import RenderModel, RowStyle
from sidediff.core.row_aligner import align
from sidediff.utils.logger import logger

NO_NEWLINE_MARKER = "\n\\ No newline at end of file\n"


def compare(
    original: str,
    modified: str,
    *,
    ignore_ws: bool = False,
    ignore_case: bool = False,
    normalize_eol: bool = True,
    inline: bool = True
) -> RenderModel:
    """Produce side-by-side rows for two texts."""
    ops = line_diff(
        original or "",
        modified or "",
        ignore_ws=ignore_ws,
        ignore_case=ignore_case,
        normalize_eol=normalize_eol,
    )
    model = align(ops, char_diff if inline else whole_line_differ)
    logger.info("Compared texts: %d ops -> %d rows", len(ops), len(model))
    return model


def has_differences(model: RenderModel) -> bool:
    return any(r.style is not RowStyle.UNCHANGED for r in model.original_rows + model.modified_rows)


def summarize(model: RenderModel) -> Dict[str, int]:
    """Row counts per kind of change, as seen across both panes."""
    counts = {"unchanged": 0, "added": 0, "removed": 0, "modified": 0}
    for left, right in model.pairs():
        if left.style is RowStyle.REMOVED:
            counts["removed"] += 1
        if right.style is RowStyle.ADDED:
            counts["added"] += 1
        if left.style is RowStyle.MODIFIED:
            counts["modified"] += 1
        if left.style is RowStyle.UNCHANGED:
            counts["unchanged"] += 1
    return counts


def unified_patch(
    left_text: str,
    right_text: str,
    left_name: str = "left",
    right_name: str = "right",
    context: int = UNIFIED_CONTEXT,
) -> str:
    """Return unified diff text; an unterminated last line gets diff(1)'s marker."""
    l = tokenize_lines(left_text or "")
    r = tokenize_lines(right_text or "")
    out = []
    for line in difflib.unified_diff(l, r, fromfile=left_name, tofile=right_name, n=context):
        out.append(line)
        if not line.endswith("\n"):
            out.append(NO_NEWLINE_MARKER)
    return "".join(out)
