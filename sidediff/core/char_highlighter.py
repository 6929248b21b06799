# sidediff/core/char_highlighter.py
from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from sidediff.core.diff_types import CharChange, CharSpan
from sidediff.core.differs import char_diff

CharDiffer = Callable[[str, str], Sequence[CharChange]]


def _is_added(c: CharChange) -> bool:
    return c.added and not c.removed


def _is_removed(c: CharChange) -> bool:
    return c.removed and not c.added


def highlight(
    original_line: str,
    modified_line: str,
    char_differ: CharDiffer = char_diff,
) -> Tuple[List[CharSpan], List[CharSpan]]:
    """Return (original spans, modified spans) for a modified line pair."""
    changes = char_differ(original_line, modified_line)
    left: List[CharSpan] = []
    right: List[CharSpan] = []
    for c in changes:
        # a change flagged both ways is malformed; it counts as unchanged
        if not _is_added(c):
            left.append(CharSpan(c.text, _is_removed(c)))
        if not _is_removed(c):
            right.append(CharSpan(c.text, _is_added(c)))
    return left, right


def whole_line_differ(a: str, b: str) -> List[CharChange]:
    """Character differ that flags each side as one changed span (no inline detail)."""
    out: List[CharChange] = []
    if a:
        out.append(CharChange(a, removed=True))
    if b:
        out.append(CharChange(b, added=True))
    return out
