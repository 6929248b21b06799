# sidediff/core/block_pairs.py
from __future__ import annotations

from typing import Sequence

from sidediff.core.diff_types import DiffOp, OpKind


def is_modified_pair(ops: Sequence[DiffOp], i: int) -> bool:
    """
    True when ops[i] is a removal immediately followed by an addition of the
    same, non-zero line count. Such a pair renders as line-by-line
    replacements instead of a block removal followed by a block addition.
    """
    if i < 0 or i + 1 >= len(ops):
        return False
    cur, nxt = ops[i], ops[i + 1]
    return (
        cur.kind is OpKind.REMOVED
        and nxt.kind is OpKind.ADDED
        and cur.line_count == nxt.line_count
        and cur.line_count > 0
    )
