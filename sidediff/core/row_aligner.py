# sidediff/core/row_aligner.py
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from sidediff.core.block_pairs import is_modified_pair
from sidediff.core.char_highlighter import CharDiffer, highlight
from sidediff.core.differs import char_diff
from sidediff.core.diff_types import DiffOp, OpKind, RenderModel, Row, RowStyle
from sidediff.core.line_splitter import split_lines
from sidediff.utils.logger import logger

RowPair = Tuple[Row, Row]


class _Counters:
    """1-based line numbers of the two panes; one instance per alignment."""

    def __init__(self) -> None:
        self.original = 1
        self.modified = 1

    def next_original(self) -> int:
        n = self.original
        self.original += 1
        return n

    def next_modified(self) -> int:
        n = self.modified
        self.modified += 1
        return n


def _removed_rows(lines: List[str], num: _Counters) -> Iterator[RowPair]:
    for line in lines:
        yield (Row(num.next_original(), line, None, RowStyle.REMOVED), Row.placeholder())


def _added_rows(lines: List[str], num: _Counters) -> Iterator[RowPair]:
    for line in lines:
        yield (Row.placeholder(), Row(num.next_modified(), line, None, RowStyle.ADDED))


def _common_rows(op: DiffOp, num: _Counters) -> Iterator[RowPair]:
    lines = split_lines(op.text)
    other = lines
    if op.counterpart is not None:
        cp = split_lines(op.counterpart)
        if len(cp) == len(lines):
            other = cp
        else:
            logger.debug("Common run counterpart has %d lines, expected %d; showing original text",
                         len(cp), len(lines))
    for left, right in zip(lines, other):
        yield (Row(num.next_original(), left, None, RowStyle.UNCHANGED),
               Row(num.next_modified(), right, None, RowStyle.UNCHANGED))


def _modified_rows(removed: DiffOp, added: DiffOp, num: _Counters,
                   char_differ: CharDiffer) -> Iterator[RowPair]:
    l_lines = split_lines(removed.text)
    r_lines = split_lines(added.text)
    if len(l_lines) != len(r_lines):
        # line_count metadata disagrees with the payloads: no partial pairing
        logger.debug("Pair split into %d/%d lines (declared %d); rendering as remove + add",
                     len(l_lines), len(r_lines), removed.line_count)
        yield from _removed_rows(l_lines, num)
        yield from _added_rows(r_lines, num)
        return
    for ltxt, rtxt in zip(l_lines, r_lines):
        l_spans, r_spans = highlight(ltxt, rtxt, char_differ)
        yield (Row(num.next_original(), ltxt, tuple(l_spans), RowStyle.MODIFIED),
               Row(num.next_modified(), rtxt, tuple(r_spans), RowStyle.MODIFIED))


def iter_rows(ops: Sequence[DiffOp], char_differ: CharDiffer = char_diff) -> Iterator[RowPair]:
    """
    Walk line-level diff operations and yield aligned (original, modified) rows.

    Each yielded pair is one display row, so both panes always hold the same
    number of rows. A removal directly followed by an addition of the same
    line count is shown as modified lines with character-level spans; any
    other removal or addition is balanced by a placeholder on the other pane.
    """
    ops = list(ops)
    num = _Counters()
    i = 0
    while i < len(ops):
        op = ops[i]
        if is_modified_pair(ops, i):
            yield from _modified_rows(op, ops[i + 1], num, char_differ)
            i += 2
            continue
        if op.kind is OpKind.REMOVED:
            yield from _removed_rows(split_lines(op.text), num)
        elif op.kind is OpKind.ADDED:
            yield from _added_rows(split_lines(op.text), num)
        else:
            yield from _common_rows(op, num)
        i += 1


def align(ops: Sequence[DiffOp], char_differ: CharDiffer = char_diff) -> RenderModel:
    """Build the full RenderModel for a sequence of diff operations."""
    original_rows: List[Row] = []
    modified_rows: List[Row] = []
    for left, right in iter_rows(ops, char_differ):
        original_rows.append(left)
        modified_rows.append(right)
    return RenderModel(tuple(original_rows), tuple(modified_rows))
