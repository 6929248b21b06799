# sidediff/core/differs.py
"""Default line and character differs, both on top of difflib."""
from __future__ import annotations

from typing import List, Tuple
import difflib
import re

from sidediff.core.diff_types import CharChange, DiffOp, OpKind

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def _normalize_eol(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def tokenize_lines(text: str) -> List[str]:
    """Lines keeping their '\\n' terminator; only the last one may lack it."""
    return _LINE_RE.findall(text)


def _line_key(line: str, ignore_ws: bool, ignore_case: bool) -> Tuple[str, bool]:
    """Comparison key: normalized content plus whether the line is terminated.

    Only the last line of a text can be unterminated, so "b" and "b\\n" as
    final lines never match, the same as diff(1).
    """
    terminated = line.endswith("\n")
    x = line[:-1] if terminated else line
    if ignore_ws:
        x = re.sub(r"\s+", " ", x).strip()
    if ignore_case:
        x = x.lower()
    return x, terminated


def _common_op(l_chunk: List[str], r_chunk: List[str]) -> DiffOp:
    text = "".join(l_chunk)
    # keys match but the raw lines may not (ignored whitespace or case)
    if l_chunk == r_chunk:
        return DiffOp(text, OpKind.COMMON, len(l_chunk))
    return DiffOp(text, OpKind.COMMON, len(l_chunk), counterpart="".join(r_chunk))


def line_diff(
    original: str,
    modified: str,
    *,
    ignore_ws: bool = False,
    ignore_case: bool = False,
    normalize_eol: bool = True,
) -> List[DiffOp]:
    """Line-level diff of two texts as a list of COMMON/ADDED/REMOVED runs."""
    if normalize_eol:
        original = _normalize_eol(original)
        modified = _normalize_eol(modified)

    l_lines = tokenize_lines(original)
    r_lines = tokenize_lines(modified)
    nl_l = [_line_key(s, ignore_ws, ignore_case) for s in l_lines]
    nl_r = [_line_key(s, ignore_ws, ignore_case) for s in r_lines]

    sm = difflib.SequenceMatcher(a=nl_l, b=nl_r, autojunk=False)

    ops: List[DiffOp] = []
    for tag, i1, i2, j1, j2 in sm.get_opcodes():
        l_chunk = l_lines[i1:i2]
        r_chunk = r_lines[j1:j2]
        if tag == "equal":
            ops.append(_common_op(l_chunk, r_chunk))
        elif tag == "delete":
            ops.append(DiffOp("".join(l_chunk), OpKind.REMOVED, len(l_chunk)))
        elif tag == "insert":
            ops.append(DiffOp("".join(r_chunk), OpKind.ADDED, len(r_chunk)))
        else:  # replace
            ops.append(DiffOp("".join(l_chunk), OpKind.REMOVED, len(l_chunk)))
            ops.append(DiffOp("".join(r_chunk), OpKind.ADDED, len(r_chunk)))
    return ops


def char_diff(a: str, b: str) -> List[CharChange]:
    """Character-level diff of two single lines."""
    sm = difflib.SequenceMatcher(a=a, b=b, autojunk=False)
    out: List[CharChange] = []
    for op, i1, i2, j1, j2 in sm.get_opcodes():
        if op == "equal":
            out.append(CharChange(a[i1:i2]))
        elif op == "delete":
            out.append(CharChange(a[i1:i2], removed=True))
        elif op == "insert":
            out.append(CharChange(b[j1:j2], added=True))
        else:  # replace
            out.append(CharChange(a[i1:i2], removed=True))
            out.append(CharChange(b[j1:j2], added=True))
    return out
