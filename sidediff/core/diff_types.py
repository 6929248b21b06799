# sidediff/core/diff_types.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import List, Optional, Tuple

from sidediff.core.line_splitter import split_lines


class OpKind(str, Enum):
    COMMON = "common"
    ADDED = "added"
    REMOVED = "removed"


class RowStyle(str, Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class DiffOp:
    """One line-level diff operation: a contiguous run of lines of one kind."""
    text: str
    kind: OpKind
    line_count: int
    # Modified side's text for a COMMON run that only matched after normalization
    counterpart: Optional[str] = None

    @classmethod
    def from_change(cls, value: str, added: bool = False, removed: bool = False,
                    count: Optional[int] = None) -> "DiffOp":
        """Build an op from an added/removed flag pair; both or neither set means COMMON."""
        if added and not removed:
            kind = OpKind.ADDED
        elif removed and not added:
            kind = OpKind.REMOVED
        else:
            kind = OpKind.COMMON
        if count is None:
            count = len(split_lines(value))
        return cls(value, kind, count)


@dataclass(frozen=True)
class CharChange:
    """One character-differ element; both flags False means unchanged."""
    text: str
    added: bool = False
    removed: bool = False


@dataclass(frozen=True)
class CharSpan:
    text: str
    changed: bool


@dataclass(frozen=True)
class Row:
    line_number: Optional[int]
    content: str
    spans: Optional[Tuple[CharSpan, ...]]
    style: RowStyle

    @classmethod
    def placeholder(cls) -> "Row":
        return cls(None, "", None, RowStyle.PLACEHOLDER)

    @property
    def is_placeholder(self) -> bool:
        return self.style is RowStyle.PLACEHOLDER


@dataclass(frozen=True)
class RenderModel:
    """Two index-aligned panes of rows, ready for display."""
    original_rows: Tuple[Row, ...] = ()
    modified_rows: Tuple[Row, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.original_rows and not self.modified_rows

    def __len__(self) -> int:
        return len(self.original_rows)

    def pairs(self) -> List[Tuple[Row, Row]]:
        return list(zip(self.original_rows, self.modified_rows))

    def to_dict(self) -> dict:
        def _row(r: Row) -> dict:
            d = asdict(r)
            d["style"] = r.style.value
            return d
        return {
            "empty": self.is_empty,
            "original_rows": [_row(r) for r in self.original_rows],
            "modified_rows": [_row(r) for r in self.modified_rows],
        }
