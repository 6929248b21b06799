# sidediff/core/line_splitter.py
from __future__ import annotations

from typing import List

LINE_BREAK = "\n"


def split_lines(text: str) -> List[str]:
    """
    Split one diff payload into display lines.

    An empty payload is still one (empty) line, and a trailing line break
    does not open a new line: "a\\n" is ["a"] and "\\n" is [""].
    """
    if text == "":
        return [""]
    lines = text.split(LINE_BREAK)
    if text.endswith(LINE_BREAK):
        # "\n" splits to ["", ""]; dropping the tail leaves the one blank line
        lines.pop()
    return lines
