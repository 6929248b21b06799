# sidediff/core/text_loader.py
from __future__ import annotations

import os
import sys

from sidediff.config import COMPARE_MAX_BYTES
from sidediff.utils.encoding_detector import detect_encoding, detect_file_encoding
from sidediff.utils.logger import logger

STDIN_PATH = "-"


class TextLoadError(Exception):
    """Raised when an input text cannot be read for comparison."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def load_text(path: str, max_bytes: int = COMPARE_MAX_BYTES) -> str:
    """Read a file (or stdin for '-') as text, guessing its encoding."""
    if path == STDIN_PATH:
        raw = sys.stdin.buffer.read()
        if len(raw) > max_bytes:
            raise TextLoadError(path, f"input larger than {max_bytes} bytes")
        return raw.decode(detect_encoding(raw), errors="replace")

    if not os.path.isfile(path):
        raise TextLoadError(path, "no such file")
    size = os.path.getsize(path)
    if size > max_bytes:
        raise TextLoadError(path, f"file is {size} bytes, limit is {max_bytes}")

    enc = detect_file_encoding(path)
    try:
        # newline="" keeps line endings as-is; normalization is a compare option
        with open(path, "r", encoding=enc, errors="replace", newline="") as f:
            text = f.read()
    except (OSError, LookupError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise TextLoadError(path, str(e)) from e
    logger.info("Loaded %s (%d chars, %s)", path, len(text), enc)
    return text
