from __future__ import annotations

import os
import sys
import json
import argparse
from typing import List

from sidediff import config
from sidediff.core.diff_engine import compare, has_differences, summarize, unified_patch
from sidediff.core.render import format_side_by_side
from sidediff.core.text_loader import STDIN_PATH, TextLoadError, load_text
from sidediff.utils.logger import logger

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_TROUBLE = 2


def _terminal_width() -> int:
    try:
        return os.get_terminal_size().columns
    except (OSError, ValueError):
        return config.CLI_DEFAULT_WIDTH


def _display_name(path: str) -> str:
    return "stdin" if path == STDIN_PATH else os.path.basename(path)


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare two text/code files side by side")
    p.add_argument("original", help="Original file ('-' for stdin)")
    p.add_argument("modified", help="Modified file ('-' for stdin)")
    p.add_argument("--ignore-ws", action="store_true", help="Match lines ignoring whitespace differences")
    p.add_argument("--ignore-case", action="store_true", help="Match lines ignoring case")
    p.add_argument("--keep-eol", action="store_true", help="Do not normalize CRLF/CR line endings")
    p.add_argument("--no-inline", action="store_true", help="Do not highlight changed characters in modified lines")
    p.add_argument("--unified", "-u", action="store_true", help="Print a unified (git-style) diff instead")
    p.add_argument("--context", "-U", type=int, default=config.UNIFIED_CONTEXT, help="Context lines for --unified")
    p.add_argument("--json", action="store_true", help="Print the aligned rows as JSON")
    p.add_argument("--width", "-w", type=int, default=None, help="Output width for the side-by-side view")

    args = p.parse_args(argv)
    if args.original == STDIN_PATH and args.modified == STDIN_PATH:
        print("Only one input can be read from stdin.", file=sys.stderr)
        return EXIT_TROUBLE

    try:
        original = load_text(args.original)
        modified = load_text(args.modified)
    except TextLoadError as e:
        logger.error(f"CLI input error: {e}")
        print(f"Cannot read {e.path}: {e.reason}", file=sys.stderr)
        return EXIT_TROUBLE

    model = compare(
        original, modified,
        ignore_ws=args.ignore_ws,
        ignore_case=args.ignore_case,
        normalize_eol=not args.keep_eol,
        inline=not args.no_inline,
    )
    rc = EXIT_DIFFERENT if has_differences(model) else EXIT_SAME

    if args.unified:
        sys.stdout.write(unified_patch(
            original, modified,
            _display_name(args.original), _display_name(args.modified),
            context=max(0, args.context),
        ))
    elif args.json:
        data = model.to_dict()
        data["summary"] = summarize(model)
        print(json.dumps(data, indent=2))
    else:
        print(format_side_by_side(model, args.width or _terminal_width()))
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
