#!/usr/bin/env python3
"""
fortune – print a fortune cookie
─────────────────────────────────
* no arguments           → random cookie from a random category
* <category>             → random cookie from that category
* <category> <number>    → that exact cookie (1‑based)
* --list                 → categories and their cookie counts
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from . import registry
from .errors import FortuneError
from .render import ALIASES, RENDERERS, render

# ───────────────────────── configuration ──────────────────────
FORTUNE_FORMAT = os.getenv("FORTUNE_FORMAT",    "text")
LOG_LEVEL      = os.getenv("FORTUNE_LOG_LEVEL", "WARNING")

FORMATS = sorted(set(ALIASES) | set(RENDERERS))

log = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL) -> None:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="fortune", description="Print a fortune cookie.")
    p.add_argument("category", nargs="?", help="category to pick from")
    p.add_argument("number", nargs="?", type=int, help="1‑based cookie number")
    p.add_argument("-d", "--directory", default=registry.FORTUNE_DIR,
                   help="directory holding <category> and <category>.dat files")
    p.add_argument("-f", "--format", default=FORTUNE_FORMAT, type=str.lower,
                   choices=FORMATS, help="output format")
    p.add_argument("-l", "--list", action="store_true", help="list categories and exit")
    p.add_argument("--log-level", default=LOG_LEVEL)
    args = p.parse_args(argv)
    # argparse does not check defaults (FORTUNE_FORMAT) against choices
    if args.format not in FORMATS:
        p.error(f"invalid format {args.format!r} (choose from {', '.join(FORMATS)})")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        registry.reload(args.directory)
        if args.list:
            for cat in sorted(registry.categories(), key=lambda c: c.category):
                print(f"{cat.category}\t{cat.total_records}")
            return 0
        cookie = registry.fortune(args.category, args.number)
    except FortuneError as e:
        log.debug("fortune failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(render(cookie, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
