from __future__ import annotations

import argparse
import logging
import sys

from .api import TailConfig, tail_files
from .errors import InvalidOffsetFormat
from .output import LossyTextSink


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tailpy", description="Print the last part of files")
    ap.add_argument("files", nargs="+", metavar="FILE", help="Input file(s)")
    count = ap.add_mutually_exclusive_group()
    count.add_argument(
        "-n",
        "--lines",
        default="10",
        metavar="LINES",
        help="Number of lines; +N starts at line N (default: 10)",
    )
    count.add_argument(
        "-c",
        "--bytes",
        default=None,
        metavar="BYTES",
        help="Number of bytes; +N starts at byte N",
    )
    ap.add_argument("-q", "--quiet", action="store_true", help="Suppress headers")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = TailConfig.from_counts(args.files, lines=args.lines, bytes_=args.bytes, quiet=args.quiet)
    except InvalidOffsetFormat as e:
        print(e, file=sys.stderr)
        return 1

    out = LossyTextSink(sys.stdout.buffer)
    try:
        tail_files(config, out=out, err=sys.stderr)
    finally:
        out.flush()
    # Per-file failures are already reported; they do not change the status.
    return 0
