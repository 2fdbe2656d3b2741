"""Command line entry point for debounce-kit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="debounce-kit",
        description="Echo lines from stdin, debounced.",
    )
    parser.add_argument(
        "-w", "--wait",
        type=float,
        default=100.0,
        help="Milliseconds of quiet before a line is echoed (default: 100)",
    )
    parser.add_argument(
        "-m", "--max-wait",
        type=float,
        default=None,
        help="Echo at least this often (ms) while lines keep arriving",
    )
    parser.add_argument(
        "--leading",
        action="store_true",
        help="Echo the first line of a burst immediately",
    )
    parser.add_argument(
        "--no-trailing",
        action="store_true",
        help="Do not echo the last line of a burst once it settles",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log edge decisions to stderr",
    )
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Read lines until EOF, echoing the debounced ones. Flushes at EOF."""
    from .controller import debounce

    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    def echo(line: str) -> str:
        print(line, file=stdout, flush=True)
        return line

    emit = debounce(
        echo,
        args.wait,
        leading=args.leading,
        trailing=not args.no_trailing,
        max_wait=args.max_wait,
    )

    try:
        for line in stdin:
            emit(line.rstrip("\n"))
    except KeyboardInterrupt:
        emit.cancel()
        return 130

    emit.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
