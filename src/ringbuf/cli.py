"""CLI entry point for ringbuf.

Reads lines from files or stdin into a fixed-capacity ring buffer, so only
the newest N lines survive, then writes them out oldest first (or newest
first with --reverse).
"""

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from ringbuf.env import LOGGER, setup_logging
from ringbuf.errors import RingBufferError
from ringbuf.ring_buffer import RingBuffer


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ringbuf",
        description="Keep the last N lines of the input in a ring buffer",
    )
    parser.add_argument(
        "-n",
        "--lines",
        type=int,
        default=None,
        help="Number of lines to keep (default: from config, else 10)",
    )
    parser.add_argument(
        "--reverse",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit newest line first (default: from config, else off)",
    )
    parser.add_argument(
        "--drain",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Empty the buffer by polling instead of iterating",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (default: ~/.config/ringbuf/config.json)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Input files (default: stdin)",
    )
    return parser


def fill(buffer: RingBuffer[str], lines: Iterable[str]) -> int:
    """Push every line into *buffer*; return how many were read."""
    count = 0
    for line in lines:
        buffer.push(line.rstrip("\n"))
        count += 1
    return count


def emit(buffer: RingBuffer[str], out: TextIO, *, reverse: bool, drain: bool) -> None:
    """Write the buffered lines to *out*."""
    if drain:
        lines = []
        while True:
            line, ok = buffer.poll()
            if not ok:
                break
            lines.append(line)
        if reverse:
            lines.reverse()
    else:
        lines = list(buffer.iter_reversed() if reverse else buffer.iter())
    for line in lines:
        out.write(f"{line}\n")


def _run(args: argparse.Namespace) -> int:
    from ringbuf.config import load_config

    tail = load_config(args.config).tail
    capacity = args.lines if args.lines is not None else tail.capacity
    reverse = args.reverse if args.reverse is not None else tail.reverse
    drain = args.drain if args.drain is not None else tail.drain

    buffer: RingBuffer[str] = RingBuffer(capacity)
    total = 0
    if args.files:
        for name in args.files:
            with open(name) as f:
                total += fill(buffer, f)
    else:
        total = fill(buffer, sys.stdin)

    LOGGER.debug(
        "Read %d lines, kept %d, evicted %d",
        total,
        len(buffer),
        total - len(buffer),
    )
    emit(buffer, sys.stdout, reverse=reverse, drain=drain)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code."""
    setup_logging()

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        return _run(args)
    except (RingBufferError, ValueError, OSError) as exc:
        LOGGER.error("%s", exc)
        return 2
