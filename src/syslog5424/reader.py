"""Line-oriented input for the CLI: one message per line, file or stdin."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, BinaryIO

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def _iter_stream(stream: BinaryIO) -> Iterator[tuple[int, bytes]]:
    for i, raw_line in enumerate(stream, start=1):
        line = raw_line.rstrip(b"\r\n")
        if line:
            yield i, line


def read_lines(path: Path | None = None) -> Iterator[tuple[int, bytes]]:
    """Yield (line_number, raw bytes) for each non-empty line.

    Reads stdin when `path` is None. Lines are kept as bytes because message
    bodies need not be valid UTF-8.
    """
    if path is None:
        yield from _iter_stream(sys.stdin.buffer)
        return
    with path.open("rb") as f:
        yield from _iter_stream(f)
