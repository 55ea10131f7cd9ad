"""Validate command - count well-formed messages in a file."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import Annotated

import typer

from syslog5424.commands import check_input
from syslog5424.parser import try_parse_message
from syslog5424.reader import read_lines


def validate(
    file: Annotated[Path | None, typer.Argument(help="File with one message per line (default: stdin)")] = None,
) -> None:
    """Count valid and invalid RFC 5424 messages. Exits 1 if any line is invalid."""
    check_input(file)
    ok = 0
    failed = 0
    for _, raw in read_lines(file):
        if try_parse_message(raw) is None:
            failed += 1
        else:
            ok += 1
    typer.echo(f"count ok: {ok}")
    typer.echo(f"count failed: {failed}")
    if failed:
        raise typer.Exit(1)
