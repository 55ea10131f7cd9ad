"""Parse command - decode messages and print them as JSON or wire text."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import Annotated

import typer

from syslog5424.commands import check_input
from syslog5424.config import load_config
from syslog5424.errors import ParseError
from syslog5424.models import OutputFormat
from syslog5424.parser import parse_message
from syslog5424.reader import read_lines


def parse(
    file: Annotated[Path | None, typer.Argument(help="File with one message per line (default: stdin)")] = None,
    fmt: Annotated[
        OutputFormat | None, typer.Option("--format", "-f", help="Output format (default: from config)")
    ] = None,
) -> None:
    """Parse RFC 5424 messages, one per line."""
    check_input(file)
    config = load_config()
    output = fmt or config.output_format

    failed = 0
    for line_number, raw in read_lines(file):
        try:
            message = parse_message(raw)
        except ParseError as e:
            failed += 1
            if config.show_errors:
                typer.echo(f"line {line_number}: {e}", err=True)
            continue
        if output == OutputFormat.JSON:
            typer.echo(message.model_dump_json(indent=config.json_indent))
        else:
            typer.echo(message.to_wire())

    if failed:
        raise typer.Exit(1)
