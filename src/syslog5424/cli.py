"""CLI entry point for syslog5424."""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer

from syslog5424.commands.parse import parse
from syslog5424.commands.validate import validate

app = typer.Typer(add_completion=False)
app.command()(parse)
app.command()(validate)


@app.callback()
def _root(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,  # noqa: FBT002
) -> None:
    """Parse and validate RFC 5424 syslog messages."""
    if verbose:
        logging.basicConfig(stream=sys.stderr, level=logging.DEBUG)


def main() -> None:
    """Entry point for the CLI."""
    app()
