"""CLI subcommands."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing

import typer

from syslog5424.reader import is_pipe


def check_input(file: Path | None) -> None:
    """Exit with an error unless a readable file or piped stdin is available."""
    if file is not None:
        if not file.is_file():
            typer.echo(f"Error: {file} is not a file", err=True)
            raise typer.Exit(1)
    elif not is_pipe():
        typer.echo("Error: provide a file or pipe input", err=True)
        raise typer.Exit(1)
