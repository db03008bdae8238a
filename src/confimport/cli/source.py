"""Input helpers shared by CLI commands."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from confimport.core.exceptions import ParseError

logger = logging.getLogger(__name__)
console = Console()


def read_source(source: str) -> str:
    """Read text from a file path, or from stdin when source is '-'."""
    if source == "-":
        return typer.get_text_stream("stdin").read()

    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Cannot read {escape(source)}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def report_parse_error(source: str, error: ParseError) -> typer.Exit:
    """Log and print a parse failure; returns the Exit for the caller to raise."""
    logger.warning(f"Failed to parse {source} ({error.kind}): {error}")
    console.print(f"[red]{escape(str(error))}[/red]")
    return typer.Exit(1)
