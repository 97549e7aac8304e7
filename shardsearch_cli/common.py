"""Options and helpers shared by the ``find_shard`` and ``crystal_doc`` apps."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import typer

from shardsearch import __version__

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def version_callback(prog_name: str):
    """Build an eager ``--version`` callback that prints *prog_name*'s version."""

    def _callback(value: Optional[bool]) -> None:
        if value:
            typer.echo(f"{prog_name} {__version__}")
            raise typer.Exit()

    return _callback


def fail(message: str) -> NoReturn:
    """Print a one-line error to stderr and exit with status 1."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def require_query(query: Optional[str], what: str = "Query") -> str:
    if not query or query.startswith("-"):
        fail(f"{what} required")
    return query
