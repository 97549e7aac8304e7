"""find_shard — search shards.info from the command line.

Usage:
    find_shard <query> [--format json|text|markdown] [--pretty]

Examples:
    find_shard crystal
    find_shard "web framework" --format text
"""

from __future__ import annotations

from typing import Optional

import typer

from shardsearch.errors import ShardSearchError
from shardsearch.query import find_shard as queries
from shardsearch_cli.common import (
    CONTEXT_SETTINGS,
    fail,
    require_query,
    setup_logging,
    version_callback,
)
from shardsearch_cli.rendering import OutputFormat, render_search_records

app = typer.Typer(
    name="find_shard",
    help="Search for Crystal shards on shards.info.",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)


@app.command()
def find_shard(
    query: Optional[str] = typer.Argument(None, help="Search query."),
    fmt: OutputFormat = typer.Option(
        OutputFormat.json, "--format", "-f", help="Output format.", case_sensitive=False
    ),
    pretty: bool = typer.Option(False, "--pretty", "-p", help="Pretty print JSON output."),
    verbose: bool = typer.Option(False, "--verbose", help="Log HTTP traffic to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback("find_shard"),
        is_eager=True,
    ),
) -> None:
    """Search shards.info and print the matching shards."""
    setup_logging(verbose)
    query = require_query(query)

    try:
        records = queries.search_shards(query)
    except ShardSearchError as exc:
        fail(str(exc))

    output = render_search_records(records, fmt, pretty)
    if output:
        typer.echo(output)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
