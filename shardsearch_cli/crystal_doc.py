"""crystal_doc — search and read shard documentation on crystaldoc.info.

Usage:
    crystal_doc <command> [options] <query>

Commands:
    search <query>    Search for shards
    fetch <name/url>  Fetch documentation for a shard
    get <query>       Search and fetch the first result

Examples:
    crystal_doc search kemal
    crystal_doc fetch kemalcr/kemal
    crystal_doc get kemal --format text
"""

from __future__ import annotations

from typing import Optional

import typer

from shardsearch.errors import ShardSearchError
from shardsearch.query import crystal_doc as queries
from shardsearch_cli.common import (
    CONTEXT_SETTINGS,
    fail,
    require_query,
    setup_logging,
    version_callback,
)
from shardsearch_cli.rendering import (
    OutputFormat,
    render_catalog_entries,
    render_documentation,
)

app = typer.Typer(
    name="crystal_doc",
    help="Search and fetch Crystal shard documentation from crystaldoc.info.",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)

_FORMAT_OPTION = typer.Option(
    OutputFormat.json, "--format", "-f", help="Output format.", case_sensitive=False
)
_PRETTY_OPTION = typer.Option(False, "--pretty", "-p", help="Pretty print JSON output.")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Log HTTP traffic to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback("crystal_doc"),
        is_eager=True,
    ),
) -> None:
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)


@app.command("search")
def search(
    query: Optional[str] = typer.Argument(None, help="Search query."),
    fmt: OutputFormat = _FORMAT_OPTION,
    pretty: bool = _PRETTY_OPTION,
) -> None:
    """Search for shards."""
    query = require_query(query, "Query for command 'search'")
    try:
        entries = queries.search_shards(query)
    except ShardSearchError as exc:
        fail(str(exc))

    output = render_catalog_entries(entries, fmt, pretty)
    if output:
        typer.echo(output)


@app.command("fetch")
def fetch(
    target: Optional[str] = typer.Argument(None, help="Doc URL, owner/name slug or shard name."),
    fmt: OutputFormat = _FORMAT_OPTION,
    pretty: bool = _PRETTY_OPTION,
) -> None:
    """Fetch documentation for a shard."""
    target = require_query(target, "Query for command 'fetch'")
    try:
        doc = queries.fetch_documentation(queries.resolve_shard_url(target))
    except ShardSearchError as exc:
        fail(str(exc))

    typer.echo(render_documentation(doc, fmt, pretty))


@app.command("get")
def get(
    query: Optional[str] = typer.Argument(None, help="Search query."),
    fmt: OutputFormat = _FORMAT_OPTION,
    pretty: bool = _PRETTY_OPTION,
) -> None:
    """Search and fetch the first result."""
    query = require_query(query, "Query for command 'get'")
    try:
        doc = queries.get_documentation(query)
    except ShardSearchError as exc:
        fail(str(exc))

    typer.echo(render_documentation(doc, fmt, pretty))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
