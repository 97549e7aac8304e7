"""Tests for the ``crystal_doc`` command group."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from shardsearch import __version__
from shardsearch.errors import ShardNotFoundError, TooManyRedirectsError
from shardsearch.scraper.models import CatalogEntry, DocumentationPage, TypeEntry
from shardsearch_cli.crystal_doc import app

runner = CliRunner()

_ENTRIES = [
    CatalogEntry(
        name="kemalcr/kemal",
        stars=42,
        source_url="https://github.com/kemalcr/kemal",
        doc_url="https://www.crystaldoc.info/github/kemalcr/kemal",
    )
]
_DOC = DocumentationPage(
    shard_name="kemal",
    version="1.5.0",
    description="Web framework",
    types=(TypeEntry(id="k", name="Kemal", url="https://www.crystaldoc.info/k.html", is_parent=True),),
    content="Lightning fast",
)


def test_search_json(monkeypatch):
    monkeypatch.setattr("shardsearch.query.crystal_doc.search_shards", lambda q: _ENTRIES)

    result = runner.invoke(app, ["search", "kemal"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data[0]["name"] == "kemalcr/kemal"
    assert data[0]["stars"] == 42


def test_search_text(monkeypatch):
    monkeypatch.setattr("shardsearch.query.crystal_doc.search_shards", lambda q: _ENTRIES)

    result = runner.invoke(app, ["search", "kemal", "-f", "text"])

    assert result.exit_code == 0
    assert "1. kemalcr/kemal (42 ⭐)" in result.stdout
    assert "Docs: https://www.crystaldoc.info/github/kemalcr/kemal" in result.stdout


def test_fetch_resolves_then_fetches(monkeypatch):
    resolved = []
    monkeypatch.setattr(
        "shardsearch.query.crystal_doc.resolve_shard_url",
        lambda target: resolved.append(target) or "https://docs.example/kemal",
    )
    fetched = []
    monkeypatch.setattr(
        "shardsearch.query.crystal_doc.fetch_documentation",
        lambda url: fetched.append(url) or _DOC,
    )

    result = runner.invoke(app, ["fetch", "kemalcr/kemal", "--format", "markdown"])

    assert result.exit_code == 0
    assert resolved == ["kemalcr/kemal"]
    assert fetched == ["https://docs.example/kemal"]
    assert result.stdout.startswith("# kemal v1.5.0")
    assert "- [Kemal](https://www.crystaldoc.info/k.html)" in result.stdout


def test_fetch_unknown_shard_exits_1(monkeypatch):
    def not_found(target):
        raise ShardNotFoundError(target)

    monkeypatch.setattr("shardsearch.query.crystal_doc.resolve_shard_url", not_found)

    result = runner.invoke(app, ["fetch", "ghost"])

    assert result.exit_code == 1
    assert "Error: No shard found with name 'ghost'" in result.output


def test_get_pretty_json(monkeypatch):
    monkeypatch.setattr("shardsearch.query.crystal_doc.get_documentation", lambda q: _DOC)

    result = runner.invoke(app, ["get", "kemal", "--pretty"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["version"] == "1.5.0"
    assert data["types"][0]["is_parent"] is True
    assert result.stdout.startswith("{\n  ")


def test_get_transport_failure_exits_1(monkeypatch):
    def boom(query):
        raise TooManyRedirectsError("https://www.crystaldoc.info/search")

    monkeypatch.setattr("shardsearch.query.crystal_doc.get_documentation", boom)

    result = runner.invoke(app, ["get", "kemal"])

    assert result.exit_code == 1
    assert "Error: Too many redirects" in result.output


def test_missing_query_exits_1():
    result = runner.invoke(app, ["search"])

    assert result.exit_code == 1
    assert "Query for command 'search' required" in result.output


def test_no_command_shows_help_and_exits_1():
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "search" in result.output
    assert "fetch" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == f"crystal_doc {__version__}"


def test_option_like_query_after_separator_exits_1():
    result = runner.invoke(app, ["get", "--", "-x"])

    assert result.exit_code == 1
    assert "Query for command 'get' required" in result.output
