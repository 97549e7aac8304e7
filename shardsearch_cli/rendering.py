"""Utilities for rendering records in the CLI.

Every function here is a pure view over already-built records: it returns
the full output as a string and never touches the network.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, List, Sequence

from shardsearch.scraper.models import CatalogEntry, DocumentationPage, SearchRecord


class OutputFormat(str, Enum):
    json = "json"
    text = "text"
    markdown = "markdown"


def render_json(data: Any, pretty: bool = False) -> str:
    """Serialise *data* (a dict or list of dicts) as JSON.

    Compact by default, indented by two spaces when *pretty* is set.
    """
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


# ---------------------------------------------------------------------------
# shards.info search records
# ---------------------------------------------------------------------------

def _search_record_text(index: int, record: SearchRecord) -> List[str]:
    lines = [f"{index}. {record.name} ({record.stars} ⭐)"]
    if record.archived:
        lines[0] += " [archived]"
    if record.description:
        lines.append(f"   {record.description}")
    lines.append(
        f"   Forks: {record.forks}  Issues: {record.open_issues}  "
        f"Used by: {record.used_by}  Dependencies: {record.dependencies}"
    )
    if record.last_activity:
        lines.append(f"   Last activity: {record.last_activity}")
    if record.topics:
        lines.append(f"   Topics: {', '.join(record.topics)}")
    lines.append(f"   URL: {record.url}")
    return lines


def _search_record_markdown(index: int, record: SearchRecord) -> List[str]:
    title = f"[{record.name}]({record.url})" if record.url else record.name
    lines = [f"## {index}. {title}"]
    if record.archived:
        lines.append("_archived_")
    lines.append("")
    if record.description:
        lines.append(record.description)
        lines.append("")
    lines.append(
        f"- ⭐ {record.stars} · forks {record.forks} · open issues {record.open_issues}"
        f" · used by {record.used_by} · dependencies {record.dependencies}"
    )
    if record.last_activity:
        lines.append(f"- last activity: {record.last_activity}")
    if record.topics:
        lines.append("- topics: " + " ".join(f"`{topic}`" for topic in record.topics))
    return lines


def render_search_records(
    records: Sequence[SearchRecord],
    fmt: OutputFormat = OutputFormat.json,
    pretty: bool = False,
) -> str:
    if fmt is OutputFormat.json:
        return render_json([r.to_dict() for r in records], pretty)

    render_one = _search_record_text if fmt is OutputFormat.text else _search_record_markdown
    blocks = ["\n".join(render_one(i, r)) for i, r in enumerate(records, 1)]
    return "\n\n".join(blocks)


# ---------------------------------------------------------------------------
# crystaldoc.info search entries
# ---------------------------------------------------------------------------

def render_catalog_entries(
    entries: Sequence[CatalogEntry],
    fmt: OutputFormat = OutputFormat.json,
    pretty: bool = False,
) -> str:
    if fmt is OutputFormat.json:
        return render_json([e.to_dict() for e in entries], pretty)

    blocks = []
    for i, entry in enumerate(entries, 1):
        if fmt is OutputFormat.markdown:
            blocks.append(
                f"{i}. **{entry.name}** ({entry.stars} ⭐)\n"
                f"   - GitHub: <{entry.source_url}>\n"
                f"   - Docs: <{entry.doc_url}>"
            )
        else:
            blocks.append(
                f"{i}. {entry.name} ({entry.stars} ⭐)\n"
                f"   GitHub: {entry.source_url}\n"
                f"   Docs: {entry.doc_url}"
            )
    return "\n\n".join(blocks)


# ---------------------------------------------------------------------------
# crystaldoc.info documentation page
# ---------------------------------------------------------------------------

def render_documentation(
    doc: DocumentationPage,
    fmt: OutputFormat = OutputFormat.json,
    pretty: bool = False,
) -> str:
    if fmt is OutputFormat.json:
        return render_json(doc.to_dict(), pretty)

    lines: List[str] = []
    if fmt is OutputFormat.text:
        lines.append(f"Shard: {doc.shard_name}")
        lines.append(f"Version: {doc.version}")
        if doc.description:
            lines.append(f"Description: {doc.description}")
        lines.append("")
        lines.append(f"Types ({len(doc.types)}):")
        for entry in doc.types:
            indent = "  " if entry.is_parent else ""
            lines.append(f"{indent}- {entry.name}: {entry.url}")
        lines.append("")
        lines.append("Content:")
        lines.append(doc.content)
    else:
        lines.append(f"# {doc.shard_name} v{doc.version}")
        if doc.description:
            lines.extend(["", doc.description])
        lines.extend(["", "## Types", ""])
        for entry in doc.types:
            # top-level (parent) types flush left, nested types indented
            indent = "" if entry.is_parent else "  "
            lines.append(f"{indent}- [{entry.name}]({entry.url})")
        lines.extend(["", "## Documentation", "", doc.content])

    return "\n".join(lines)
