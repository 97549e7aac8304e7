"""Data models for the scraper pipeline.

Every record is frozen: it is built once during extraction and only read
afterwards.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class RawPage:
    """The terminal HTTP response of a retrieval chain."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class SearchRecord:
    """One package card from a shards.info search page."""

    name: str
    description: str | None = None
    stars: int = 0
    forks: int = 0
    open_issues: int = 0
    used_by: int = 0
    dependencies: int = 0
    last_activity: str | None = None
    topics: tuple[str, ...] = ()
    url: str = ""
    avatar_url: str | None = None
    archived: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CatalogEntry:
    """One shard listed by a crystaldoc.info search."""

    name: str
    stars: int
    source_url: str
    doc_url: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TypeEntry:
    """A type linked from the sidebar of a documentation page."""

    id: str
    name: str
    url: str
    is_parent: bool = False


@dataclass(frozen=True)
class DocumentationPage:
    """A parsed crystaldoc.info documentation page."""

    shard_name: str = "unknown"
    version: str = "unknown"
    description: str | None = None
    types: tuple[TypeEntry, ...] = ()
    content: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-ready dict (nested TypeEntry rows included)."""
        return asdict(self)
