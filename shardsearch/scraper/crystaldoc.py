"""Parse crystaldoc.info search results and documentation pages."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from shardsearch.config import settings
from shardsearch.scraper import normalize
from shardsearch.scraper.models import CatalogEntry, DocumentationPage, TypeEntry

CATALOG_PREFIX = "/github/"
STAR_GLYPHS = ("⭐", "⍟")


# ---------------------------------------------------------------------------
# Search results
# ---------------------------------------------------------------------------

def _star_count(item: Tag) -> int:
    for pill in item.select("span.pill"):
        text = pill.get_text()
        if any(glyph in text for glyph in STAR_GLYPHS):
            return normalize.parse_count(text)
    return 0


def parse_search_results(html: str) -> List[CatalogEntry]:
    """Return a :class:`CatalogEntry` for every list item linking into the catalog.

    Items whose first link does not point below ``/github/`` are not shards
    and are dropped, so the result is usually shorter than the list.
    """
    soup = BeautifulSoup(html, "html.parser")
    entries: List[CatalogEntry] = []

    for item in soup.select("li"):
        link = item.select_one("a")
        if link is None:
            continue
        href = link.get("href")
        if not href or not href.startswith(CATALOG_PREFIX):
            continue

        name = link.get_text().strip()
        entries.append(
            CatalogEntry(
                name=name,
                stars=_star_count(item),
                source_url=f"{settings.github_url}/{name}",
                doc_url=f"{settings.crystaldoc_url}{href}",
            )
        )

    return entries


# ---------------------------------------------------------------------------
# Documentation pages
# ---------------------------------------------------------------------------

def _parse_type(item: Tag) -> TypeEntry | None:
    link = item.select_one("a")
    if link is None:
        return None

    href = link.get("href") or ""
    return TypeEntry(
        id=item.get("data-id") or "",
        name=item.get("data-name") or link.get_text().strip(),
        url=f"{settings.crystaldoc_url}{href}" if href else "",
        is_parent="parent" in item.get("class", []),
    )


def parse_documentation(html: str) -> DocumentationPage:
    """Extract title, description, type index and body text of a doc page.

    Missing pieces fall back to their defaults: ``"unknown"`` name and
    version, no description, no types, empty content.
    """
    soup = BeautifulSoup(html, "html.parser")

    title = soup.select_one("title")
    shard_name, version = normalize.parse_title(title.get_text() if title else None)

    meta = soup.select_one("meta[name='description']")
    description = meta.get("content") if meta is not None else None

    types = tuple(
        entry
        for entry in (_parse_type(item) for item in soup.select("div.types-list li"))
        if entry is not None
    )

    main_content = soup.select_one("div.main-content")
    content = main_content.get_text().strip() if main_content is not None else ""

    return DocumentationPage(
        shard_name=shard_name,
        version=version,
        description=description,
        types=types,
        content=content,
    )
