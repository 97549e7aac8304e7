"""crystaldoc.info queries: search, identifier resolution and page fetch.

Pipeline for the ``get`` operation:

    POST /search → first result → GET doc page → DocumentationPage
"""

from __future__ import annotations

import logging
from typing import List
from urllib.parse import quote_plus

from shardsearch import __version__
from shardsearch.config import settings
from shardsearch.errors import ShardNotFoundError
from shardsearch.scraper import fetcher
from shardsearch.scraper.crystaldoc import (
    CATALOG_PREFIX,
    parse_documentation,
    parse_search_results,
)
from shardsearch.scraper.models import CatalogEntry, DocumentationPage

logger = logging.getLogger(__name__)

USER_AGENT = f"crystal_doc/{__version__} (Python)"


def search_shards(query: str) -> List[CatalogEntry]:
    """Submit the crystaldoc.info search form and parse the result list."""
    logger.info("Searching crystaldoc.info for %r", query)
    html = fetcher.post_form(
        f"{settings.crystaldoc_url}/search",
        f"q={quote_plus(query)}",
        user_agent=USER_AGENT,
    )
    entries = parse_search_results(html)
    logger.info("crystaldoc.info returned %d shard(s)", len(entries))
    return entries


def fetch_documentation(url: str) -> DocumentationPage:
    logger.info("Fetching documentation from %s", url)
    html = fetcher.get(url, user_agent=USER_AGENT)
    return parse_documentation(html)


def resolve_shard_url(identifier: str) -> str:
    """Turn a URL, an ``owner/name`` slug or a bare name into a doc URL.

    Bare names cost one search request; the first hit wins.

    Raises:
        ShardNotFoundError: If a bare name matches nothing.
    """
    if identifier.startswith(("http://", "https://")):
        return identifier
    if "/" in identifier:
        return f"{settings.crystaldoc_url}{CATALOG_PREFIX}{identifier}"

    entries = search_shards(identifier)
    if not entries:
        raise ShardNotFoundError(identifier)
    logger.debug("Resolved %r to %s", identifier, entries[0].doc_url)
    return entries[0].doc_url


def get_documentation(query: str) -> DocumentationPage:
    """Search for *query* and fetch the documentation of the first result."""
    entries = search_shards(query)
    if not entries:
        raise ShardNotFoundError(query, f"No results found for '{query}'")
    return fetch_documentation(entries[0].doc_url)
