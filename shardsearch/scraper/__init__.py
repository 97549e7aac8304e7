"""Scraper package — HTTP retrieval & catalog page extraction."""

from shardsearch.scraper.crystaldoc import parse_documentation, parse_search_results
from shardsearch.scraper.fetcher import get, post_form, request
from shardsearch.scraper.models import (
    CatalogEntry,
    DocumentationPage,
    RawPage,
    SearchRecord,
    TypeEntry,
)
from shardsearch.scraper.shards_info import parse_shards

__all__ = [
    "request",
    "get",
    "post_form",
    "parse_shards",
    "parse_search_results",
    "parse_documentation",
    "RawPage",
    "SearchRecord",
    "CatalogEntry",
    "TypeEntry",
    "DocumentationPage",
]
