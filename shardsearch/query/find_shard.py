"""shards.info search: fetch the results page and parse its shard cards."""

from __future__ import annotations

import logging
from typing import List
from urllib.parse import quote_plus

from shardsearch import __version__
from shardsearch.config import settings
from shardsearch.scraper import fetcher
from shardsearch.scraper.models import SearchRecord
from shardsearch.scraper.shards_info import parse_shards

logger = logging.getLogger(__name__)

USER_AGENT = f"find_shard/{__version__} (Python)"


def search_url(query: str) -> str:
    return f"{settings.shards_info_url}/search?query={quote_plus(query)}"


def search_shards(query: str) -> List[SearchRecord]:
    """Search shards.info for *query*.

    Raises:
        FetchError: If the search page cannot be retrieved.
    """
    logger.info("Searching shards.info for %r", query)
    html = fetcher.get(search_url(query), user_agent=USER_AGENT)
    records = parse_shards(html)
    logger.info("shards.info returned %d shard(s)", len(records))
    return records
