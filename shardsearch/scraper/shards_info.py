"""Parse shards.info search result pages into :class:`SearchRecord` rows."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from shardsearch.config import settings
from shardsearch.scraper import normalize
from shardsearch.scraper.models import SearchRecord

_SHARD_BLOCK = "div.shards__shard"
_NAME_LINK = "h2.shards__shard_name a"
_DESCRIPTION = "p.shards__shard_desc"
_AVATAR = "img.avatar"
_ARCHIVED_BADGE = "span.archived-badge"
_TOPIC_BADGE = "a.badge.bg-secondary.text-monospace"
_STATS = "div.shards__shard_stats ul li"


def _text(tag: Tag | None) -> str | None:
    return tag.get_text() if tag is not None else None


def _parse_block(block: Tag) -> SearchRecord | None:
    """Build one record from a shard card; ``None`` if it has no name link."""
    name_link = block.select_one(_NAME_LINK)
    if name_link is None:
        return None

    href = name_link.get("href")
    avatar = block.select_one(_AVATAR)
    stats = [li.get_text().strip() for li in block.select(_STATS)]

    return SearchRecord(
        name=name_link.get_text().strip(),
        description=normalize.optional_text(_text(block.select_one(_DESCRIPTION))),
        stars=normalize.stat_at(stats, normalize.STARS),
        forks=normalize.stat_at(stats, normalize.FORKS),
        open_issues=normalize.stat_at(stats, normalize.OPEN_ISSUES),
        used_by=normalize.stat_at(stats, normalize.USED_BY),
        dependencies=normalize.stat_at(stats, normalize.DEPENDENCIES),
        last_activity=normalize.last_activity(stats),
        topics=tuple(badge.get_text().strip() for badge in block.select(_TOPIC_BADGE)),
        url=f"{settings.shards_info_url}{href}" if href else "",
        avatar_url=avatar.get("src") if avatar is not None else None,
        archived=block.select_one(_ARCHIVED_BADGE) is not None,
    )


def parse_shards(html: str) -> List[SearchRecord]:
    """Return one record per shard card in *html*, in document order.

    Cards missing their name link are skipped; a page without cards yields
    an empty list.
    """
    soup = BeautifulSoup(html, "html.parser")
    records: List[SearchRecord] = []
    for block in soup.select(_SHARD_BLOCK):
        record = _parse_block(block)
        if record is not None:
            records.append(record)
    return records
