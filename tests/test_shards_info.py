"""Tests for shards.info search page parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from shardsearch.scraper.models import SearchRecord
from shardsearch.scraper.shards_info import parse_shards

_FIXTURES = Path(__file__).parent / "fixtures"

_MINIMAL_BLOCK = """\
<div class="shards__shard">
  <h2 class="shards__shard_name">
    <a href="/github/{name}">{name}</a>
  </h2>
  <p class="shards__shard_desc"></p>
  <div class="shards__shard_stats">
    <ul>
      <li>1 star</li>
      <li>2 forks</li>
      <li>3 open issues</li>
      <li>Used by 4</li>
      <li>5 dependencies</li>
    </ul>
  </div>
</div>
"""


def _page(*blocks: str) -> str:
    return "<!DOCTYPE html><html><body>" + "".join(blocks) + "</body></html>"


class TestParseShards:
    def test_parses_fixture(self) -> None:
        html = (_FIXTURES / "shards_search.html").read_text(encoding="utf-8")
        shards = parse_shards(html)

        assert len(shards) == 1
        shard = shards[0]
        assert isinstance(shard, SearchRecord)
        assert shard.name == "owner/repo"
        assert shard.description == "A test shard description"
        assert shard.stars == 1234
        assert shard.forks == 567
        assert shard.open_issues == 89
        assert shard.used_by == 10
        assert shard.dependencies == 5
        assert shard.last_activity == "2 days ago"
        assert shard.topics == ("crystal", "test")
        assert shard.url == "https://shards.info/github/owner/repo"
        assert shard.avatar_url == "https://avatars.githubusercontent.com/u/123?v=4"
        assert shard.archived is True

    def test_missing_optional_elements(self) -> None:
        shards = parse_shards(_page(_MINIMAL_BLOCK.format(name="owner/repo")))

        assert len(shards) == 1
        shard = shards[0]
        assert shard.description is None
        assert shard.avatar_url is None
        assert shard.archived is False
        assert shard.topics == ()
        assert shard.last_activity is None
        assert (shard.stars, shard.forks, shard.open_issues) == (1, 2, 3)
        assert (shard.used_by, shard.dependencies) == (4, 5)

    def test_one_record_per_block_in_document_order(self) -> None:
        html = _page(*(_MINIMAL_BLOCK.format(name=n) for n in ("a/one", "b/two", "c/three")))
        assert [s.name for s in parse_shards(html)] == ["a/one", "b/two", "c/three"]

    def test_block_without_name_link_is_skipped(self) -> None:
        broken = '<div class="shards__shard"><h2 class="shards__shard_name">orphan</h2></div>'
        html = _page(_MINIMAL_BLOCK.format(name="a/one"), broken, _MINIMAL_BLOCK.format(name="b/two"))
        assert [s.name for s in parse_shards(html)] == ["a/one", "b/two"]

    def test_link_without_href_leaves_url_empty(self) -> None:
        block = '<div class="shards__shard"><h2 class="shards__shard_name"><a>x/y</a></h2></div>'
        shard = parse_shards(_page(block))[0]
        assert shard.url == ""
        assert shard.stars == 0
        assert shard.dependencies == 0

    def test_thousands_separators_in_stats(self) -> None:
        block = _MINIMAL_BLOCK.format(name="big/repo").replace(
            "3 open issues", "2,345,678 open issues"
        )
        assert parse_shards(_page(block))[0].open_issues == 2345678

    def test_page_without_blocks_returns_empty_list(self) -> None:
        assert parse_shards("<html><body>No results</body></html>") == []

    def test_records_are_frozen(self) -> None:
        shard = parse_shards(_page(_MINIMAL_BLOCK.format(name="a/one")))[0]
        with pytest.raises(AttributeError):
            shard.stars = 99  # type: ignore[misc]

    def test_uses_configured_origin(self, monkeypatch) -> None:
        monkeypatch.setattr("shardsearch.config.settings.shards_info_url", "http://mirror.local")
        shard = parse_shards(_page(_MINIMAL_BLOCK.format(name="a/one")))[0]
        assert shard.url == "http://mirror.local/github/a/one"

    def test_topics_are_immutable(self) -> None:
        html = (_FIXTURES / "shards_search.html").read_text(encoding="utf-8")
        shard = parse_shards(html)[0]
        with pytest.raises(AttributeError):
            shard.topics.append("extra")  # type: ignore[attr-defined]
