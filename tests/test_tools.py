"""Tests for the agent-facing Hacker News tools."""

import asyncio
import json

from hackernews_explorer import tools
from hackernews_explorer.models import (
    CommentNode,
    Item,
    SearchHit,
    SearchResult,
    StoryCategory,
    StoryPage,
    User,
)


def test_clamp():
    assert tools.clamp(0, 1, 50) == 1
    assert tools.clamp(500, 1, 50) == 50
    assert tools.clamp(7, 1, 50) == 7


def test_format_time():
    assert tools.format_time(None) == "unknown"
    assert tools.format_time(0) == "unknown"
    assert tools.format_time(1609459200) == "2021-01-01T00:00:00.000Z"


def test_format_story_skips_missing_fields():
    item = Item(id=1, title="Hello", by="pg", time=1609459200)

    assert tools.format_story(item) == (
        "[1] Hello\n  By: pg\n  Posted: 2021-01-01T00:00:00.000Z"
    )


def test_format_story_full():
    item = Item(id=2, url="https://example.com", score=0, descendants=4)

    assert tools.format_story(item).splitlines() == [
        "[2] (no title)",
        "  URL: https://example.com",
        "  Score: 0",
        "  Comments: 4",
        "  Posted: unknown",
    ]


def test_format_hit_for_comment():
    hit = SearchHit(objectID="9", author="bob", created_at="2024-01-01T00:00:00Z")

    assert tools.format_hit(hit) == (
        "[9] (comment)\n  Author: bob\n  Created: 2024-01-01T00:00:00Z"
    )


def test_get_item_not_found(monkeypatch):
    async def fake_get_item(item_id):
        return None

    monkeypatch.setattr(tools.api, "get_item", fake_get_item)

    result = asyncio.run(tools.hn_get_item(123))

    assert "Item 123 not found" in result["error"]


def test_get_item_renders_json_without_empty_fields(monkeypatch):
    async def fake_get_item(item_id):
        return Item(id=item_id, type="story", title="Dropbox", kids=[2, 3])

    monkeypatch.setattr(tools.api, "get_item", fake_get_item)

    result = asyncio.run(tools.hn_get_item(8863))

    assert json.loads(result["text"]) == {
        "id": 8863,
        "type": "story",
        "title": "Dropbox",
        "kids": [2, 3],
    }


def test_get_user_truncates_submissions(monkeypatch):
    async def fake_get_user(username):
        return User(id=username, created=1609459200, karma=10, submitted=list(range(30)))

    monkeypatch.setattr(tools.api, "get_user", fake_get_user)

    result = json.loads(asyncio.run(tools.hn_get_user("dang"))["text"])

    assert result["id"] == "dang"
    assert result["created"] == "2021-01-01T00:00:00.000Z"
    assert result["about"] is None
    assert result["recentSubmissions"] == list(range(20))


def test_get_user_not_found(monkeypatch):
    async def fake_get_user(username):
        return None

    monkeypatch.setattr(tools.api, "get_user", fake_get_user)

    result = asyncio.run(tools.hn_get_user("Nobody"))

    assert result["error"].startswith('User "Nobody" not found.')


def test_story_listing_clamps_and_renders(monkeypatch):
    captured = {}

    async def fake_get_stories(category, limit, offset):
        captured.update(category=category, limit=limit, offset=offset)
        return StoryPage(items=[Item(id=11, title="A"), Item(id=12, title="B")], total=500)

    monkeypatch.setattr(tools.api, "get_stories", fake_get_stories)

    result = asyncio.run(tools.hn_best_stories(limit=500, offset=-3))

    assert captured == {"category": StoryCategory.BEST, "limit": 50, "offset": 0}
    header, rule = result["text"].splitlines()[:2]
    assert header == "Best Stories (1-2 of 500)"
    assert rule == "=" * 50
    assert "[11] A" in result["text"]
    assert "[12] B" in result["text"]


def test_story_listing_empty_page(monkeypatch):
    async def fake_get_stories(category, limit, offset):
        return StoryPage(items=[], total=3)

    monkeypatch.setattr(tools.api, "get_stories", fake_get_stories)

    result = asyncio.run(tools.hn_job_stories(limit=10, offset=30))

    assert result == {"text": "No stories found at offset 30. Total available: 3."}


def test_get_comments_clamps_depth(monkeypatch):
    captured = []

    async def fake_get_comment_tree(item_id, max_depth, current_depth=0):
        captured.append(max_depth)
        return CommentNode(id=item_id, children=[CommentNode(id=2, by="a", text="hi")])

    monkeypatch.setattr(tools.api, "get_comment_tree", fake_get_comment_tree)

    asyncio.run(tools.hn_get_comments(1, depth=99))
    result = asyncio.run(tools.hn_get_comments(1, depth=0))

    assert captured == [5, 1]
    tree = json.loads(result["text"])
    assert tree["by"] == "[deleted]"
    assert tree["children"][0] == {"id": 2, "by": "a", "text": "hi", "children": []}


def test_get_comments_not_found(monkeypatch):
    async def fake_get_comment_tree(item_id, max_depth, current_depth=0):
        return None

    monkeypatch.setattr(tools.api, "get_comment_tree", fake_get_comment_tree)

    result = asyncio.run(tools.hn_get_comments(77))

    assert "Item 77 not found" in result["error"]


def test_search_renders_header(monkeypatch):
    captured = {}

    async def fake_search_hn(query, **kwargs):
        captured.update(kwargs)
        hits = [SearchHit(objectID="1", title="Rust", author="a", created_at="2024-01-01")]
        return SearchResult(hits=hits, nbHits=25, page=1, nbPages=3, hitsPerPage=10)

    monkeypatch.setattr(tools.api, "search_hn", fake_search_hn)

    result = asyncio.run(tools.hn_search("rust", page=1, hits_per_page=0))

    assert captured["hits_per_page"] == 1
    assert captured["page"] == 1
    assert result["text"].startswith(
        'Search results for "rust" (page 2 of 3, 25 total hits)'
    )


def test_search_failure_and_empty(monkeypatch):
    async def failing_search(query, **kwargs):
        return None

    async def empty_search(query, **kwargs):
        return SearchResult(hits=[], nbHits=0, page=0, nbPages=0, hitsPerPage=10)

    monkeypatch.setattr(tools.api, "search_hn", failing_search)
    assert asyncio.run(tools.hn_search("x")) == {
        "error": "Search request failed. Check your query and try again."
    }

    monkeypatch.setattr(tools.api, "search_hn", empty_search)
    assert "No results found" in asyncio.run(tools.hn_search("x"))["text"]
