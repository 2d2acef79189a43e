"""Hacker News tools exposed to the agent.

Provides ADK-compatible async tool functions:
  - hn_get_item: fetch any item by id
  - hn_get_user: fetch a user profile
  - hn_top_stories, hn_new_stories, hn_best_stories, hn_ask_stories,
    hn_show_stories, hn_job_stories: paginated story listings
  - hn_get_comments: fetch a bounded comment tree
  - hn_search: full-text search through Algolia

Each tool clamps its numeric arguments and returns a dict with either a
'text' key (the rendered result) or an 'error' key.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Optional

from . import api
from .config import config
from .models import Item, SearchHit, StoryCategory

_RULE = "=" * 50

_STORY_TITLES = {
    StoryCategory.TOP: "Top Stories",
    StoryCategory.NEW: "New Stories",
    StoryCategory.BEST: "Best Stories",
    StoryCategory.ASK: "Ask HN Stories",
    StoryCategory.SHOW: "Show HN Stories",
    StoryCategory.JOB: "Job Stories",
}


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def format_time(unix: Optional[int]) -> str:
    """Render unix seconds as UTC ISO-8601, e.g. 2021-01-01T00:00:00.000Z."""
    if not unix:
        return "unknown"
    stamp = datetime.fromtimestamp(unix, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_story(item: Item) -> str:
    parts = [f"[{item.id}] {item.title or '(no title)'}"]
    if item.url:
        parts.append(f"  URL: {item.url}")
    if item.score is not None:
        parts.append(f"  Score: {item.score}")
    if item.by:
        parts.append(f"  By: {item.by}")
    if item.descendants is not None:
        parts.append(f"  Comments: {item.descendants}")
    parts.append(f"  Posted: {format_time(item.time)}")
    return "\n".join(parts)


def format_hit(hit: SearchHit) -> str:
    parts = [f"[{hit.object_id}] {hit.title or '(comment)'}"]
    if hit.url:
        parts.append(f"  URL: {hit.url}")
    if hit.points is not None:
        parts.append(f"  Points: {hit.points}")
    parts.append(f"  Author: {hit.author}")
    if hit.num_comments is not None:
        parts.append(f"  Comments: {hit.num_comments}")
    parts.append(f"  Created: {hit.created_at}")
    return "\n".join(parts)


async def hn_get_item(item_id: int) -> dict[str, Any]:
    """Retrieve a Hacker News item (story, comment, job, poll, or poll option) by its numeric ID.

    Args:
        item_id: The item's unique numeric ID (e.g. 8863).

    Returns:
        A dict with 'text' holding the item as JSON (title, URL, score, author,
        text and child comment IDs when present), or 'error' if not found.
    """
    item = await api.get_item(item_id)
    if item is None:
        return {
            "error": f"Item {item_id} not found. IDs are positive integers. "
            "Use hn_top_stories to find valid IDs."
        }
    return {"text": json.dumps(item.model_dump(exclude_none=True), indent=2)}


async def hn_get_user(username: str) -> dict[str, Any]:
    """Retrieve a Hacker News user profile by username. Usernames are case-sensitive.

    Args:
        username: Case-sensitive HN username (e.g. 'pg', 'dang').

    Returns:
        A dict with 'text' holding karma, account creation date, about text and
        recent submission IDs as JSON, or 'error' if the user does not exist.
    """
    user = await api.get_user(username)
    if user is None:
        return {
            "error": f'User "{username}" not found. Usernames are case-sensitive. '
            "Try searching with hn_search instead."
        }
    result = {
        "id": user.id,
        "karma": user.karma,
        "created": format_time(user.created),
        "about": user.about,
        "recentSubmissions": (user.submitted or [])[: config.recent_submissions_limit],
    }
    return {"text": json.dumps(result, indent=2)}


async def _list_stories(
    category: StoryCategory, limit: int, offset: int
) -> dict[str, Any]:
    safe_limit = clamp(limit, 1, config.max_limit)
    safe_offset = max(0, offset)
    page = await api.get_stories(category, safe_limit, safe_offset)

    if not page.items:
        return {
            "text": f"No stories found at offset {safe_offset}. "
            f"Total available: {page.total}."
        }

    first = safe_offset + 1
    last = safe_offset + len(page.items)
    header = f"{_STORY_TITLES[category]} ({first}-{last} of {page.total})\n{_RULE}"
    body = "\n\n".join(format_story(item) for item in page.items)
    return {"text": f"{header}\n\n{body}"}


async def hn_top_stories(
    limit: int = config.default_limit, offset: int = 0
) -> dict[str, Any]:
    """Get the current top stories on Hacker News, ranked by the HN ranking algorithm.

    Args:
        limit: Number of stories to return (1-50, default 10).
        offset: Number of stories to skip (default 0).

    Returns:
        A dict with 'text' listing title, URL, score, author and comment count
        of each story.
    """
    return await _list_stories(StoryCategory.TOP, limit, offset)


async def hn_new_stories(
    limit: int = config.default_limit, offset: int = 0
) -> dict[str, Any]:
    """Get the newest stories posted to Hacker News, most recent first.

    Args:
        limit: Number of stories to return (1-50, default 10).
        offset: Number of stories to skip (default 0).

    Returns:
        A dict with 'text' listing title, URL, score, author and comment count
        of each story.
    """
    return await _list_stories(StoryCategory.NEW, limit, offset)


async def hn_best_stories(
    limit: int = config.default_limit, offset: int = 0
) -> dict[str, Any]:
    """Get the best stories on Hacker News (highest-voted recent stories).

    Args:
        limit: Number of stories to return (1-50, default 10).
        offset: Number of stories to skip (default 0).

    Returns:
        A dict with 'text' listing title, URL, score, author and comment count
        of each story.
    """
    return await _list_stories(StoryCategory.BEST, limit, offset)


async def hn_ask_stories(
    limit: int = config.default_limit, offset: int = 0
) -> dict[str, Any]:
    """Get the latest Ask HN posts, questions submitted to the HN community.

    Args:
        limit: Number of stories to return (1-50, default 10).
        offset: Number of stories to skip (default 0).

    Returns:
        A dict with 'text' listing title, score, author and comment count of
        each post.
    """
    return await _list_stories(StoryCategory.ASK, limit, offset)


async def hn_show_stories(
    limit: int = config.default_limit, offset: int = 0
) -> dict[str, Any]:
    """Get the latest Show HN posts, projects and products shared with the HN community.

    Args:
        limit: Number of stories to return (1-50, default 10).
        offset: Number of stories to skip (default 0).

    Returns:
        A dict with 'text' listing title, URL, score, author and comment count
        of each post.
    """
    return await _list_stories(StoryCategory.SHOW, limit, offset)


async def hn_job_stories(
    limit: int = config.default_limit, offset: int = 0
) -> dict[str, Any]:
    """Get the latest job postings on Hacker News.

    Args:
        limit: Number of postings to return (1-50, default 10).
        offset: Number of postings to skip (default 0).

    Returns:
        A dict with 'text' listing title, URL and posting time of each job.
    """
    return await _list_stories(StoryCategory.JOB, limit, offset)


async def hn_get_comments(
    item_id: int, depth: int = config.default_depth
) -> dict[str, Any]:
    """Retrieve the nested comment tree for a Hacker News story or comment.

    Higher depths fetch more data and take longer.

    Args:
        item_id: The ID of the story or comment to get comments for (e.g. 8863).
        depth: Max depth of the comment tree to fetch (1-5, default 2).

    Returns:
        A dict with 'text' holding the tree as JSON (id, by, text, time and
        children for every node), or 'error' if the item does not exist.
    """
    safe_depth = clamp(depth, 1, config.max_depth)
    tree = await api.get_comment_tree(item_id, safe_depth)
    if tree is None:
        return {
            "error": f"Item {item_id} not found. "
            "Use hn_get_item first to verify the ID exists."
        }
    return {"text": json.dumps(tree.model_dump(exclude_none=True), indent=2)}


async def hn_search(
    query: str,
    tags: Optional[str] = None,
    page: int = 0,
    hits_per_page: int = config.default_limit,
    numeric_filters: Optional[str] = None,
) -> dict[str, Any]:
    """Search Hacker News stories and comments, ranked by relevance.

    Args:
        query: Search query string (e.g. 'rust programming').
        tags: Filter by type: 'story', 'comment', 'ask_hn', 'show_hn',
            'front_page'. Commas mean AND, parentheses with commas mean OR,
            e.g. '(story,comment)'.
        page: Page number for pagination (0-indexed, default 0).
        hits_per_page: Results per page (1-50, default 10).
        numeric_filters: Numeric filter expression for date or score queries,
            e.g. 'created_at_i>1609459200,points>100'.

    Returns:
        A dict with 'text' listing the hits of the requested page, or 'error'
        if the search request failed.
    """
    result = await api.search_hn(
        query,
        tags=tags,
        page=max(0, page),
        hits_per_page=clamp(hits_per_page, 1, config.max_limit),
        numeric_filters=numeric_filters,
    )

    if result is None:
        return {"error": "Search request failed. Check your query and try again."}

    if not result.hits:
        return {
            "text": f'No results found for "{query}". '
            "Try broader search terms or different filters."
        }

    header = (
        f'Search results for "{query}" (page {result.page + 1} of '
        f"{result.nb_pages}, {result.nb_hits} total hits)\n{_RULE}"
    )
    body = "\n\n".join(format_hit(hit) for hit in result.hits)
    return {"text": f"{header}\n\n{body}"}


ALL_TOOLS = [
    hn_get_item,
    hn_get_user,
    hn_top_stories,
    hn_new_stories,
    hn_best_stories,
    hn_ask_stories,
    hn_show_stories,
    hn_job_stories,
    hn_get_comments,
    hn_search,
]
