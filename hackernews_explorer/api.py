"""Async Hacker News client.

Official API: https://github.com/HackerNews/API
Search API (Algolia): https://hn.algolia.com/api

Every accessor returns ``None`` (or an empty result) when the origin answers
with a non-success status; "not found" and "temporarily unavailable" are not
told apart. Payloads that are not valid JSON raise.

Each top-level call opens one ``httpx.AsyncClient`` and shares it with all of
its concurrent sub-fetches; no client outlives the call.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Optional, TypeVar, Union

import httpx

from .config import config
from .models import CommentNode, Item, SearchResult, StoryCategory, StoryPage, User

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.timeout)


async def fetch_json(
    url: str,
    params: Optional[dict[str, Any]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """GET ``url`` and return the decoded JSON body, or None on failure.

    Uses ``client`` when given, otherwise a client scoped to this request.
    """
    if client is None:
        async with _new_client() as own_client:
            return await fetch_json(url, params, own_client)

    logger.debug("GET %s params=%s", url, params)
    try:
        r = await client.get(url, params=params)
    except httpx.TransportError as e:
        logger.warning("Request to %s failed: %s", url, e)
        return None

    if not r.is_success:
        logger.debug("GET %s returned %s", url, r.status_code)
        return None
    return r.json()


async def _gather_in_order(awaitables: list[Awaitable[Optional[T]]]) -> list[T]:
    """Run awaitables concurrently; keep input order and drop None results.

    The first exception raised by any awaitable propagates unchanged.
    """
    results = await asyncio.gather(*awaitables)
    return [result for result in results if result is not None]


# ---------------------------------------------------------------------------
# Official HN API
# ---------------------------------------------------------------------------


async def get_item(
    item_id: int, client: Optional[httpx.AsyncClient] = None
) -> Optional[Item]:
    payload = await fetch_json(
        f"{config.hn_base_url}/item/{item_id}.json", client=client
    )
    if payload is None:
        return None
    return Item.model_validate(payload)


async def get_user(
    username: str, client: Optional[httpx.AsyncClient] = None
) -> Optional[User]:
    # Usernames are case-sensitive keys, pass them through untouched.
    payload = await fetch_json(
        f"{config.hn_base_url}/user/{username}.json", client=client
    )
    if payload is None:
        return None
    return User.model_validate(payload)


async def get_story_ids(
    category: Union[StoryCategory, str], client: Optional[httpx.AsyncClient] = None
) -> list[int]:
    """Return the ordered ids of a story listing, or [] if unavailable."""
    category = StoryCategory(category)
    ids = await fetch_json(
        f"{config.hn_base_url}/{category.endpoint}.json", client=client
    )
    return ids or []


async def get_stories(
    category: Union[StoryCategory, str], limit: int, offset: int
) -> StoryPage:
    """Fetch a page of stories with full item details.

    Args:
        category: One of top, new, best, ask, show, job.
        limit: Maximum number of ids to resolve.
        offset: Index of the first id of the page.

    Returns:
        A StoryPage whose items keep the listing order (ids that could not be
        resolved are dropped) and whose total is the full listing length.
    """
    async with _new_client() as client:
        all_ids = await get_story_ids(category, client=client)
        page_ids = all_ids[offset : offset + limit]
        items = await _gather_in_order(
            [get_item(item_id, client=client) for item_id in page_ids]
        )
    return StoryPage(items=items, total=len(all_ids))


async def get_comment_tree(
    item_id: int,
    max_depth: int,
    current_depth: int = 0,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[CommentNode]:
    """Recursively fetch the comment tree of an item, up to ``max_depth``.

    Children are only expanded while ``current_depth < max_depth``; siblings
    are fetched concurrently and kept in the parent's ``kids`` order. A child
    that cannot be resolved is left out of its parent's children.
    """
    if current_depth > max_depth:
        return None

    if client is None:
        async with _new_client() as own_client:
            return await get_comment_tree(
                item_id, max_depth, current_depth, client=own_client
            )

    item = await get_item(item_id, client=client)
    if item is None:
        return None

    children: list[CommentNode] = []
    if item.kids and current_depth < max_depth:
        logger.debug(
            "Expanding %d children of %s at depth %d",
            len(item.kids),
            item_id,
            current_depth,
        )
        children = await _gather_in_order(
            [
                get_comment_tree(kid, max_depth, current_depth + 1, client=client)
                for kid in item.kids
            ]
        )

    return CommentNode.from_item(item, children)


# ---------------------------------------------------------------------------
# Algolia Search API
# ---------------------------------------------------------------------------


async def search_hn(
    query: str,
    tags: Optional[str] = None,
    page: Optional[int] = None,
    hits_per_page: Optional[int] = None,
    numeric_filters: Optional[str] = None,
) -> Optional[SearchResult]:
    """Search HN stories and comments.

    Args:
        query: Full-text query.
        tags: Tag filter, e.g. "story", "comment", "ask_hn", "(story,comment)".
        page: Zero-based page index.
        hits_per_page: Page size; callers are expected to bound it.
        numeric_filters: Filter expression, e.g. "created_at_i>1609459200".
    """
    params: dict[str, Any] = {"query": query}
    if tags:
        params["tags"] = tags
    if page is not None:
        params["page"] = page
    if hits_per_page is not None:
        params["hitsPerPage"] = hits_per_page
    if numeric_filters:
        params["numericFilters"] = numeric_filters

    payload = await fetch_json(f"{config.algolia_base_url}/search", params=params)
    if payload is None:
        return None
    return SearchResult.model_validate(payload)
