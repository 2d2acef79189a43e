"""Pydantic models for Hacker News items, users and search results.

Attribute names are snake_case; the origin's wire names (``objectID``,
``nbHits``, ``_tags``...) are accepted through aliases so payloads validate
straight from ``response.json()``.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DELETED_AUTHOR = "[deleted]"


class StoryCategory(str, Enum):
    """The six fixed story listings of the official API."""

    TOP = "top"
    NEW = "new"
    BEST = "best"
    ASK = "ask"
    SHOW = "show"
    JOB = "job"

    @property
    def endpoint(self) -> str:
        return f"{self.value}stories"


class Item(BaseModel):
    """A story, comment, job, poll or poll option."""

    id: int
    type: Optional[Literal["job", "story", "comment", "poll", "pollopt"]] = None
    by: Optional[str] = None
    time: Optional[int] = None
    text: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    score: Optional[int] = None
    descendants: Optional[int] = None
    kids: Optional[list[int]] = None
    parent: Optional[int] = None
    parts: Optional[list[int]] = None
    poll: Optional[int] = None
    dead: Optional[bool] = None
    deleted: Optional[bool] = None


class User(BaseModel):
    """A Hacker News account, keyed by its case-sensitive username."""

    id: str
    created: int
    karma: int
    about: Optional[str] = None
    submitted: Optional[list[int]] = None


class CommentNode(BaseModel):
    """An item projected into a comment tree, with its resolved children."""

    id: int
    by: str = DELETED_AUTHOR
    text: str = ""
    time: Optional[int] = None
    children: list[CommentNode] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: Item, children: list[CommentNode]) -> CommentNode:
        return cls(
            id=item.id,
            by=item.by or DELETED_AUTHOR,
            text=item.text or "",
            time=item.time,
            children=children,
        )


class StoryPage(BaseModel):
    """One page of a story listing plus the full listing length."""

    items: list[Item] = Field(default_factory=list)
    total: int = 0


class SearchHit(BaseModel):
    """One story or comment matched by an Algolia search."""

    model_config = ConfigDict(populate_by_name=True)

    object_id: str = Field(alias="objectID")
    title: Optional[str] = None
    url: Optional[str] = None
    author: str
    points: Optional[int] = None
    num_comments: Optional[int] = None
    created_at: str
    story_text: Optional[str] = None
    comment_text: Optional[str] = None
    story_id: Optional[int] = None
    parent_id: Optional[int] = None
    tags: Optional[list[str]] = Field(default=None, alias="_tags")


class SearchResult(BaseModel):
    """A page of Algolia search hits."""

    model_config = ConfigDict(populate_by_name=True)

    hits: list[SearchHit] = Field(default_factory=list)
    nb_hits: int = Field(alias="nbHits")
    page: int
    nb_pages: int = Field(alias="nbPages")
    hits_per_page: int = Field(alias="hitsPerPage")
