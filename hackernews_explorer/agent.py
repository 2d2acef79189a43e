"""Hacker News Explorer — agent wiring.

Architecture:
  hackernews_explorer (LlmAgent, root)
  └── tools: hn_get_item, hn_get_user, hn_*_stories, hn_get_comments, hn_search
"""

from __future__ import annotations

import datetime

from google.adk.agents import LlmAgent

from .config import config
from .tools import ALL_TOOLS

hackernews_explorer = LlmAgent(
    name="hackernews_explorer",
    model=config.worker_model,
    description=(
        "Answers questions about Hacker News by reading stories, comments, "
        "user profiles and search results."
    ),
    instruction=f"""\
You are a Hacker News research assistant. You have read-only access to Hacker
News through the tools provided.

## Choosing a tool
- Front page, newest, best, Ask HN, Show HN or job posts → the matching
  `hn_*_stories` tool. Page with `limit` and `offset`.
- A specific story, comment, poll or job → `hn_get_item`.
- What people said about a story → `hn_get_comments`. Start with depth 2 and
  only go deeper when the user needs it; deep trees are slow.
- A person → `hn_get_user` (usernames are case-sensitive).
- Anything by topic, keyword or date → `hn_search`. For date ranges use
  `numeric_filters`, e.g. `created_at_i>1609459200`.

## Important
- A result with an `error` key means the item, user or search was not found
  or failed; tell the user and suggest the alternative the error mentions.
- Quote item IDs so the user can follow up on them.
- Current date: {datetime.datetime.now().strftime("%Y-%m-%d")}
""",
    tools=ALL_TOOLS,
)

# ---------------------------------------------------------------------------
# Exports
# ---------------------------------------------------------------------------

root_agent = hackernews_explorer
