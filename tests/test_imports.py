"""Smoke test to verify imports and agent construction."""

from hackernews_explorer.agent import root_agent
from hackernews_explorer.tools import ALL_TOOLS


def test_imports():
    """Verify that the root agent is built with every Hacker News tool."""
    assert root_agent is not None
    assert root_agent.name == "hackernews_explorer"

    tool_names = {tool.__name__ for tool in ALL_TOOLS}
    assert tool_names == {
        "hn_get_item",
        "hn_get_user",
        "hn_top_stories",
        "hn_new_stories",
        "hn_best_stories",
        "hn_ask_stories",
        "hn_show_stories",
        "hn_job_stories",
        "hn_get_comments",
        "hn_search",
    }
    assert len(root_agent.tools) == len(ALL_TOOLS)
