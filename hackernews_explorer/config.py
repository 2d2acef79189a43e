import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Ensure env vars are loaded from .env if present
load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


@dataclass
class HackerNewsConfiguration:
    """Configuration for the Hacker News endpoints and tool limits.

    Attributes:
        hn_base_url (str): Base URL of the official Firebase HN API.
        algolia_base_url (str): Base URL of the Algolia HN Search API.
        timeout (float): Transport timeout in seconds for every request.
        worker_model (str): Model driving the tool-calling agent.
        default_depth (int): Comment tree depth used when none is given.
        max_depth (int): Largest comment tree depth a tool call may request.
    """

    hn_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "HN_BASE_URL", "https://hacker-news.firebaseio.com/v0"
        )
    )
    algolia_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "HN_ALGOLIA_BASE_URL", "https://hn.algolia.com/api/v1"
        )
    )
    timeout: float = field(default_factory=lambda: _env_float("HN_TIMEOUT", 15.0))
    worker_model: str = field(
        default_factory=lambda: os.environ.get(
            "HN_WORKER_MODEL", "gemini-3-flash-preview"
        )
    )
    default_depth: int = 2
    max_depth: int = 5
    default_limit: int = 10
    max_limit: int = 50
    recent_submissions_limit: int = 20


config = HackerNewsConfiguration()
