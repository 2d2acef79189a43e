"""Console entry points that launch the Hacker News Explorer agent through ADK."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


def _adk(*args: str) -> None:
    cmd = ["adk", *args, *sys.argv[1:]]
    raise SystemExit(subprocess.run(cmd, check=False).returncode)


def web() -> None:
    """Serve the ADK web UI with the agents found next to this package.

    Shortcut for ``adk web <repo root>``; extra arguments such as ``--port``
    are passed through.
    """
    _adk("web", str(_PACKAGE_DIR.parent))


def run() -> None:
    """Chat with the agent in the terminal (``adk run hackernews_explorer``)."""
    _adk("run", str(_PACKAGE_DIR))
