"""Configuration read from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

GITHUB_HOST = "github.com"
DEFAULT_REMOTE = "origin"
DEFAULT_GIT_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_github_hosts() -> tuple[str, ...]:
    """Hosts accepted as GitHub when parsing URLs.

    Always includes github.com. A GitHub Enterprise host set in GH_HOST (the
    variable the ``gh`` CLI reads) is accepted as well.
    """
    extra = (os.getenv("GH_HOST") or "").strip()
    if extra and extra.lower() != GITHUB_HOST:
        return (GITHUB_HOST, extra)
    return (GITHUB_HOST,)


def get_root_dir(override: str | None = None) -> Path:
    """Get the directory the HTTP service is allowed to inspect.

    Priority: override > GHREPO_ROOT env var > current directory
    """
    if override:
        return Path(override)
    env_root = os.getenv("GHREPO_ROOT")
    if env_root:
        return Path(env_root)
    return Path.cwd()


def get_git_timeout() -> float:
    """Timeout in seconds for each git subprocess."""
    raw = os.getenv("GHREPO_GIT_TIMEOUT")
    if raw is None:
        return DEFAULT_GIT_TIMEOUT
    try:
        value = float(raw.strip())
    except ValueError:
        return DEFAULT_GIT_TIMEOUT
    return value if value > 0 else DEFAULT_GIT_TIMEOUT


def get_log_level() -> str:
    """Default log level for the command-line tool."""
    level = (os.getenv("GHREPO_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL
