"""FastAPI app for ghrepo — look up GitHub repositories from specs or local checkouts."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException

from config import DEFAULT_REMOTE, get_root_dir
from errors import InvalidRemoteURLError, LocalRepoError, NoSuchRemoteError, ParseError
from ghrepo import __version__, parse_repo_spec
from local_repo import LocalRepo
from models import HealthStatus, RepoDetails

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ghrepo",
    description="Identify GitHub repositories from URLs, specifiers and local checkouts",
    version=__version__,
)


def _resolve_under_root(rel_path: str) -> Path:
    """Resolve a client-supplied path, refusing anything outside the root."""
    root = get_root_dir().resolve()
    path = (root / rel_path).resolve()
    try:
        path.relative_to(root)
    except ValueError:
        raise HTTPException(status_code=403, detail="Access outside the root directory is not allowed")
    return path


# --- API Endpoints ---


@app.get("/api/parse", response_model=RepoDetails)
async def parse_spec(spec: str, default_owner: str | None = None):
    """Parse a repository specifier or URL."""
    try:
        repo = parse_repo_spec(spec, default_owner=default_owner)
    except ParseError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return RepoDetails.from_repo(repo)


@app.get("/api/local", response_model=RepoDetails)
async def local_remote(path: str = ".", remote: str = DEFAULT_REMOTE):
    """Return the GitHub repository a local checkout's remote points to."""
    local = LocalRepo(_resolve_under_root(path))
    try:
        repo = await asyncio.to_thread(local.github_remote, remote)
    except NoSuchRemoteError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRemoteURLError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except LocalRepoError as e:
        logger.error("Inspecting %s failed: %s", local.path, e)
        raise HTTPException(status_code=500, detail=str(e))
    return RepoDetails.from_repo(repo)


@app.get("/health", response_model=HealthStatus)
async def health():
    """Health check."""
    return HealthStatus(status="ok", version=__version__, root=str(get_root_dir()))
