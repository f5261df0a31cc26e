"""Local git repository inspection — finds the GitHub repo a checkout points to."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from config import DEFAULT_REMOTE, get_git_timeout
from errors import (
    CurdirError,
    DetachedHeadError,
    GitCommandError,
    GitExecutionError,
    GitOutputError,
    InvalidRemoteURLError,
    NoSuchRemoteError,
    NoUpstreamError,
    ParseError,
)
from ghrepo import GitHubRepo, parse_github_url

logger = logging.getLogger(__name__)


def _run_git(repo_path: Path, args: list[str], timeout: float | None = None) -> subprocess.CompletedProcess[bytes]:
    """Run a git command in a repo directory and return the finished process.

    Raises GitExecutionError if git could not be started or timed out.
    """
    cmd = ["git", "-C", str(repo_path)] + args
    logger.debug("Running %s", cmd)
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            timeout=timeout if timeout is not None else get_git_timeout(),
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.warning("Could not run %s: %s", cmd, e)
        raise GitExecutionError(cmd, e) from e


def _read_git(repo_path: Path, args: list[str]) -> str:
    """Run a git command and return its stripped stdout.

    Raises GitCommandError on a nonzero exit status.
    """
    result = _run_git(repo_path, args)
    try:
        stdout = result.stdout.decode("utf-8")
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
    except UnicodeDecodeError as e:
        raise GitOutputError(e) from e
    if result.returncode != 0:
        logger.debug("git %s exited %d: %s", " ".join(args), result.returncode, stderr)
        raise GitCommandError(list(result.args), result.returncode, stderr)
    return stdout.strip()


class LocalRepo:
    """A local git repository, inspected through the ``git`` command.

    No validation is done as to whether ``path`` is a git repository or even
    an existing directory; that surfaces when a command is run.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"LocalRepo({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalRepo):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @classmethod
    def for_cwd(cls) -> LocalRepo:
        """A LocalRepo for the current directory, captured at call time."""
        try:
            return cls(Path.cwd())
        except OSError as e:
            raise CurdirError(e) from e

    def is_git_repo(self) -> bool:
        """Whether the directory is a git repository or inside one."""
        return _run_git(self.path, ["rev-parse", "--git-dir"]).returncode == 0

    def current_branch(self) -> str:
        """Name of the checked-out branch."""
        try:
            return _read_git(self.path, ["symbolic-ref", "--short", "-q", "HEAD"])
        except GitCommandError as e:
            if e.returncode == 1:
                raise DetachedHeadError() from e
            raise

    def github_remote(self, remote: str = DEFAULT_REMOTE) -> GitHubRepo:
        """The GitHub repository that the given remote's URL points to."""
        try:
            url = _read_git(self.path, ["remote", "get-url", "--", remote])
        except GitCommandError as e:
            if e.returncode == 2:
                raise NoSuchRemoteError(remote) from e
            raise
        try:
            return parse_github_url(url)
        except ParseError as e:
            logger.warning("Remote %r of %s is not a GitHub URL", remote, self.path)
            raise InvalidRemoteURLError(url, e) from e

    def branch_upstream(self, branch: str) -> GitHubRepo:
        """The GitHub repository for the upstream remote of ``branch``."""
        try:
            upstream = _read_git(self.path, ["config", "--get", "--", f"branch.{branch}.remote"])
        except GitCommandError as e:
            if e.returncode == 1:
                raise NoUpstreamError(branch) from e
            raise
        return self.github_remote(upstream)
