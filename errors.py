"""Exception hierarchy for ghrepo.

Parse failures and local git failures live in separate branches so callers
can report them with distinct wording.
"""

from __future__ import annotations


class GHRepoError(Exception):
    """Base error for ghrepo."""


class ParseError(GHRepoError, ValueError):
    """Raised when a string cannot be turned into a GitHub repository."""

    what = "repository spec"

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"invalid GitHub {self.what}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MalformedInputError(ParseError):
    """Raised when the input matches none of the recognized shapes."""


class InvalidOwnerError(ParseError):
    """Raised when an owner fails the owner grammar."""

    what = "repository owner"


class InvalidNameError(ParseError):
    """Raised when a repository name fails the name grammar."""

    what = "repository name"


class UnsupportedHostError(ParseError):
    """Raised for URL syntax with an unknown scheme or a non-GitHub host."""

    what = "host or scheme"


class LocalRepoError(GHRepoError):
    """Base error for failures while inspecting a local git repository."""


class GitExecutionError(LocalRepoError):
    """Raised when git could not be run at all."""

    def __init__(self, cmd: list[str], error: BaseException) -> None:
        self.cmd = cmd
        super().__init__(f"failed to execute Git command: {error}")


class GitCommandError(LocalRepoError):
    """Raised when git exits with a nonzero status."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Git command exited with status {returncode}: {' '.join(cmd)}")


class GitOutputError(LocalRepoError):
    """Raised when git's output cannot be decoded."""

    def __init__(self, error: UnicodeDecodeError) -> None:
        super().__init__(f"failed to decode output from Git command: {error}")


class CurdirError(LocalRepoError):
    """Raised when the current directory cannot be determined."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"could not determine current directory: {error}")


class DetachedHeadError(LocalRepoError):
    """Raised when the repository is in a detached HEAD state."""

    def __init__(self) -> None:
        super().__init__("Git repository is in a detached HEAD state")


class NoSuchRemoteError(LocalRepoError):
    """Raised when the requested remote does not exist."""

    def __init__(self, remote: str) -> None:
        self.remote = remote
        super().__init__(f"no such remote in Git repository: {remote!r}")


class NoUpstreamError(LocalRepoError):
    """Raised when a branch has no upstream remote configured."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(f"no upstream remote configured for Git branch: {branch!r}")


class InvalidRemoteURLError(LocalRepoError):
    """Raised when a remote's URL is not a GitHub repository URL."""

    def __init__(self, url: str, error: ParseError) -> None:
        self.url = url
        super().__init__(f"repository remote URL is not a GitHub URL: {error}")
