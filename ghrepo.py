"""GitHub repository identity: an owner/name pair and its canonical URLs."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from errors import InvalidNameError, InvalidOwnerError, MalformedInputError
from url_parser import extract_owner_name
from validation import is_valid_name, is_valid_owner

__version__ = "0.1.0"


@functools.total_ordering
@dataclass(frozen=True, repr=False)
class GitHubRepo:
    """A validated GitHub repository owner and name.

    Instances are immutable and always hold a valid owner and name. They
    compare equal when owner and name match exactly, and sort by their
    ``owner/name`` full name.
    """

    owner: str
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.owner, str) or not is_valid_owner(self.owner):
            raise InvalidOwnerError(str(self.owner))
        if not isinstance(self.name, str) or not is_valid_name(self.name):
            raise InvalidNameError(str(self.name))

    def __str__(self) -> str:
        return self.fullname

    def __repr__(self) -> str:
        return f"GitHubRepo({self.fullname!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GitHubRepo):
            return NotImplemented
        return self.fullname < other.fullname

    @property
    def fullname(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        """URL of the repository's web interface."""
        return f"https://github.com/{self.fullname}"

    @property
    def api_url(self) -> str:
        """Base URL for the repository in the GitHub REST API."""
        return f"https://api.github.com/repos/{self.fullname}"

    @property
    def clone_url(self) -> str:
        """URL for cloning over HTTPS."""
        return f"https://github.com/{self.fullname}.git"

    @property
    def git_url(self) -> str:
        """URL for cloning over the native git protocol."""
        return f"git://github.com/{self.fullname}.git"

    @property
    def ssh_url(self) -> str:
        """URL for cloning over SSH."""
        return f"git@github.com:{self.fullname}.git"

    def to_dict(self) -> dict[str, str]:
        return {"owner": self.owner, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GitHubRepo:
        """Build a repository from a mapping with ``owner`` and ``name`` keys."""
        owner = data.get("owner")
        name = data.get("name")
        if not isinstance(owner, str) or not isinstance(name, str):
            raise MalformedInputError(repr(dict(data)), "expected string 'owner' and 'name' fields")
        return cls(owner, name)

    @classmethod
    def parse(
        cls,
        s: str,
        default_owner: str | None = None,
        hosts: Iterable[str] | None = None,
    ) -> GitHubRepo:
        return parse_repo_spec(s, default_owner=default_owner, hosts=hosts)

    @classmethod
    def from_url(cls, s: str, hosts: Iterable[str] | None = None) -> GitHubRepo:
        return parse_github_url(s, hosts=hosts)


def parse_repo_spec(
    s: str,
    default_owner: str | None = None,
    hosts: Iterable[str] | None = None,
) -> GitHubRepo:
    """Parse a repository specifier or URL.

    Accepts ``OWNER/NAME``, any recognized GitHub URL, and, when
    ``default_owner`` is given, a bare ``NAME``.

    Raises:
        MalformedInputError: ``s`` matches no recognized shape.
        UnsupportedHostError: ``s`` is a URL for something other than GitHub.
        InvalidOwnerError: The extracted owner (or ``default_owner``) is invalid.
        InvalidNameError: The extracted repository name is invalid.
    """
    owner, name = extract_owner_name(s, default_owner=default_owner, hosts=hosts)
    return GitHubRepo(owner, name)


def parse_github_url(s: str, hosts: Iterable[str] | None = None) -> GitHubRepo:
    """Parse a GitHub repository URL; bare specifiers are rejected."""
    owner, name = extract_owner_name(s, allow_spec=False, hosts=hosts)
    return GitHubRepo(owner, name)
