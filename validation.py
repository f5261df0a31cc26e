"""Validation rules for GitHub owner and repository names."""

from __future__ import annotations

import re

OWNER_MAX_LENGTH = 39
NAME_MAX_LENGTH = 100

# Alphanumeric runs joined by single hyphens
_OWNER_RE = re.compile(r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*")
_NAME_RE = re.compile(r"[A-Za-z0-9._-]+")

# GitHub refuses these as user or organization names
RESERVED_OWNERS = frozenset({"none"})


def is_valid_owner(s: str) -> bool:
    """Test whether ``s`` is a valid GitHub user or organization name.

    Owners may only contain ASCII alphanumerics and single hyphens, cannot
    begin or end with a hyphen, and are at most 39 characters long.
    """
    if not 0 < len(s) <= OWNER_MAX_LENGTH:
        return False
    if s.lower() in RESERVED_OWNERS:
        return False
    return _OWNER_RE.fullmatch(s) is not None


def is_valid_name(s: str) -> bool:
    """Test whether ``s`` is a valid GitHub repository name.

    Names are 1-100 characters drawn from ASCII alphanumerics, hyphens,
    underscores and periods. ``.`` and ``..`` are reserved, and names ending
    in ``.git`` (any case) are forbidden.
    """
    if not 0 < len(s) <= NAME_MAX_LENGTH:
        return False
    if s in (".", "..") or s.lower().endswith(".git"):
        return False
    return _NAME_RE.fullmatch(s) is not None


def is_valid_repository(s: str) -> bool:
    """Test whether ``s`` is a repository full name of the form ``owner/name``."""
    parts = s.split("/")
    if len(parts) != 2:
        return False
    owner, name = parts
    return is_valid_owner(owner) and is_valid_name(name)
