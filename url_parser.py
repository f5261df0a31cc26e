"""Shape detection for GitHub repository specifiers and URLs.

Recognized shapes, in priority order:

  - ``NAME`` (only when the caller supplies a default owner)
  - ``OWNER/NAME``
  - ``http[s]://[<user>[:<password>]@][www.]github.com/OWNER/NAME[.git][/...]``
  - ``http[s]://api.github.com/repos/OWNER/NAME``
  - ``git://github.com/OWNER/NAME[.git]``
  - ``ssh://git@github.com/OWNER/NAME[.git]``
  - ``git@github.com:OWNER/NAME[.git]``

The scheme-less forms ``[www.]github.com/OWNER/NAME`` and
``api.github.com/repos/OWNER/NAME`` are accepted too. Schemes and hosts are
matched case-insensitively; everything else is case-sensitive. Owner and name
are returned unvalidated apart from the ``.git`` suffix being stripped.
"""

from __future__ import annotations

import logging
import re
import string
from typing import Iterable
from urllib.parse import unquote

from config import get_github_hosts
from errors import MalformedInputError, UnsupportedHostError

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"([A-Za-z][A-Za-z0-9+.-]*)://")
_SCP_RE = re.compile(r"([^@/:]+)@([^@/:]*):")
_HOST_RE = re.compile(r"[A-Za-z0-9.-]+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# RFC 3986 section 3.2.1: unreserved / pct-encoded / sub-delims / ":"
_USERINFO_CHARS = frozenset(string.ascii_letters + string.digits + "-._~!$&'()*+,;=%:")

# Markers that rule out the bare NAME and OWNER/NAME shapes
_URL_MARKERS = ("@", ":")

SSH_USER = "git"
GIT_SUFFIX = ".git"


def strip_git_suffix(name: str) -> str:
    """Remove a single trailing ``.git`` from a repository name."""
    if name.endswith(GIT_SUFFIX):
        return name[: -len(GIT_SUFFIX)]
    return name


def extract_owner_name(
    s: str,
    *,
    default_owner: str | None = None,
    allow_spec: bool = True,
    hosts: Iterable[str] | None = None,
) -> tuple[str, str]:
    """Classify ``s`` and pull out its owner and repository name.

    Args:
        s: The raw input, taken literally (whitespace is not trimmed).
        default_owner: Owner to pair with a bare repository name. Bare names
            are rejected when this is None.
        allow_spec: Whether the ``NAME`` and ``OWNER/NAME`` shapes are
            accepted. False restricts parsing to URLs.
        hosts: Hostnames accepted as GitHub. Defaults to the configured hosts.

    Returns:
        ``(owner, name)`` with any trailing ``.git`` stripped from the name.

    Raises:
        MalformedInputError: No recognized shape matched.
        UnsupportedHostError: URL syntax with an unknown scheme or host.
    """
    known_hosts = _normalize_hosts(hosts)

    m = _SCHEME_RE.match(s)
    if m:
        scheme = m.group(1).lower()
        rest = s[m.end():]
        if scheme in ("http", "https"):
            return _parse_http(s, rest, known_hosts)
        if scheme == "git":
            return _parse_git(s, rest, known_hosts)
        if scheme == "ssh":
            return _parse_ssh(s, rest, known_hosts)
        raise UnsupportedHostError(s, f"unsupported scheme {m.group(1)!r}")

    m = _SCP_RE.match(s)
    if m:
        return _parse_scp(s, m, known_hosts)

    has_markers = any(marker in s for marker in _URL_MARKERS)

    if "/" not in s:
        if not allow_spec or has_markers:
            raise MalformedInputError(s)
        if default_owner is None:
            raise MalformedInputError(s, "bare repository name requires a default owner")
        logger.debug("Parsed %r as a bare repository name", s)
        return default_owner, strip_git_suffix(s)

    if s.count("/") == 1 and not has_markers:
        if not allow_spec:
            raise MalformedInputError(s)
        owner, name = s.split("/")
        if not owner or not name:
            raise MalformedInputError(s)
        logger.debug("Parsed %r as an owner/name specifier", s)
        return owner, strip_git_suffix(name)

    return _parse_schemeless(s, known_hosts)


def _normalize_hosts(hosts: Iterable[str] | None) -> tuple[str, ...]:
    if hosts is None:
        hosts = get_github_hosts()
    return tuple(h.lower() for h in hosts)


def _check_host(s: str, host: str, hosts: tuple[str, ...]) -> str:
    """Return the lowercased host, or raise if it is not a GitHub host."""
    if not _HOST_RE.fullmatch(host):
        raise MalformedInputError(s)
    lowered = host.lower()
    if lowered not in hosts:
        raise UnsupportedHostError(s, f"unsupported host {host!r}")
    return lowered


def _split_exact(s: str, path: str) -> tuple[str, str]:
    """Split a path that must be exactly ``OWNER/NAME[.git]``."""
    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        raise MalformedInputError(s)
    owner, name = parts
    return owner, strip_git_suffix(name)


def _split_web_path(s: str, path: str) -> tuple[str, str]:
    """Split ``OWNER/NAME[.git][/...]``, ignoring anything past the name."""
    for delim in ("?", "#"):
        path = path.split(delim, 1)[0]
    parts = path.split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise MalformedInputError(s)
    return parts[0], strip_git_suffix(parts[1])


def _split_api_path(s: str, path: str) -> tuple[str, str]:
    """Split ``repos/OWNER/NAME``; no suffix or trailing slash is allowed."""
    parts = path.split("/")
    if len(parts) != 3 or parts[0] != "repos" or not parts[1] or not parts[2]:
        raise MalformedInputError(s)
    return parts[1], parts[2]


def _decode_userinfo(s: str, userinfo: str) -> tuple[str, str | None]:
    """Percent-decode a URL's ``user[:password]`` field."""
    if not set(userinfo) <= _USERINFO_CHARS or _BAD_ESCAPE_RE.search(userinfo):
        raise MalformedInputError(s, "invalid userinfo")
    user, colon, password = userinfo.partition(":")
    return unquote(user), (unquote(password) if colon else None)


def _classify_host(host: str, hosts: tuple[str, ...]) -> str | None:
    """Return "web", "api", or None for a lowercased host."""
    if host in hosts:
        return "web"
    if host.startswith("www.") and host[len("www."):] in hosts:
        return "web"
    if host.startswith("api.") and host[len("api."):] in hosts:
        return "api"
    return None


def _parse_http(s: str, rest: str, hosts: tuple[str, ...]) -> tuple[str, str]:
    authority, sep, path = rest.partition("/")
    userinfo, at, host = authority.rpartition("@") if "@" in authority else ("", "", authority)
    if at and "@" in userinfo:
        raise MalformedInputError(s, "invalid userinfo")
    if not sep or not host or not _HOST_RE.fullmatch(host):
        raise MalformedInputError(s)

    kind = _classify_host(host.lower(), hosts)
    if kind is None:
        raise UnsupportedHostError(s, f"unsupported host {host!r}")

    if kind == "api":
        if at:
            raise MalformedInputError(s, "credentials are not accepted in API URLs")
        logger.debug("Parsed API URL for %s", host)
        return _split_api_path(s, path)

    if at:
        user, password = _decode_userinfo(s, userinfo)
        logger.debug(
            "Discarding credentials from %s URL (user=%s, password=%s)",
            host,
            "set" if user else "empty",
            "set" if password else "empty",
        )
    logger.debug("Parsed web URL for %s", host)
    return _split_web_path(s, path)


def _parse_git(s: str, rest: str, hosts: tuple[str, ...]) -> tuple[str, str]:
    host, sep, path = rest.partition("/")
    if not sep or "@" in host:
        raise MalformedInputError(s)
    _check_host(s, host, hosts)
    logger.debug("Parsed %r as a git:// URL", s)
    return _split_exact(s, path)


def _parse_ssh(s: str, rest: str, hosts: tuple[str, ...]) -> tuple[str, str]:
    authority, sep, path = rest.partition("/")
    user, at, host = authority.partition("@")
    if not sep or not at or user != SSH_USER:
        raise MalformedInputError(s)
    if ":" in host:
        raise MalformedInputError(s, "ssh:// URLs separate the host from the path with '/'")
    _check_host(s, host, hosts)
    logger.debug("Parsed %r as an ssh:// URL", s)
    return _split_exact(s, path)


def _parse_scp(s: str, m: re.Match[str], hosts: tuple[str, ...]) -> tuple[str, str]:
    user, host = m.group(1), m.group(2)
    if user != SSH_USER:
        raise MalformedInputError(s)
    _check_host(s, host, hosts)
    logger.debug("Parsed %r as an SCP-style SSH URL", s)
    return _split_exact(s, s[m.end():])


def _parse_schemeless(s: str, hosts: tuple[str, ...]) -> tuple[str, str]:
    """Handle ``[www.]github.com/OWNER/NAME`` and ``api.github.com/repos/...``."""
    host, _, path = s.partition("/")
    if not host or not _HOST_RE.fullmatch(host):
        raise MalformedInputError(s)
    kind = _classify_host(host.lower(), hosts)
    if kind is None:
        if "." in host:
            raise UnsupportedHostError(s, f"unsupported host {host!r}")
        raise MalformedInputError(s)
    logger.debug("Parsed %r as a scheme-less %s URL", s, kind)
    if kind == "api":
        return _split_api_path(s, path)
    return _split_web_path(s, path)
