"""Command line interface: show the GitHub repository of a local checkout."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from config import DEFAULT_REMOTE, get_log_level
from errors import GitCommandError, LocalRepoError, NoSuchRemoteError
from ghrepo import __version__
from local_repo import LocalRepo
from models import RepoDetails

logger = logging.getLogger(__name__)

PROG = "ghrepo"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Show current GitHub repository",
    )
    parser.add_argument("-J", "--json", action="store_true", help="Output JSON")
    parser.add_argument(
        "-r",
        "--remote",
        default=DEFAULT_REMOTE,
        help=f"Parse the GitHub URL from the given remote [default: {DEFAULT_REMOTE}]",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity [default: $GHREPO_LOG_LEVEL or WARNING]",
    )
    parser.add_argument("-V", "--version", action="version", version=f"{PROG} {__version__}")
    parser.add_argument("dirpath", nargs="?", default=None, help="Repository path [default: .]")
    return parser


def render(details: RepoDetails, as_json: bool) -> str:
    if as_json:
        return json.dumps(details.model_dump(), indent=4)
    return details.fullname


def _error(message: str) -> None:
    print(f"{PROG}: {message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level or get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        local = LocalRepo(args.dirpath) if args.dirpath is not None else LocalRepo.for_cwd()
        logger.debug("Inspecting remote %r of %s", args.remote, local.path)
        repo = local.github_remote(args.remote)
    except GitCommandError as e:
        if e.stderr:
            print(e.stderr, file=sys.stderr)
        _error(str(e))
        return e.returncode if e.returncode > 0 else 1
    except NoSuchRemoteError as e:
        _error(str(e))
        return 2
    except LocalRepoError as e:
        _error(str(e))
        return 1

    print(render(RepoDetails.from_repo(repo), args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
