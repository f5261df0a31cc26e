"""Unit tests for the JSON output models."""

from ghrepo import GitHubRepo
from models import RepoDetails


def test_repo_details_from_repo() -> None:
    details = RepoDetails.from_repo(GitHubRepo("octocat", "repository"))
    assert details.model_dump() == {
        "owner": "octocat",
        "name": "repository",
        "fullname": "octocat/repository",
        "api_url": "https://api.github.com/repos/octocat/repository",
        "clone_url": "https://github.com/octocat/repository.git",
        "git_url": "git://github.com/octocat/repository.git",
        "html_url": "https://github.com/octocat/repository",
        "ssh_url": "git@github.com:octocat/repository.git",
    }


def test_repo_details_field_order() -> None:
    details = RepoDetails.from_repo(GitHubRepo("octocat", "repository"))
    assert list(details.model_dump()) == [
        "owner",
        "name",
        "fullname",
        "api_url",
        "clone_url",
        "git_url",
        "html_url",
        "ssh_url",
    ]


def test_repo_details_json_round_trip() -> None:
    repo = GitHubRepo("octocat", "Hello-World")
    details = RepoDetails.from_repo(repo)
    restored = RepoDetails.model_validate_json(details.model_dump_json())
    assert restored == details
    assert restored.to_repo() == repo
