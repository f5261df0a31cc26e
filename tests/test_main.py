"""Tests for the HTTP lookup service."""

import pytest
from fastapi.testclient import TestClient

from ghrepo import GitHubRepo, __version__
from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client, monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("GHREPO_ROOT", str(tmp_path))
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__, "root": str(tmp_path)}


def test_parse_spec(client) -> None:
    response = client.get("/api/parse", params={"spec": "git@github.com:octocat/Hello-World.git"})
    assert response.status_code == 200
    body = response.json()
    assert body["fullname"] == "octocat/Hello-World"
    assert body["api_url"] == "https://api.github.com/repos/octocat/Hello-World"


def test_parse_spec_with_default_owner(client) -> None:
    response = client.get("/api/parse", params={"spec": "Hello-World", "default_owner": "octocat"})
    assert response.status_code == 200
    assert response.json()["html_url"] == "https://github.com/octocat/Hello-World"


@pytest.mark.parametrize(
    "spec",
    ["Hello-World", "-octocat/repo", "https://gitlab.com/octocat/repo", "ssh://git@github.com:octocat/repo"],
)
def test_parse_spec_invalid(client, spec: str) -> None:
    response = client.get("/api/parse", params={"spec": spec})
    assert response.status_code == 422
    assert response.json()["detail"].startswith("invalid GitHub ")


def test_local_remote(client, repo_maker, monkeypatch) -> None:
    repo_maker.add_remote("origin", GitHubRepo("octocat", "repository").ssh_url)
    repo_maker.add_remote("upstream", GitHubRepo("sourcedog", "repository").html_url)
    monkeypatch.setenv("GHREPO_ROOT", str(repo_maker.path.parent))

    response = client.get("/api/local", params={"path": repo_maker.path.name})
    assert response.status_code == 200
    assert response.json()["fullname"] == "octocat/repository"

    response = client.get("/api/local", params={"path": repo_maker.path.name, "remote": "upstream"})
    assert response.status_code == 200
    assert response.json()["fullname"] == "sourcedog/repository"


def test_local_remote_missing(client, repo_maker, monkeypatch) -> None:
    monkeypatch.setenv("GHREPO_ROOT", str(repo_maker.path))
    response = client.get("/api/local", params={"remote": "nope"})
    assert response.status_code == 404


def test_local_remote_not_github(client, repo_maker, monkeypatch) -> None:
    repo_maker.add_remote("origin", "https://gitlab.com/octocat/repository.git")
    monkeypatch.setenv("GHREPO_ROOT", str(repo_maker.path))
    response = client.get("/api/local")
    assert response.status_code == 422


def test_local_remote_outside_root(client, tmp_path, monkeypatch) -> None:
    root = tmp_path / "root"
    root.mkdir()
    monkeypatch.setenv("GHREPO_ROOT", str(root))
    response = client.get("/api/local", params={"path": "../elsewhere"})
    assert response.status_code == 403


def test_local_remote_not_a_repository(client, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GHREPO_ROOT", str(tmp_path))
    response = client.get("/api/local", params={"path": "missing"})
    assert response.status_code == 500
