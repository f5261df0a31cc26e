import shutil
import subprocess
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("GH_HOST", "GHREPO_ROOT", "GHREPO_GIT_TIMEOUT", "GHREPO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class RepoMaker:
    """Builds throwaway git repositories for tests."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def run(self, *args: str) -> None:
        subprocess.run(
            [
                "git",
                "-c",
                "user.name=Test User",
                "-c",
                "user.email=test@example.com",
                "-c",
                "commit.gpgsign=false",
                *args,
            ],
            cwd=self.path,
            check=True,
            capture_output=True,
        )

    def init(self, branch: str = "trunk") -> None:
        self.run("-c", f"init.defaultBranch={branch}", "init")

    def add_remote(self, remote: str, url: str) -> None:
        self.run("remote", "add", remote, url)

    def set_upstream(self, branch: str, remote: str) -> None:
        self.run("config", f"branch.{branch}.remote", remote)

    def detach(self) -> None:
        (self.path / "file.txt").write_text("This is test text\n")
        self.run("add", "file.txt")
        self.run("commit", "-m", "Add a file")
        (self.path / "file2.txt").write_text("This is also text\n")
        self.run("add", "file2.txt")
        self.run("commit", "-m", "Add another file")
        self.run("checkout", "HEAD^")


@pytest.fixture
def repo_maker(tmp_path: Path) -> RepoMaker:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    path = tmp_path / "checkout"
    path.mkdir()
    maker = RepoMaker(path)
    maker.init()
    return maker
