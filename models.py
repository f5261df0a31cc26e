"""Pydantic models for ghrepo's JSON output."""

from __future__ import annotations

from pydantic import BaseModel

from ghrepo import GitHubRepo


class RepoDetails(BaseModel):
    """A GitHub repository with all of its canonical URLs."""

    owner: str
    name: str
    fullname: str
    api_url: str
    clone_url: str
    git_url: str
    html_url: str
    ssh_url: str

    @classmethod
    def from_repo(cls, repo: GitHubRepo) -> RepoDetails:
        return cls(
            owner=repo.owner,
            name=repo.name,
            fullname=repo.fullname,
            api_url=repo.api_url,
            clone_url=repo.clone_url,
            git_url=repo.git_url,
            html_url=repo.html_url,
            ssh_url=repo.ssh_url,
        )

    def to_repo(self) -> GitHubRepo:
        return GitHubRepo(self.owner, self.name)


class HealthStatus(BaseModel):
    """Response body for the health check."""

    status: str
    version: str
    root: str
