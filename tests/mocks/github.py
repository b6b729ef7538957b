from typing import Any

from appforger.clients.github import GitHubAPIError
from appforger.logging_config import get_logger
from appforger.schemas.github import GitHubAccount, GitHubRepository

logger = get_logger(__name__)


class FakeGitHubClient:
    """In-memory GitHub stand-in for orchestrator and API tests."""

    def __init__(self, owner: str = "acme"):
        self.owner = owner
        # State
        self.repos: dict[str, GitHubRepository] = {}  # name -> GitHubRepository
        self.files: dict[str, dict[str, str]] = {}  # repo name -> { path -> content }
        self.commits: list[dict[str, Any]] = []

        # Behavior Configuration
        self.create_repo_error: Exception | None = None
        self.commit_error: Exception | None = None

    def get_owner(self) -> str:
        return self.owner

    async def create_repository(
        self, name: str, description: str = "", private: bool = False
    ) -> GitHubRepository:
        if self.create_repo_error:
            raise self.create_repo_error
        if name in self.repos:
            raise GitHubAPIError(422, '{"message":"name already exists on this account"}')

        full_name = f"{self.owner}/{name}"
        repo = GitHubRepository(
            id=len(self.repos) + 1,
            name=name,
            full_name=full_name,
            html_url=f"https://github.com/{full_name}",
            clone_url=f"https://github.com/{full_name}.git",
            private=private,
            description=description,
            owner=GitHubAccount(login=self.owner),
            default_branch="main",
        )
        self.repos[name] = repo
        # auto_init leaves a README on the default branch
        self.files[name] = {"README.md": f"# {name}\n"}

        logger.info("fake_github_repo_created", name=name)
        return repo

    async def get_repository(self, owner: str, repo: str) -> GitHubRepository:
        if repo not in self.repos:
            raise GitHubAPIError(404, '{"message":"Not Found"}')
        return self.repos[repo]

    async def commit_files(
        self, owner: str, repo: str, files: dict[str, str], message: str
    ) -> str:
        if self.commit_error:
            raise self.commit_error
        if repo not in self.repos:
            raise GitHubAPIError(404, '{"message":"Not Found"}')

        self.files[repo].update(files)
        sha = f"{len(self.commits) + 1:040x}"
        self.commits.append({"owner": owner, "repo": repo, "message": message, "sha": sha})
        return sha
