"""GitHub REST client for repository creation and atomic multi-file commits."""

import asyncio
import base64
from typing import Any

import httpx

from appforger.config import ConfigurationError, Settings, get_settings
from appforger.logging_config import get_logger
from appforger.schemas.github import (
    GitCreatedObject,
    GitHubAccount,
    GitHubRepository,
    GitRef,
    GitTreeEntry,
)

logger = get_logger(__name__)


class GitHubAPIError(Exception):
    """Non-2xx response from the GitHub API."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"GitHub API error: {status_code} - {body}")


class GitHubClient:
    """Client for token-authenticated GitHub interactions."""

    def __init__(
        self,
        token: str,
        owner: str,
        api_url: str = "https://api.github.com",
        api_version: str = "2022-11-28",
        timeout: float = 30.0,
    ):
        self.token = token
        self.owner = owner
        self.api_url = api_url.rstrip("/")
        self.api_version = api_version
        self.timeout = timeout

    def get_owner(self) -> str:
        return self.owner

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.api_version,
        }

    async def _request(
        self, method: str, endpoint: str, json: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Perform a request and return the decoded JSON body.

        Raises:
            GitHubAPIError: On any non-2xx response, carrying status and raw body.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.request(
                method,
                f"{self.api_url}{endpoint}",
                headers=self._headers(),
                json=json,
            )

        if not resp.is_success:
            logger.warning(
                "github_request_failed",
                method=method,
                endpoint=endpoint,
                status_code=resp.status_code,
            )
            raise GitHubAPIError(resp.status_code, resp.text)

        if resp.status_code == httpx.codes.NO_CONTENT:
            return {}
        return resp.json()

    async def get_authenticated_user(self) -> GitHubAccount:
        data = await self._request("GET", "/user")
        return GitHubAccount.model_validate(data)

    async def create_repository(
        self, name: str, description: str = "", private: bool = False
    ) -> GitHubRepository:
        """Create a repository for the authenticated user.

        The repository is initialised with a README so the default branch exists
        before the first commit. A name collision surfaces as GitHubAPIError (422).
        """
        data = await self._request(
            "POST",
            "/user/repos",
            json={
                "name": name,
                "description": description,
                "private": private,
                "auto_init": True,
            },
        )
        repo = GitHubRepository.model_validate(data)
        logger.info("github_repo_created", name=name, repo_url=repo.html_url)
        return repo

    async def get_repository(self, owner: str, repo: str) -> GitHubRepository:
        data = await self._request("GET", f"/repos/{owner}/{repo}")
        return GitHubRepository.model_validate(data)

    async def get_default_branch(self, owner: str, repo: str) -> str:
        data = await self._request("GET", f"/repos/{owner}/{repo}")
        return data["default_branch"]

    async def get_latest_commit_sha(self, owner: str, repo: str, branch: str) -> str:
        data = await self._request("GET", f"/repos/{owner}/{repo}/git/ref/heads/{branch}")
        return GitRef.model_validate(data).object.sha

    async def create_blob(self, owner: str, repo: str, content: str) -> str:
        data = await self._request(
            "POST",
            f"/repos/{owner}/{repo}/git/blobs",
            json={
                "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
                "encoding": "base64",
            },
        )
        return GitCreatedObject.model_validate(data).sha

    async def create_tree(
        self, owner: str, repo: str, base_tree_sha: str, entries: list[GitTreeEntry]
    ) -> str:
        """Create a tree that overlays entries on top of base_tree_sha.

        Paths not listed are inherited unchanged from the base tree.
        """
        data = await self._request(
            "POST",
            f"/repos/{owner}/{repo}/git/trees",
            json={
                "base_tree": base_tree_sha,
                "tree": [entry.model_dump() for entry in entries],
            },
        )
        return GitCreatedObject.model_validate(data).sha

    async def create_commit(
        self, owner: str, repo: str, message: str, tree_sha: str, parent_sha: str
    ) -> str:
        data = await self._request(
            "POST",
            f"/repos/{owner}/{repo}/git/commits",
            json={"message": message, "tree": tree_sha, "parents": [parent_sha]},
        )
        return GitCreatedObject.model_validate(data).sha

    async def update_ref(self, owner: str, repo: str, branch: str, commit_sha: str) -> None:
        # Non-forced: rejected if the branch moved since the parent was read
        await self._request(
            "PATCH",
            f"/repos/{owner}/{repo}/git/refs/heads/{branch}",
            json={"sha": commit_sha, "force": False},
        )

    async def commit_files(
        self, owner: str, repo: str, files: dict[str, str], message: str
    ) -> str:
        """Commit a whole file set as a single commit on the default branch.

        Blobs are created concurrently; the tree uses the parent commit as
        base_tree so existing paths are kept. Returns the new commit SHA.
        """
        branch = await self.get_default_branch(owner, repo)
        parent_sha = await self.get_latest_commit_sha(owner, repo, branch)

        paths = list(files)
        blob_shas = await asyncio.gather(
            *(self.create_blob(owner, repo, files[path]) for path in paths)
        )
        entries = [
            GitTreeEntry(path=path, sha=sha) for path, sha in zip(paths, blob_shas, strict=True)
        ]

        tree_sha = await self.create_tree(owner, repo, parent_sha, entries)
        commit_sha = await self.create_commit(owner, repo, message, tree_sha, parent_sha)
        await self.update_ref(owner, repo, branch, commit_sha)

        logger.info(
            "github_files_committed",
            owner=owner,
            repo=repo,
            branch=branch,
            file_count=len(entries),
            commit_sha=commit_sha,
        )
        return commit_sha


def create_github_client(settings: Settings | None = None) -> GitHubClient:
    """Build a client from settings.

    Raises:
        ConfigurationError: If the token or owner is not configured.
    """
    settings = settings or get_settings()
    if not settings.github_token:
        raise ConfigurationError("GITHUB_TOKEN environment variable is not set")
    if not settings.github_owner:
        raise ConfigurationError("GITHUB_OWNER environment variable is not set")
    return GitHubClient(
        token=settings.github_token,
        owner=settings.github_owner,
        api_url=settings.github_api_url,
        api_version=settings.github_api_version,
    )
