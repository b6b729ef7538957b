"""Vercel REST client for deploying forged web apps."""

import re
from typing import Any

import httpx

from appforger.config import Settings, get_settings
from appforger.logging_config import get_logger
from appforger.schemas.vercel import (
    DeploymentRequest,
    DeploymentResult,
    DeploymentStatus,
    VercelDeployment,
    VercelDeploymentSummary,
    VercelProject,
)

logger = get_logger(__name__)

GITHUB_REPO_PATTERN = re.compile(r"github\.com/([^/]+)/([^/]+)")
PROJECT_NAME_MAX_LENGTH = 50
DEPLOY_BRANCH = "main"

_STATE_MAP = {
    "READY": DeploymentStatus.READY,
    "BUILDING": DeploymentStatus.BUILDING,
    "INITIALIZING": DeploymentStatus.BUILDING,
    "QUEUED": DeploymentStatus.BUILDING,
    "ERROR": DeploymentStatus.ERROR,
    "CANCELED": DeploymentStatus.ERROR,
}


class VercelAPIError(Exception):
    """Non-2xx response from the Vercel API."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Vercel API error: {status_code} - {body}")


class VercelNotConfiguredError(RuntimeError):
    pass


def sanitize_project_name(name: str) -> str:
    """Turn a display name into a Vercel project slug.

    >>> sanitize_project_name("My Cool App! v2")
    'my-cool-app-v2'
    """
    slug = re.sub(r"[^a-z0-9-]", "-", name.lower())
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")[:PROJECT_NAME_MAX_LENGTH].rstrip("-")


def parse_repo_path(repo_url: str) -> str:
    """Extract "owner/repo" from a GitHub URL.

    Raises:
        ValueError: If the URL is not a GitHub repository URL.
    """
    match = GITHUB_REPO_PATTERN.search(repo_url)
    if not match:
        raise ValueError(f"Invalid GitHub repository URL: {repo_url}")
    owner, repo = match.groups()
    return f"{owner}/{repo.removesuffix('.git')}"


def map_deployment_state(state: str | None) -> DeploymentStatus:
    return _STATE_MAP.get((state or "").upper(), DeploymentStatus.PENDING)


class VercelClient:
    """Client for the Vercel API.

    Deployment is optional: without a token every high-level call is a no-op
    returning None, and callers are expected to check is_configured() first.
    """

    def __init__(
        self,
        token: str | None = None,
        team_id: str | None = None,
        api_url: str = "https://api.vercel.com",
        timeout: float = 30.0,
    ):
        self.token = token
        self.team_id = team_id
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.token)

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        if not self.token:
            raise VercelNotConfiguredError("VERCEL_TOKEN is not configured")

        query = dict(params or {})
        if self.team_id:
            query["teamId"] = self.team_id

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.request(
                method,
                f"{self.api_url}{endpoint}",
                headers={"Authorization": f"Bearer {self.token}"},
                json=json,
                params=query or None,
            )

        if not resp.is_success:
            raise VercelAPIError(resp.status_code, resp.text)

        if resp.status_code == httpx.codes.NO_CONTENT:
            return {}
        return resp.json()

    async def create_project(self, name: str, repo_path: str) -> VercelProject:
        data = await self._request(
            "POST",
            "/v10/projects",
            json={
                "name": name,
                "gitRepository": {"type": "github", "repo": repo_path},
                "framework": "nextjs",
                "buildCommand": "npm run build",
                "installCommand": "npm install",
                "outputDirectory": ".next",
            },
        )
        return VercelProject.model_validate(data)

    async def get_project(self, id_or_name: str) -> VercelProject | None:
        try:
            data = await self._request("GET", f"/v9/projects/{id_or_name}")
        except VercelAPIError as e:
            logger.debug("vercel_project_lookup_failed", project=id_or_name, error=str(e))
            return None
        return VercelProject.model_validate(data)

    async def create_deployment(self, name: str, repo_path: str, ref: str) -> VercelDeployment:
        data = await self._request(
            "POST",
            "/v13/deployments",
            json={
                "name": name,
                "gitSource": {"type": "github", "repo": repo_path, "ref": ref},
                "target": "production",
            },
        )
        return VercelDeployment.model_validate(data)

    async def get_deployment(self, deployment_id: str) -> VercelDeployment | None:
        try:
            data = await self._request("GET", f"/v13/deployments/{deployment_id}")
        except VercelAPIError as e:
            logger.debug(
                "vercel_deployment_lookup_failed", deployment_id=deployment_id, error=str(e)
            )
            return None
        return VercelDeployment.model_validate(data)

    async def list_deployments(
        self, project_id: str, limit: int = 5
    ) -> list[VercelDeploymentSummary]:
        data = await self._request(
            "GET", "/v6/deployments", params={"projectId": project_id, "limit": limit}
        )
        return [VercelDeploymentSummary.model_validate(d) for d in data.get("deployments", [])]

    async def _ensure_project(self, name: str, repo_path: str) -> VercelProject:
        """Register the project, reusing an existing one with the same name."""
        try:
            return await self.create_project(name, repo_path)
        except VercelAPIError:
            existing = await self.get_project(name)
            if existing is None:
                raise
            logger.info("vercel_project_reused", project=name, project_id=existing.id)
            return existing

    async def deploy(self, request: DeploymentRequest) -> DeploymentResult | None:
        """Register the project and start a deployment from the repository.

        Never raises: any failure is logged and reported as None.
        """
        if not self.is_configured():
            logger.info("vercel_not_configured_skipping_deploy")
            return None

        try:
            repo_path = parse_repo_path(request.repo_url)
            name = sanitize_project_name(request.project_name)

            project = await self._ensure_project(name, repo_path)
            deployment = await self.create_deployment(name, repo_path, DEPLOY_BRANCH)

            result = DeploymentResult(
                deployment_id=deployment.id,
                preview_url=f"https://{deployment.url}",
                status=map_deployment_state(deployment.ready_state or deployment.state),
            )
            logger.info(
                "vercel_deployment_created",
                project=name,
                project_id=project.id,
                deployment_id=result.deployment_id,
                status=result.status.value,
            )
            return result
        except Exception as e:
            logger.error(
                "vercel_deploy_failed",
                repo_url=request.repo_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    async def get_deployment_status(self, deployment_id: str) -> DeploymentResult | None:
        if not self.is_configured():
            return None

        deployment = await self.get_deployment(deployment_id)
        if deployment is None:
            return None
        return DeploymentResult(
            deployment_id=deployment.id,
            preview_url=f"https://{deployment.url}",
            status=map_deployment_state(deployment.ready_state or deployment.state),
        )


def create_vercel_client(settings: Settings | None = None) -> VercelClient:
    settings = settings or get_settings()
    return VercelClient(
        token=settings.vercel_token,
        team_id=settings.vercel_team_id,
        api_url=settings.vercel_api_url,
    )
