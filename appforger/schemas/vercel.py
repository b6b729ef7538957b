"""Pydantic schemas for the Vercel REST API and normalized deployment results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DeploymentStatus(str, Enum):
    """Deployment state normalized across provider states."""

    PENDING = "pending"
    BUILDING = "building"
    READY = "ready"
    ERROR = "error"


class VercelProject(BaseModel):
    """Returned from POST /v10/projects and GET /v9/projects/{idOrName}."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str


class VercelDeployment(BaseModel):
    """Returned from POST /v13/deployments and GET /v13/deployments/{id}."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    url: str
    ready_state: str | None = Field(None, alias="readyState")
    state: str | None = None


class VercelDeploymentSummary(BaseModel):
    """Item of GET /v6/deployments."""

    model_config = ConfigDict(extra="allow")

    uid: str
    url: str
    state: str | None = None
    created_at: int | None = Field(None, alias="createdAt")


class DeploymentRequest(BaseModel):
    repo_url: str
    project_name: str
    framework: str = "nextjs"


class DeploymentResult(BaseModel):
    """Outcome of a deploy call."""

    deployment_id: str
    preview_url: str
    status: DeploymentStatus
