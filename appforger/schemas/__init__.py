"""Pydantic schemas for external APIs and the HTTP surface."""

from .generation import AppGenerationRequest, FileSet, GeneratedApp
from .github import GitCreatedObject, GitHubRepository, GitRef, GitTreeEntry
from .project import (
    ForgeLogRead,
    ForgeProjectStatus,
    ForgeStartRequest,
    ForgeStartResponse,
    ForgeStatusRead,
    InstructionCreate,
    InstructionCreated,
    InstructionHistory,
    InstructionRead,
    ProjectCreate,
    ProjectEnvelope,
    ProjectRead,
)
from .vercel import (
    DeploymentRequest,
    DeploymentResult,
    DeploymentStatus,
    VercelDeployment,
    VercelDeploymentSummary,
    VercelProject,
)

__all__ = [
    "AppGenerationRequest",
    "DeploymentRequest",
    "DeploymentResult",
    "DeploymentStatus",
    "FileSet",
    "ForgeLogRead",
    "ForgeProjectStatus",
    "ForgeStartRequest",
    "ForgeStartResponse",
    "ForgeStatusRead",
    "GeneratedApp",
    "GitCreatedObject",
    "GitHubRepository",
    "GitRef",
    "GitTreeEntry",
    "InstructionCreate",
    "InstructionCreated",
    "InstructionHistory",
    "InstructionRead",
    "ProjectCreate",
    "ProjectEnvelope",
    "ProjectRead",
    "VercelDeployment",
    "VercelDeploymentSummary",
    "VercelProject",
]
