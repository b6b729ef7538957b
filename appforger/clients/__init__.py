"""Clients for external services."""

from .github import GitHubAPIError, GitHubClient, create_github_client
from .llm import LLMFactory
from .vercel import VercelAPIError, VercelClient, create_vercel_client

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "LLMFactory",
    "VercelAPIError",
    "VercelClient",
    "create_github_client",
    "create_vercel_client",
]
