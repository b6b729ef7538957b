"""Pydantic schemas for GitHub API responses.

These schemas document the slice of the GitHub REST API used to create a
repository and commit a file set through the Git data (blob/tree/commit/ref)
endpoints.

GitHub API Documentation: https://docs.github.com/en/rest/git
"""

from pydantic import BaseModel, ConfigDict, Field


class GitHubAccount(BaseModel):
    """GitHub account (user or organization)."""

    model_config = ConfigDict(extra="allow")

    login: str = Field(..., description="Account username/org name")
    id: int | None = Field(None, description="Numeric account ID")
    type: str | None = Field(None, description="Account type: 'User' or 'Organization'")


class GitHubRepository(BaseModel):
    """GitHub repository info.

    Returned from POST /user/repos (create) or GET /repos/{owner}/{repo}.
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Repository ID")
    name: str = Field(..., description="Repository name")
    full_name: str = Field(..., description="Full name: owner/repo")
    html_url: str = Field(..., description="Web URL for the repository")
    clone_url: str | None = Field(None, description="HTTPS clone URL")
    private: bool = Field(False, description="Whether repo is private")
    description: str | None = Field(None, description="Repository description")
    owner: GitHubAccount | None = Field(None, description="Repository owner")
    default_branch: str = Field("main", description="Default branch name")


class GitObject(BaseModel):
    """Pointer to a git object as embedded in ref responses."""

    model_config = ConfigDict(extra="allow")

    sha: str
    type: str | None = None
    url: str | None = None


class GitRef(BaseModel):
    """Returned from GET /repos/{owner}/{repo}/git/ref/heads/{branch}."""

    model_config = ConfigDict(extra="allow")

    ref: str = Field(..., description="Fully qualified ref, e.g. refs/heads/main")
    object: GitObject


class GitCreatedObject(BaseModel):
    """Minimal response of blob, tree and commit creation endpoints."""

    model_config = ConfigDict(extra="allow")

    sha: str
    url: str | None = None


class GitTreeEntry(BaseModel):
    """Entry of a tree creation request."""

    path: str
    sha: str
    mode: str = "100644"
    type: str = "blob"
