"""Schemas exchanged with the source generator."""

from pydantic import BaseModel, Field

from appforger.models import ProjectType

# Relative path -> full text content
FileSet = dict[str, str]


class AppGenerationRequest(BaseModel):
    project_name: str
    description: str
    app_type: ProjectType


class GeneratedApp(BaseModel):
    """Validated generator output."""

    files: FileSet
    features: list[str] = Field(default_factory=list)
    app_name: str | None = None
