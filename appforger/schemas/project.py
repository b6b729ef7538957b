"""Project and forge HTTP schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from appforger.models import ProjectType


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str
    description: str | None = None
    project_type: str | None = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name is required")
        return v

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("project_type")
    @classmethod
    def default_project_type(cls, v: str | None) -> str:
        # Unknown types fall back to mobile
        valid = {t.value for t in ProjectType}
        return v if v in valid else ProjectType.MOBILE.value


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    name: str
    description: str | None = None
    project_type: str
    status: str
    repo_url: str | None = None
    preview_url: str | None = None
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectEnvelope(BaseModel):
    project: ProjectRead


class ForgeStartRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_id: str | None = Field(None, alias="projectId")


class ForgeStartResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    project_id: str = Field(..., serialization_alias="projectId")


class ForgeProjectStatus(BaseModel):
    """Project slice of the status read model."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    status: str
    repo_url: str | None = None
    preview_url: str | None = None
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ForgeLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    message: str
    level: str
    created_at: datetime | None = None


class ForgeStatusRead(BaseModel):
    """Polled by the presentation client until a terminal status is observed."""

    project: ForgeProjectStatus
    logs: list[ForgeLogRead]


class InstructionCreate(BaseModel):
    # Blank content is rejected by the route with 400
    content: str | None = None


class InstructionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: str
    role: str
    content: str
    created_at: datetime | None = None


class InstructionCreated(BaseModel):
    ok: bool = True
    instruction: InstructionRead


class InstructionHistory(BaseModel):
    """Instruction conversation, oldest first."""

    instructions: list[InstructionRead]
