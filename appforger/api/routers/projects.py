"""Projects router."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from appforger.models import ForgeProject, InstructionRole, ProjectInstruction, ProjectStatus
from appforger.schemas import (
    InstructionCreate,
    InstructionCreated,
    InstructionHistory,
    InstructionRead,
    ProjectCreate,
    ProjectEnvelope,
    ProjectRead,
)

from ..database import get_async_session
from ..dependencies import get_current_user_id

logger = structlog.get_logger()

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=ProjectEnvelope, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> ProjectEnvelope:
    """Create a new project in pending state."""
    project = ForgeProject(
        owner_id=user_id,
        name=project_in.name,
        description=project_in.description,
        project_type=project_in.project_type,
        status=ProjectStatus.PENDING.value,
    )
    db.add(project)
    await db.commit()
    await db.refresh(project)

    logger.info(
        "project_created",
        project_id=project.id,
        project_type=project.project_type,
        has_description=project.description is not None,
    )
    return ProjectEnvelope(project=ProjectRead.model_validate(project))


@router.get("", response_model=list[ProjectRead])
async def list_projects(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> list[ForgeProject]:
    """List the caller's projects, newest first."""
    query = (
        select(ForgeProject)
        .where(ForgeProject.owner_id == user_id)
        .order_by(ForgeProject.created_at.desc())
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def _get_owned_project(db: AsyncSession, project_id: str, user_id: str) -> ForgeProject:
    result = await db.execute(
        select(ForgeProject).where(ForgeProject.id == project_id, ForgeProject.owner_id == user_id)
    )
    project = result.scalar_one_or_none()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> ForgeProject:
    """Get one of the caller's projects by ID."""
    return await _get_owned_project(db, project_id, user_id)


@router.post(
    "/{project_id}/instructions",
    response_model=InstructionCreated,
    status_code=status.HTTP_201_CREATED,
)
async def add_instruction(
    project_id: str,
    body: InstructionCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> InstructionCreated:
    """Append a user instruction to the project's refinement history."""
    await _get_owned_project(db, project_id, user_id)

    if not body.content or not body.content.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing instruction")

    instruction = ProjectInstruction(
        project_id=project_id, role=InstructionRole.USER.value, content=body.content
    )
    db.add(instruction)
    await db.commit()
    await db.refresh(instruction)

    logger.info("instruction_added", project_id=project_id, instruction_id=instruction.id)
    return InstructionCreated(instruction=InstructionRead.model_validate(instruction))


@router.get("/{project_id}/instructions/history", response_model=InstructionHistory)
async def instruction_history(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session),
) -> InstructionHistory:
    await _get_owned_project(db, project_id, user_id)

    result = await db.execute(
        select(ProjectInstruction)
        .where(ProjectInstruction.project_id == project_id)
        .order_by(ProjectInstruction.created_at.asc(), ProjectInstruction.id.asc())
    )
    return InstructionHistory(
        instructions=[InstructionRead.model_validate(i) for i in result.scalars().all()]
    )
