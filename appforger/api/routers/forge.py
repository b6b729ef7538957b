"""Forge router: start a run and poll its status/log feed."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
import structlog

from appforger.forge import ForgeOrchestrator, ForgeStore, schedule_forge
from appforger.models import ProjectStatus
from appforger.schemas import (
    ForgeLogRead,
    ForgeProjectStatus,
    ForgeStartRequest,
    ForgeStartResponse,
    ForgeStatusRead,
)

from ..dependencies import get_current_user_id, get_forge_store, get_orchestrator

logger = structlog.get_logger()

router = APIRouter(prefix="/forge", tags=["forge"])


@router.post("/start", response_model=ForgeStartResponse)
async def start_forge(
    body: ForgeStartRequest,
    # Configuration is checked before identity
    orchestrator: ForgeOrchestrator = Depends(get_orchestrator),
    user_id: str = Depends(get_current_user_id),
    store: ForgeStore = Depends(get_forge_store),
) -> ForgeStartResponse:
    """Schedule a forge run and return without waiting for it."""
    project_id = body.project_id
    if not project_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Project ID is required"
        )

    project = await store.get_project(project_id, user_id)
    if not project:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

    if project.status == ProjectStatus.FORGING.value or not await store.claim_for_forging(
        project_id, user_id
    ):
        logger.warning("forge_start_rejected_already_forging", project_id=project_id)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Project is already being forged"
        )

    schedule_forge(orchestrator, project_id, user_id)
    logger.info("forge_scheduled", project_id=project_id)

    return ForgeStartResponse(message="Forge process started", project_id=project_id)


@router.get("/status", response_model=ForgeStatusRead)
async def forge_status(
    project_id: str | None = Query(None, alias="projectId"),
    user_id: str = Depends(get_current_user_id),
    store: ForgeStore = Depends(get_forge_store),
) -> ForgeStatusRead:
    """Project state plus its full log history, oldest first."""
    if not project_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Project ID is required"
        )

    project = await store.get_project(project_id, user_id)
    if not project:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

    logs = await store.list_logs(project_id)
    return ForgeStatusRead(
        project=ForgeProjectStatus.model_validate(project),
        logs=[ForgeLogRead.model_validate(log) for log in logs],
    )
