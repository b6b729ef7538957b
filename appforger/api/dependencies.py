"""FastAPI dependencies for identity, configuration and the forge pipeline."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from appforger.clients.github import create_github_client
from appforger.clients.llm import LLMFactory
from appforger.clients.vercel import create_vercel_client
from appforger.config import ConfigurationError, Settings, get_settings
from appforger.forge import ForgeOrchestrator, ForgeStore

from .database import get_session_factory


async def get_current_user_id(
    x_user_id: str | None = Header(None, alias="X-User-ID"),
) -> str:
    """Caller identity as asserted by the upstream identity provider.

    Raises 401 if the header is missing or blank.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return x_user_id.strip()


def get_forge_store(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> ForgeStore:
    return ForgeStore(session_factory)


def get_orchestrator(
    store: ForgeStore = Depends(get_forge_store),
    settings: Settings = Depends(get_settings),
) -> ForgeOrchestrator:
    """Build the pipeline for a forge start.

    Raises 503 when Git hosting credentials are not configured.
    """
    try:
        github = create_github_client(settings)
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{e}. Forging is unavailable until it is configured.",
        ) from e

    return ForgeOrchestrator(
        store=store,
        github=github,
        vercel=create_vercel_client(settings),
        settings=settings,
        llm_factory=lambda: LLMFactory.create_json_llm(settings),
    )
