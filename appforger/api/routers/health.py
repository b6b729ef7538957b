"""Liveness plus a summary of which integrations are configured."""

from fastapi import APIRouter, Depends

from appforger.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict:
    # Forging needs GitHub; Vercel and OpenAI only switch optional paths on
    return {
        "status": "ok",
        "integrations": {
            "github": settings.github_configured,
            "vercel": settings.vercel_configured,
            "openai": settings.openai_configured,
        },
    }
