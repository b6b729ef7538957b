"""Forge orchestration pipeline."""

from .orchestrator import (
    ForgeOrchestrator,
    ForgeResult,
    ProjectNotFoundError,
    run_forge_process,
    schedule_forge,
)
from .store import ForgeStore

__all__ = [
    "ForgeOrchestrator",
    "ForgeResult",
    "ForgeStore",
    "ProjectNotFoundError",
    "run_forge_process",
    "schedule_forge",
]
