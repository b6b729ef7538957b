"""Deterministic fallback scaffolds, one per app type."""

from appforger.models import ProjectType
from appforger.schemas.generation import FileSet

from .mobile import generate_mobile_scaffold
from .web import generate_web_scaffold


def generate_scaffold(app_type: ProjectType, project_id: str, project_name: str) -> FileSet:
    if app_type == ProjectType.WEB:
        return generate_web_scaffold(project_id, project_name)
    return generate_mobile_scaffold(project_id, project_name)


__all__ = ["generate_mobile_scaffold", "generate_scaffold", "generate_web_scaffold"]
