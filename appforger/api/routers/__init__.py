"""Routers package."""

from . import forge, health, projects

__all__ = ["forge", "health", "projects"]
