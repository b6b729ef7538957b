"""Forge project model."""

from enum import Enum
import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ProjectStatus(str, Enum):
    """Forge lifecycle status.

    pending -> forging -> ready | error. A terminal project may be forged again.
    """

    PENDING = "pending"
    FORGING = "forging"
    READY = "ready"
    ERROR = "error"


class ProjectType(str, Enum):
    """Kind of app to generate."""

    MOBILE = "mobile"  # Expo React Native
    WEB = "web"  # Next.js


class ForgeProject(Base):
    """A user's app, from description to repository and preview."""

    __tablename__ = "forge_projects"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )

    # Opaque identity from the external identity provider
    owner_id: Mapped[str] = mapped_column(String(255), index=True)

    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_type: Mapped[str] = mapped_column(String(20), default=ProjectType.MOBILE.value)
    status: Mapped[str] = mapped_column(String(20), default=ProjectStatus.PENDING.value)

    repo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    preview_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)
