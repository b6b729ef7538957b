"""Forge log model - append-only audit trail of a forge run."""

from enum import Enum

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class LogLevel(str, Enum):
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class ForgeLog(Base):
    """One progress line emitted by the orchestrator."""

    __tablename__ = "forge_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("forge_projects.id", ondelete="CASCADE"), index=True
    )
    message: Mapped[str] = mapped_column(Text)
    level: Mapped[str] = mapped_column(String(10), default=LogLevel.INFO.value)
