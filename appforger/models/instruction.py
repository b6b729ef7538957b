"""Project instruction model - refinement requests kept as a conversation."""

from enum import Enum

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class InstructionRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ProjectInstruction(Base):
    """One message in a project's instruction history."""

    __tablename__ = "project_instructions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("forge_projects.id", ondelete="CASCADE"), index=True
    )
    role: Mapped[str] = mapped_column(String(20), default=InstructionRole.USER.value)
    content: Mapped[str] = mapped_column(Text)
