"""Database models package."""

from .base import Base
from .forge_log import ForgeLog, LogLevel
from .generated_file import GeneratedFile
from .instruction import InstructionRole, ProjectInstruction
from .project import ForgeProject, ProjectStatus, ProjectType

__all__ = [
    "Base",
    "ForgeLog",
    "ForgeProject",
    "GeneratedFile",
    "InstructionRole",
    "LogLevel",
    "ProjectInstruction",
    "ProjectStatus",
    "ProjectType",
]
