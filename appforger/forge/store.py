"""Datastore access for the forge pipeline.

Every read and write is scoped by (project id, owner id). Each call runs in its
own session and commits immediately so pollers see progress as it happens.
"""

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from appforger.models import ForgeLog, ForgeProject, GeneratedFile, LogLevel, ProjectStatus
from appforger.schemas.generation import FileSet


class ForgeStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_project(self, project_id: str, owner_id: str) -> ForgeProject | None:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ForgeProject).where(
                    ForgeProject.id == project_id,
                    ForgeProject.owner_id == owner_id,
                )
            )
            return result.scalar_one_or_none()

    async def claim_for_forging(self, project_id: str, owner_id: str) -> bool:
        """Atomically move a project into forging.

        Returns False when the project is missing, not owned, or already forging,
        so two concurrent starts cannot both succeed.
        """
        async with self._session_factory() as session:
            result = await session.execute(
                update(ForgeProject)
                .where(
                    ForgeProject.id == project_id,
                    ForgeProject.owner_id == owner_id,
                    ForgeProject.status != ProjectStatus.FORGING.value,
                )
                .values(status=ProjectStatus.FORGING.value, error_message=None)
            )
            await session.commit()
            return result.rowcount == 1

    async def update_status(
        self, project_id: str, owner_id: str, status: ProjectStatus, **fields: Any
    ) -> None:
        async with self._session_factory() as session:
            await session.execute(
                update(ForgeProject)
                .where(ForgeProject.id == project_id, ForgeProject.owner_id == owner_id)
                .values(status=status.value, **fields)
            )
            await session.commit()

    async def add_log(
        self, project_id: str, message: str, level: LogLevel = LogLevel.INFO
    ) -> None:
        async with self._session_factory() as session:
            session.add(ForgeLog(project_id=project_id, message=message, level=level.value))
            await session.commit()

    async def save_files(self, project_id: str, files: FileSet) -> int:
        """Bulk insert a complete file set for one forge run."""
        async with self._session_factory() as session:
            session.add_all(
                GeneratedFile(project_id=project_id, file_path=path, content=content)
                for path, content in files.items()
            )
            await session.commit()
        return len(files)

    async def list_logs(self, project_id: str) -> list[ForgeLog]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ForgeLog)
                .where(ForgeLog.project_id == project_id)
                .order_by(ForgeLog.created_at.asc(), ForgeLog.id.asc())
            )
            return list(result.scalars().all())
