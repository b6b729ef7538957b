"""Shared fixtures.

DATABASE_URL is set before any appforger import so the module-level engine in
appforger.api.database never points at a real database.
"""

from collections.abc import AsyncGenerator
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from appforger.clients.vercel import VercelClient  # noqa: E402
from appforger.forge import ForgeOrchestrator, ForgeStore  # noqa: E402
from appforger.models import Base, ForgeProject, ProjectStatus  # noqa: E402
from tests.helpers import OWNER_ID, make_settings  # noqa: E402
from tests.mocks.github import FakeGitHubClient  # noqa: E402


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh file-based SQLite database per test, all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def store(session_factory) -> ForgeStore:
    return ForgeStore(session_factory)


@pytest.fixture
def fake_github() -> FakeGitHubClient:
    return FakeGitHubClient(owner="acme")


@pytest.fixture
def orchestrator(store, fake_github, settings) -> ForgeOrchestrator:
    return ForgeOrchestrator(
        store=store,
        github=fake_github,
        vercel=VercelClient(),
        settings=settings,
    )


@pytest.fixture
def create_project(session_factory):
    """Insert a project row and return it."""

    async def _create(
        name: str = "Notes",
        description: str | None = None,
        project_type: str = "mobile",
        owner_id: str = OWNER_ID,
        status: str = ProjectStatus.PENDING.value,
    ) -> ForgeProject:
        async with session_factory() as session:
            project = ForgeProject(
                owner_id=owner_id,
                name=name,
                description=description,
                project_type=project_type,
                status=status,
            )
            session.add(project)
            await session.commit()
            await session.refresh(project)
            return project

    return _create
