import pytest
from httpx import ASGITransport, AsyncClient

from appforger.api.database import get_async_session, get_session_factory
from appforger.api.dependencies import get_orchestrator
from appforger.api.main import app
from appforger.clients.vercel import VercelClient
from appforger.config import get_settings
from appforger.forge import ForgeOrchestrator
from tests.helpers import OWNER_ID


@pytest.fixture
async def client(session_factory, settings):
    """API client bound to the per-test SQLite database."""

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-User-ID": OWNER_ID}


@pytest.fixture
def fake_pipeline(client, store, fake_github, settings):
    """Route forge runs through the in-memory GitHub fake."""
    app.dependency_overrides[get_orchestrator] = lambda: ForgeOrchestrator(
        store=store, github=fake_github, vercel=VercelClient(), settings=settings
    )
    return fake_github
