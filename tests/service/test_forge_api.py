import asyncio
from unittest.mock import patch

import pytest

from appforger.api.main import app
from appforger.config import get_settings
from appforger.forge.orchestrator import _background_tasks
from appforger.models import ProjectStatus
from tests.helpers import OTHER_OWNER_ID, make_settings


async def wait_for_background_forges():
    await asyncio.gather(*list(_background_tasks))


@pytest.mark.asyncio
async def test_start_requires_identity(client, create_project):
    project = await create_project()

    response = await client.post("/api/forge/start", json={"projectId": project.id})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_start_requires_project_id(client, auth_headers):
    response = await client.post("/api/forge/start", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"detail": "Project ID is required"}


@pytest.mark.asyncio
async def test_start_unknown_project(client, auth_headers):
    response = await client.post(
        "/api/forge/start", json={"projectId": "missing"}, headers=auth_headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_start_other_owners_project_is_not_found(client, auth_headers, create_project):
    project = await create_project(owner_id=OTHER_OWNER_ID)

    response = await client.post(
        "/api/forge/start", json={"projectId": project.id}, headers=auth_headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_start_without_github_credentials_is_unavailable(
    client, auth_headers, create_project, store
):
    app.dependency_overrides[get_settings] = lambda: make_settings(github_token=None)
    project = await create_project()

    response = await client.post(
        "/api/forge/start", json={"projectId": project.id}, headers=auth_headers
    )

    assert response.status_code == 503
    assert "GITHUB_TOKEN" in response.json()["detail"]
    # Configuration errors are not persisted on the project
    saved = await store.get_project(project.id, auth_headers["X-User-ID"])
    assert saved.status == ProjectStatus.PENDING.value
    assert saved.error_message is None


@pytest.mark.asyncio
async def test_missing_configuration_is_reported_before_identity(client, create_project):
    app.dependency_overrides[get_settings] = lambda: make_settings(github_owner=None)
    project = await create_project()

    response = await client.post("/api/forge/start", json={"projectId": project.id})

    assert response.status_code == 503
    assert "GITHUB_OWNER" in response.json()["detail"]


@pytest.mark.asyncio
async def test_start_rejects_project_already_forging(client, auth_headers, create_project):
    project = await create_project(status=ProjectStatus.FORGING.value)

    response = await client.post(
        "/api/forge/start", json={"projectId": project.id}, headers=auth_headers
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_start_schedules_run_and_returns_immediately(
    client, auth_headers, create_project, store
):
    project = await create_project()

    with patch("appforger.api.routers.forge.schedule_forge") as schedule:
        response = await client.post(
            "/api/forge/start", json={"projectId": project.id}, headers=auth_headers
        )

    assert response.status_code == 200
    assert response.json() == {"message": "Forge process started", "projectId": project.id}
    schedule.assert_called_once()
    assert schedule.call_args.args[1:] == (project.id, auth_headers["X-User-ID"])

    saved = await store.get_project(project.id, auth_headers["X-User-ID"])
    assert saved.status == ProjectStatus.FORGING.value


@pytest.mark.asyncio
async def test_second_start_is_rejected_while_forging(client, auth_headers, create_project):
    project = await create_project()

    with patch("appforger.api.routers.forge.schedule_forge") as schedule:
        first = await client.post(
            "/api/forge/start", json={"projectId": project.id}, headers=auth_headers
        )
        second = await client.post(
            "/api/forge/start", json={"projectId": project.id}, headers=auth_headers
        )

    assert first.status_code == 200
    assert second.status_code == 409
    schedule.assert_called_once()


@pytest.mark.asyncio
async def test_forge_end_to_end(client, auth_headers, fake_pipeline):
    created = await client.post(
        "/api/projects",
        json={"name": "Notes", "description": "hello"},
        headers=auth_headers,
    )
    project_id = created.json()["project"]["id"]

    started = await client.post(
        "/api/forge/start", json={"projectId": project_id}, headers=auth_headers
    )
    assert started.status_code == 200
    await wait_for_background_forges()

    response = await client.get(
        "/api/forge/status", params={"projectId": project_id}, headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["project"]["status"] == "ready"
    assert body["project"]["repo_url"] == f"https://github.com/acme/appforger-{project_id[:8]}"
    assert body["project"]["preview_url"] is None

    logs = body["logs"]
    assert logs[0]["message"] == "Starting forge process..."
    assert logs[-1]["message"] == "Mobile preview: Scan QR code to open in Expo Snack"
    assert [log["id"] for log in logs] == sorted(log["id"] for log in logs)
    assert {log["level"] for log in logs} == {"info"}
    assert len(fake_pipeline.commits) == 1


@pytest.mark.asyncio
async def test_failed_forge_is_reported_in_status(client, auth_headers, fake_pipeline):
    fake_pipeline.commit_error = RuntimeError("Reference update failed")
    created = await client.post("/api/projects", json={"name": "Notes"}, headers=auth_headers)
    project_id = created.json()["project"]["id"]

    await client.post("/api/forge/start", json={"projectId": project_id}, headers=auth_headers)
    await wait_for_background_forges()

    body = (
        await client.get(
            "/api/forge/status", params={"projectId": project_id}, headers=auth_headers
        )
    ).json()
    assert body["project"]["status"] == "error"
    assert body["project"]["error_message"] == "Reference update failed"
    assert body["logs"][-1]["level"] == "error"
    assert body["logs"][-1]["message"] == "Forge failed: Reference update failed"


@pytest.mark.asyncio
async def test_status_requires_project_id(client, auth_headers):
    response = await client.get("/api/forge/status", headers=auth_headers)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_status_of_other_owners_project_is_not_found(
    client, auth_headers, create_project
):
    project = await create_project(owner_id=OTHER_OWNER_ID)

    response = await client.get(
        "/api/forge/status", params={"projectId": project.id}, headers=auth_headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_status_requires_identity(client, create_project):
    project = await create_project()

    response = await client.get("/api/forge/status", params={"projectId": project.id})

    assert response.status_code == 401
