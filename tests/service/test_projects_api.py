import pytest

from tests.helpers import OTHER_OWNER_ID


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "integrations": {"github": True, "vercel": False, "openai": False},
    }


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")

    assert response.json()["name"] == "AppForger API"


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "req_abc"})

    assert response.headers["X-Correlation-ID"] == "req_abc"


@pytest.mark.asyncio
async def test_create_requires_identity(client):
    response = await client.post("/api/projects", json={"name": "Notes"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


@pytest.mark.asyncio
async def test_create_project(client, auth_headers):
    response = await client.post(
        "/api/projects",
        json={"name": "  Notes  ", "description": "A notes app", "project_type": "web"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    project = response.json()["project"]
    assert project["name"] == "Notes"
    assert project["status"] == "pending"
    assert project["project_type"] == "web"
    assert project["owner_id"] == auth_headers["X-User-ID"]
    assert project["repo_url"] is None
    assert len(project["id"]) == 36


@pytest.mark.asyncio
async def test_create_project_defaults_to_mobile(client, auth_headers):
    response = await client.post("/api/projects", json={"name": "Notes"}, headers=auth_headers)

    assert response.json()["project"]["project_type"] == "mobile"


@pytest.mark.asyncio
async def test_create_project_rejects_blank_name(client, auth_headers):
    response = await client.post("/api/projects", json={"name": "  "}, headers=auth_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_projects_only_returns_own(client, auth_headers, create_project):
    await create_project(name="Mine")
    await create_project(name="Theirs", owner_id=OTHER_OWNER_ID)

    response = await client.get("/api/projects", headers=auth_headers)

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Mine"]


@pytest.mark.asyncio
async def test_get_project(client, auth_headers, create_project):
    project = await create_project()

    response = await client.get(f"/api/projects/{project.id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["id"] == project.id


@pytest.mark.asyncio
async def test_get_project_of_other_owner_is_not_found(client, auth_headers, create_project):
    project = await create_project(owner_id=OTHER_OWNER_ID)

    response = await client.get(f"/api/projects/{project.id}", headers=auth_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_add_instruction(client, auth_headers, create_project):
    project = await create_project()

    response = await client.post(
        f"/api/projects/{project.id}/instructions",
        json={"content": "Add Stripe checkout"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["ok"] is True
    assert body["instruction"]["role"] == "user"
    assert body["instruction"]["content"] == "Add Stripe checkout"
    assert body["instruction"]["project_id"] == project.id


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"content": "   "}, {"content": ""}, {}])
async def test_add_instruction_rejects_blank_content(
    client, auth_headers, create_project, payload
):
    project = await create_project()

    response = await client.post(
        f"/api/projects/{project.id}/instructions", json=payload, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing instruction"}


@pytest.mark.asyncio
async def test_add_instruction_to_other_owners_project_is_not_found(
    client, auth_headers, create_project
):
    project = await create_project(owner_id=OTHER_OWNER_ID)

    response = await client.post(
        f"/api/projects/{project.id}/instructions",
        json={"content": "Add auth"},
        headers=auth_headers,
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_add_instruction_requires_identity(client, create_project):
    project = await create_project()

    response = await client.post(
        f"/api/projects/{project.id}/instructions", json={"content": "Add auth"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_instruction_history_is_oldest_first(client, auth_headers, create_project):
    project = await create_project()
    for content in ["Add auth", "Change layout", "Add Stripe later"]:
        await client.post(
            f"/api/projects/{project.id}/instructions",
            json={"content": content},
            headers=auth_headers,
        )

    response = await client.get(
        f"/api/projects/{project.id}/instructions/history", headers=auth_headers
    )

    assert response.status_code == 200
    instructions = response.json()["instructions"]
    assert [i["content"] for i in instructions] == [
        "Add auth",
        "Change layout",
        "Add Stripe later",
    ]
    assert {i["role"] for i in instructions} == {"user"}


@pytest.mark.asyncio
async def test_instruction_history_of_other_owners_project_is_not_found(
    client, auth_headers, create_project
):
    project = await create_project(owner_id=OTHER_OWNER_ID)

    response = await client.get(
        f"/api/projects/{project.id}/instructions/history", headers=auth_headers
    )

    assert response.status_code == 404
