import asyncio

import pytest
from sqlalchemy import func, select

from appforger.models import GeneratedFile, LogLevel, ProjectStatus
from tests.helpers import OTHER_OWNER_ID, OWNER_ID


@pytest.mark.asyncio
async def test_get_project_is_scoped_by_owner(store, create_project):
    project = await create_project()

    assert (await store.get_project(project.id, OWNER_ID)).name == "Notes"
    assert await store.get_project(project.id, OTHER_OWNER_ID) is None
    assert await store.get_project("missing", OWNER_ID) is None


@pytest.mark.asyncio
async def test_claim_for_forging_succeeds_once(store, create_project):
    project = await create_project()

    assert await store.claim_for_forging(project.id, OWNER_ID) is True
    assert await store.claim_for_forging(project.id, OWNER_ID) is False
    assert (await store.get_project(project.id, OWNER_ID)).status == ProjectStatus.FORGING.value


@pytest.mark.asyncio
async def test_concurrent_claims_admit_one(store, create_project):
    project = await create_project()

    results = await asyncio.gather(
        *(store.claim_for_forging(project.id, OWNER_ID) for _ in range(5))
    )

    assert sorted(results) == [False, False, False, False, True]


@pytest.mark.asyncio
async def test_claim_clears_previous_error(store, create_project):
    project = await create_project(status=ProjectStatus.ERROR.value)
    await store.update_status(
        project.id, OWNER_ID, ProjectStatus.ERROR, error_message="GitHub API error: 500 - boom"
    )

    assert await store.claim_for_forging(project.id, OWNER_ID)
    assert (await store.get_project(project.id, OWNER_ID)).error_message is None


@pytest.mark.asyncio
async def test_claim_rejects_other_owner(store, create_project):
    project = await create_project()

    assert await store.claim_for_forging(project.id, OTHER_OWNER_ID) is False
    assert (await store.get_project(project.id, OWNER_ID)).status == ProjectStatus.PENDING.value


@pytest.mark.asyncio
async def test_update_status_ignores_other_owner(store, create_project):
    project = await create_project()

    await store.update_status(project.id, OTHER_OWNER_ID, ProjectStatus.READY)

    assert (await store.get_project(project.id, OWNER_ID)).status == ProjectStatus.PENDING.value


@pytest.mark.asyncio
async def test_logs_are_listed_in_insertion_order(store, create_project):
    project = await create_project()
    messages = ["first", "second", "third"]
    for message in messages:
        await store.add_log(project.id, message)
    await store.add_log(project.id, "careful", LogLevel.WARN)

    logs = await store.list_logs(project.id)

    assert [log.message for log in logs] == [*messages, "careful"]
    assert [log.level for log in logs] == ["info", "info", "info", "warn"]


@pytest.mark.asyncio
async def test_save_files_bulk_inserts(store, session_factory, create_project):
    project = await create_project()

    count = await store.save_files(project.id, {"a.txt": "1", "b.txt": "2"})

    assert count == 2
    async with session_factory() as session:
        stored = await session.scalar(
            select(func.count()).select_from(GeneratedFile).where(
                GeneratedFile.project_id == project.id
            )
        )
    assert stored == 2
