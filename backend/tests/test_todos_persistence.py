"""
Todo API Backend — /todos Full-Stack Tests
============================================

What:  Runs the production wiring: router → get_todo_store → TodoService →
       get_db_session, on the SQLite database configured in conftest.
How:   No dependency overrides. Each request gets its own session, so a
       change is only visible to the next request once it was committed.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.database import Base, engine
from app.models.todo import Todo  # noqa: F401


@pytest_asyncio.fixture
async def db_client():
    """HTTP client on a fresh app backed by an empty `todos` table."""
    from app.main import create_app

    # Drop connections pooled under another test's event loop
    await engine.dispose()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    await engine.dispose()


class TestTodoPersistence:

    @pytest.mark.asyncio
    async def test_crud_state_survives_between_requests(self, db_client):
        created = await db_client.post("/todos", json={"description": "a", "done": False})
        assert created.status_code == 201
        todo_id = created.json()["id"]
        assert (await db_client.get("/todos")).json() == [
            {"id": todo_id, "description": "a", "done": False}
        ]

        updated = await db_client.put(
            f"/todos/{todo_id}",
            json={"todo": {"description": "a", "done": True}},
        )
        assert updated.status_code == 200
        assert (await db_client.get("/todos")).json() == [
            {"id": todo_id, "description": "a", "done": True}
        ]

        deleted = await db_client.request("DELETE", "/todos", json=todo_id)
        assert deleted.status_code == 200
        assert deleted.json() == {"id": todo_id, "deleted": True}
        assert (await db_client.get("/todos")).json() == []

        again = await db_client.request("DELETE", "/todos", json=todo_id)
        assert again.status_code == 404
        assert again.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_missing_update_rolls_back_and_creates_nothing(self, db_client):
        keep = (await db_client.post("/todos", json={"description": "keep", "done": False})).json()

        response = await db_client.put(
            f"/todos/{keep['id'] + 1}",
            json={"todo": {"description": "ghost", "done": True}},
        )

        assert response.status_code == 404
        assert (await db_client.get("/todos")).json() == [keep]

    @pytest.mark.asyncio
    async def test_deleted_id_not_reused(self, db_client):
        first = (await db_client.post("/todos", json={"description": "a", "done": False})).json()
        await db_client.delete(f"/todos/{first['id']}")

        second = (await db_client.post("/todos", json={"description": "b", "done": False})).json()

        assert second["id"] != first["id"]
