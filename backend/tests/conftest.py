"""
Todo API Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the test suite.

Fixtures:
    ├── mock_db_session:  AsyncMock session (no database at all)
    ├── db_session:       real AsyncSession on a fresh SQLite file (aiosqlite)
    ├── memory_store:     in-memory TodoStore for endpoint tests
    ├── api_app:          fresh FastAPI app with the store overridden
    └── test_client:      HTTPX AsyncClient bound to `api_app` via ASGITransport
"""

import os
import tempfile

# Must run before any `app` import: settings and the engine read these at import time
_TEST_DIR = tempfile.mkdtemp(prefix="todo_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'app.db')}"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Dict, List  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from app.database import Base  # noqa: E402
from app.exceptions import NotFoundError  # noqa: E402
from app.schemas.todo import DeleteResponse, TodoIn, TodoResponse  # noqa: E402
from app.services.todo_service import get_todo_store  # noqa: E402
from app.services.todo_store import TodoStore  # noqa: E402


class InMemoryTodoStore(TodoStore):
    """Dict-backed TodoStore; ids count up from 1 like an autoincrement column."""

    def __init__(self):
        self._items: Dict[int, TodoResponse] = {}
        self._next_id = 1
        self.calls: List[str] = []

    async def list_todos(self) -> List[TodoResponse]:
        self.calls.append("list")
        return list(self._items.values())

    async def create_todo(self, todo: TodoIn) -> TodoResponse:
        self.calls.append("create")
        record = TodoResponse(id=self._next_id, description=todo.description, done=todo.done)
        self._items[record.id] = record
        self._next_id += 1
        return record

    async def update_todo(self, todo_id: int, todo: TodoIn) -> TodoResponse:
        self.calls.append("update")
        if todo_id not in self._items:
            raise NotFoundError(resource="todo", resource_id=todo_id)
        record = TodoResponse(id=todo_id, description=todo.description, done=todo.done)
        self._items[todo_id] = record
        return record

    async def delete_todo(self, todo_id: int) -> DeleteResponse:
        self.calls.append("delete")
        if todo_id not in self._items:
            raise NotFoundError(resource="todo", resource_id=todo_id)
        del self._items[todo_id]
        return DeleteResponse(id=todo_id)


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = todo
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_session(tmp_path):
    """A real session on a throwaway SQLite database with the schema created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def memory_store():
    return InMemoryTodoStore()


@pytest.fixture
def api_app(memory_store):
    """Fresh app per test, with the TodoStore dependency pointed at memory_store."""
    from app.main import create_app

    application = create_app()
    application.dependency_overrides[get_todo_store] = lambda: memory_store
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(api_app):
    """
    HTTPX AsyncClient talking to `api_app` in-process.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/todos")
    """
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
