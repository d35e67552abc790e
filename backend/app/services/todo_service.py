"""
Todo API Backend — Todo Service (SQLAlchemy TodoStore)
=======================================================

What:  The production TodoStore, persisting todos through an AsyncSession.
How:   One instance per request, built by `get_todo_store` around the
       request's session. Changes are flushed here; the session dependency
       commits once the handler returns.
Who:   Injected into the /todos route handlers.

Error Handling:
    Missing rows raise NotFoundError (→ 404). Any SQLAlchemyError is logged
    with its type and wrapped in DatabaseError (→ 500, generic message).
"""

import logging
from typing import List

from fastapi import Depends
from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import DatabaseError, NotFoundError
from app.models.todo import Todo
from app.schemas.todo import DeleteResponse, TodoIn, TodoResponse
from app.services.todo_store import TodoStore

logger = logging.getLogger(__name__)


class TodoService(TodoStore):
    """
    SQLAlchemy-backed todo store.

    Query patterns:
        - list:   SELECT * FROM todos ORDER BY id ASC
        - lookup: SELECT * FROM todos WHERE id = :id  (primary key)
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_todos(self) -> List[TodoResponse]:
        try:
            result = await self.db.execute(select(Todo).order_by(asc(Todo.id)))
            todos = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing todos: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve todos. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        return [TodoResponse.model_validate(todo) for todo in todos]

    async def create_todo(self, todo: TodoIn) -> TodoResponse:
        record = Todo(description=todo.description, done=todo.done)
        try:
            self.db.add(record)
            await self.db.flush()  # assigns the id without committing
        except SQLAlchemyError as e:
            logger.error("Database error creating todo: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the todo. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Todo created: %s", record.id)
        return TodoResponse.model_validate(record)

    async def update_todo(self, todo_id: int, todo: TodoIn) -> TodoResponse:
        record = await self._get_or_raise(todo_id)

        record.description = todo.description
        record.done = todo.done
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating todo %s: %s", todo_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the todo. Please try again.",
                context={"todo_id": todo_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Todo updated: %s (done=%s)", todo_id, record.done)
        return TodoResponse.model_validate(record)

    async def delete_todo(self, todo_id: int) -> DeleteResponse:
        record = await self._get_or_raise(todo_id)

        try:
            await self.db.delete(record)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting todo %s: %s", todo_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the todo. Please try again.",
                context={"todo_id": todo_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Todo deleted: %s", todo_id)
        return DeleteResponse(id=todo_id)

    async def _get_or_raise(self, todo_id: int) -> Todo:
        """Primary-key lookup that turns a missing row into NotFoundError."""
        try:
            result = await self.db.execute(select(Todo).where(Todo.id == todo_id))
            record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching todo %s: %s", todo_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the todo. Please try again.",
                context={"todo_id": todo_id, "error_type": type(e).__name__},
            ) from e

        if record is None:
            raise NotFoundError(resource="todo", resource_id=todo_id)
        return record


# ── Dependency ────────────────────────────────────────────────────────────
async def get_todo_store(db: AsyncSession = Depends(get_db_session)) -> TodoStore:
    """
    FastAPI dependency that supplies the TodoStore for a request.

    Tests replace it through `app.dependency_overrides[get_todo_store]`.
    """
    return TodoService(db)
