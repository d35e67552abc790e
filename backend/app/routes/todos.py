"""
Todo API Backend — Todo Route Handlers
========================================

What:  The /todos resource: list, create, update, delete.
How:   Each handler awaits exactly one call on the injected TodoStore and
       returns its result verbatim. No local validation, retries or error
       translation.

Wire-shape quirks kept for client compatibility:
    - PUT /todos/{id} expects the record nested under `todo` in the body
    - DELETE /todos takes the bare numeric id as the entire JSON body
    DELETE /todos/{id} is also accepted and calls the same store operation.
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Path, status

from app.schemas.todo import (
    DeleteResponse,
    ErrorResponse,
    TodoIn,
    TodoResponse,
    TodoUpdateRequest,
)
from app.services.todo_service import get_todo_store
from app.services.todo_store import TodoStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["Todos"])

_NOT_FOUND = {404: {"description": "Todo not found", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[TodoResponse],
    summary="List all todos",
    description="Returns every todo in insertion order. An empty store yields [].",
)
async def list_todos(store: TodoStore = Depends(get_todo_store)) -> List[TodoResponse]:
    return await store.list_todos()


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a todo",
)
async def create_todo(
    todo: TodoIn,
    store: TodoStore = Depends(get_todo_store),
) -> TodoResponse:
    return await store.create_todo(todo)


@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    responses=_NOT_FOUND,
    summary="Update a todo",
    description='Body shape: {"todo": {"description": ..., "done": ...}}',
)
async def update_todo(
    todo_id: int = Path(description="Identifier of the todo to update"),
    body: TodoUpdateRequest = Body(description="Record nested under `todo`"),
    store: TodoStore = Depends(get_todo_store),
) -> TodoResponse:
    return await store.update_todo(todo_id, body.todo)


@router.delete(
    "",
    response_model=DeleteResponse,
    responses=_NOT_FOUND,
    summary="Delete a todo (id in body)",
    description="The request body is the bare numeric id, e.g. `42`.",
)
async def delete_todo(
    todo_id: int = Body(description="Identifier of the todo to delete"),
    store: TodoStore = Depends(get_todo_store),
) -> DeleteResponse:
    return await store.delete_todo(todo_id)


@router.delete(
    "/{todo_id}",
    response_model=DeleteResponse,
    responses=_NOT_FOUND,
    summary="Delete a todo (id in path)",
)
async def delete_todo_by_path(
    todo_id: int = Path(description="Identifier of the todo to delete"),
    store: TodoStore = Depends(get_todo_store),
) -> DeleteResponse:
    return await store.delete_todo(todo_id)
