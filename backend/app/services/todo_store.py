"""
Todo API Backend — Abstract Todo Store Interface
==================================================

What:  Abstract base class for the collaborator that owns todo records.
How:   Concrete stores implement the four coroutines below. The /todos
       router only ever talks to this interface, so a store can be swapped
       (SQLAlchemy, in-memory for tests) without touching the routes.
"""

from abc import ABC, abstractmethod
from typing import List

from app.schemas.todo import DeleteResponse, TodoIn, TodoResponse


class TodoStore(ABC):
    """
    Contract for todo persistence and identity assignment.

    Contract:
        - Ids are assigned by the store on create and never change
        - list_todos returns records in insertion order
        - update_todo / delete_todo raise NotFoundError for unknown ids and
          leave the collection untouched in that case
        - Storage failures surface as DatabaseError (or another TodoAPIError)
    """

    @abstractmethod
    async def list_todos(self) -> List[TodoResponse]:
        """Return every todo, oldest first. Empty store → empty list."""
        ...

    @abstractmethod
    async def create_todo(self, todo: TodoIn) -> TodoResponse:
        """Insert a new record and return it with its assigned id."""
        ...

    @abstractmethod
    async def update_todo(self, todo_id: int, todo: TodoIn) -> TodoResponse:
        """
        Replace description and done of an existing record.

        Raises:
            NotFoundError: No record with `todo_id` exists. Nothing is created.
        """
        ...

    @abstractmethod
    async def delete_todo(self, todo_id: int) -> DeleteResponse:
        """
        Remove a record.

        Raises:
            NotFoundError: No record with `todo_id` exists.
        """
        ...
