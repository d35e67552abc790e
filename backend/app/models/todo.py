"""
Todo API Backend — Todo SQLAlchemy Model
==========================================

What:  ORM model for the `todos` table.
Who:   Used by TodoService for CRUD and by Alembic for schema management.

Table Design:
    - id: integer auto-increment primary key. Clients send it back as a raw
      JSON number (DELETE /todos body), so it stays numeric.
    - description: TEXT, no length limit imposed by this layer
    - done: boolean completion flag, defaults to false

    Listing orders by id ascending, which is insertion order.
"""

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Todo(Base):
    """
    A single todo record.

    Lifecycle:
        1. Created by POST /todos (id assigned on flush)
        2. Updated in place by PUT /todos/{id}; id never changes
        3. Removed by DELETE /todos (hard delete)
    """

    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier, immutable after creation",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Free-form todo text",
    )

    done: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Completion flag",
    )

    # Without AUTOINCREMENT, SQLite hands out the id of a just-deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, done={self.done})>"
