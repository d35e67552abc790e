"""
Todo API Backend — Application Package Initializer
===================================================

What: Marks the `app` directory as a Python package.
Who:  Imported by uvicorn (`app.main:app`), Alembic and pytest.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │        Routes (TodoEndpoint)        │  ← HTTP shape only
    ├─────────────────────────────────────┤
    │     Services (TodoStore contract)   │  ← list / create / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the database directly; they await a TodoStore that
    FastAPI injects per request.
"""

__version__ = "1.0.0"
