"""
Todo API Backend — Pydantic Request/Response Schemas
=====================================================

What:  The JSON contract of the /todos endpoints.
How:   FastAPI validates request bodies against these models (422 on shape
       errors) and serializes return values through `response_model`.

Wire shapes:
    POST   /todos        body: TodoIn
    PUT    /todos/{id}   body: TodoUpdateRequest  ({"todo": TodoIn})
    DELETE /todos        body: raw integer id
    responses:           TodoResponse, list[TodoResponse], DeleteResponse
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class TodoIn(BaseModel):
    """
    What:  A candidate todo record, without an id.
    Who:   Body of POST /todos; nested under `todo` in PUT /todos/{id}.
    """
    description: str = Field(description="Free-form todo text")
    done: bool = Field(description="Completion flag")


class TodoUpdateRequest(BaseModel):
    """Body of PUT /todos/{id}: the record is nested under a `todo` key."""
    todo: TodoIn = Field(description="New description and done flag")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class TodoResponse(BaseModel):
    """
    What:  Full representation of a stored todo.
    Who:   Returned by list, create and update.
    """
    id: int = Field(description="Store-assigned identifier")
    description: str = Field(description="Free-form todo text")
    done: bool = Field(description="Completion flag")

    model_config = {"from_attributes": True}


class DeleteResponse(BaseModel):
    """Acknowledgement returned by the store after a delete."""
    id: int = Field(description="Identifier of the removed todo")
    deleted: bool = Field(default=True, description="Always true on success")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all application errors.

    Example:
        {
            "error": "not_found",
            "message": "todo with ID '42' was not found",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
