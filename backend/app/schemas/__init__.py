from app.schemas.todo import (
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
    TodoIn,
    TodoResponse,
    TodoUpdateRequest,
)

__all__ = [
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "TodoIn",
    "TodoResponse",
    "TodoUpdateRequest",
]
