from app.models.todo import Todo

__all__ = ["Todo"]
