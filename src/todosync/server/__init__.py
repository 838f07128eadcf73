"""Server module - In-memory todo collection behind a FastAPI app."""

from todosync.server.app import create_app
from todosync.server.collection import TodoCollection, TodoNotFoundError

__all__ = [
    "TodoCollection",
    "TodoNotFoundError",
    "create_app",
]
