"""FastAPI dependencies for API routes."""

from __future__ import annotations

from fastapi import Request

from todosync.server.collection import TodoCollection


def get_collection(request: Request) -> TodoCollection:
    """Get the todo collection from app state."""
    collection: TodoCollection = request.app.state.collection
    return collection
