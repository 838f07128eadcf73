"""Todo collection API routes.

PUT and DELETE answer with a plain ``ok`` body rather than the updated
record; clients refresh with GET to observe the change.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from todosync.server.api.deps import get_collection
from todosync.server.collection import TodoCollection, TodoNotFoundError
from todosync.server.schemas import (
    TodoCreateRequest,
    TodoResponse,
    TodoUpdateRequest,
    request_to_todo,
    todo_to_response,
    update_fields,
)

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=list[TodoResponse], response_model_exclude_none=True)
def list_todos(
    collection: TodoCollection = Depends(get_collection),
) -> list[TodoResponse]:
    """List all todos in insertion order."""
    return [todo_to_response(t) for t in collection.list()]


@router.post("", response_model=TodoResponse, response_model_exclude_none=True)
def create_todo(
    request: TodoCreateRequest,
    collection: TodoCollection = Depends(get_collection),
) -> TodoResponse:
    """Create a todo. The server assigns the id."""
    todo = collection.create(request_to_todo(request))
    return todo_to_response(todo)


@router.put("/{todo_id}", response_class=PlainTextResponse)
def update_todo(
    todo_id: str,
    request: TodoUpdateRequest,
    collection: TodoCollection = Depends(get_collection),
) -> str:
    """Apply a partial update to a todo."""
    try:
        collection.update(todo_id, update_fields(request))
    except TodoNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return "ok"


@router.delete("/{todo_id}", response_class=PlainTextResponse)
def delete_todo(
    todo_id: str,
    collection: TodoCollection = Depends(get_collection),
) -> str:
    """Delete a todo."""
    try:
        collection.delete(todo_id)
    except TodoNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return "ok"
