"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todosync.core.types import Todo

# === Todo schemas ===


class TodoCreateRequest(BaseModel):
    """Request body for todo creation.

    The id is accepted for compatibility but ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    text: str
    time_created: datetime = Field(alias="timeCreated")
    is_complete: bool | None = Field(default=None, alias="isComplete")


class TodoUpdateRequest(BaseModel):
    """Request body for a partial todo update.

    Only fields present in the body are applied; ``id`` is stripped.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    text: str | None = None
    time_created: datetime | None = Field(default=None, alias="timeCreated")
    is_complete: bool | None = Field(default=None, alias="isComplete")

    @field_validator("text", "time_created")
    @classmethod
    def reject_null(cls, value: object) -> object:
        """Required todo fields may be omitted but not set to null."""
        if value is None:
            raise ValueError("may not be null")
        return value


class TodoResponse(BaseModel):
    """Todo data in responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    time_created: str = Field(alias="timeCreated")
    is_complete: bool | None = Field(default=None, alias="isComplete")


# === Health schema ===


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


# === Converters ===


def request_to_todo(request: TodoCreateRequest) -> Todo:
    """Convert a creation request to a Todo (without id)."""
    return Todo(
        text=request.text,
        time_created=request.time_created,
        is_complete=request.is_complete,
    )


def update_fields(request: TodoUpdateRequest) -> dict[str, object]:
    """Extract the fields explicitly set in an update request."""
    return request.model_dump(exclude_unset=True, exclude={"id"})


def todo_to_response(todo: Todo) -> TodoResponse:
    """Convert Todo to response model."""
    return TodoResponse(
        id=todo.id,
        text=todo.text,
        time_created=todo.time_created.isoformat(),
        is_complete=todo.is_complete,
    )
