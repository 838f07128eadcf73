"""In-memory todo collection backing the server.

Records are kept in insertion order. Ids are generated by the collection;
any id supplied by the client is discarded.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from todosync.core.types import Todo

logger = logging.getLogger(__name__)


class TodoNotFoundError(LookupError):
    """No todo with the given id."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo not found: {todo_id}")
        self.todo_id = todo_id


def _new_id() -> str:
    return uuid.uuid4().hex


class TodoCollection:
    """Thread-safe ordered collection of todos."""

    def __init__(self, id_factory: Callable[[], str] = _new_id) -> None:
        self._todos: list[Todo] = []
        self._lock = threading.Lock()
        self._id_factory = id_factory

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> list[Todo]:
        """Return copies of all todos in insertion order."""
        with self._lock:
            return [replace(t) for t in self._todos]

    def create(self, todo: Todo) -> Todo:
        """Store a new todo under a freshly generated id."""
        created = replace(todo, id=self._id_factory())
        with self._lock:
            self._todos.append(created)
        logger.debug("Created todo %s", created.id)
        return replace(created)

    def update(self, todo_id: str, fields: dict[str, Any]) -> Todo:
        """Apply a partial update.

        Args:
            todo_id: Id of the todo to update.
            fields: Dataclass field names to overwrite. ``id`` is ignored.

        Raises:
            TodoNotFoundError: If no todo has this id.
        """
        fields = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            index = self._index_of(todo_id)
            self._todos[index] = replace(self._todos[index], **fields)
            updated = replace(self._todos[index])
        logger.debug("Updated todo %s: %s", todo_id, sorted(fields))
        return updated

    def delete(self, todo_id: str) -> None:
        """Remove a todo.

        Raises:
            TodoNotFoundError: If no todo has this id.
        """
        with self._lock:
            del self._todos[self._index_of(todo_id)]
        logger.debug("Deleted todo %s", todo_id)

    def _index_of(self, todo_id: str) -> int:
        # Caller holds the lock
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        raise TodoNotFoundError(todo_id)
