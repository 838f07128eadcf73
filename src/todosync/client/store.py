"""Local todo store synchronized with a remote collection.

The store keeps an in-memory cache of todos. Mutations (set_todos,
push_todo) replace or extend the cache synchronously and notify listeners.
Actions (get_todos, create_todo, delete_todo, set_todo_complete) await the
transport and may fail; only get_todos writes its result to the cache.
Callers refresh with get_todos after a write to observe it locally.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from todosync.client.api import APIError, TodoTransport
from todosync.client.transports import create_transport
from todosync.core.config import AppConfig
from todosync.core.types import Todo

logger = logging.getLogger(__name__)

Listener = Callable[[list[Todo]], None]


class TodoStore:
    """Cache of todos plus the actions that keep it in sync."""

    def __init__(self, client: TodoTransport) -> None:
        """Initialize the store.

        Args:
            client: Transport used by the actions.
        """
        self._client = client
        self._todos: list[Todo] = []
        self._listeners: list[Listener] = []

    @property
    def client(self) -> TodoTransport:
        """Get the injected transport."""
        return self._client

    @property
    def todos(self) -> list[Todo]:
        """Current cache. Do not modify it directly."""
        return self._todos

    # === Change notification ===

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the cache after every mutation.

        Returns:
            Function removing the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._todos)

    # === Mutations ===

    def set_todos(self, todos: Iterable[Todo]) -> None:
        """Replace the whole cache."""
        self._todos = list(todos)
        self._notify()

    def push_todo(self, todo: Todo) -> None:
        """Append a todo to the cache. Duplicate ids are not checked."""
        self._todos.append(todo)
        self._notify()

    # === Actions ===

    async def get_todos(self) -> list[Todo]:
        """Fetch all todos and replace the cache with them.

        Returns:
            The fetched todos (same list as the new cache).

        Raises:
            APIError: On transport failure. The cache is left untouched.
        """
        try:
            todos = await self._client.list()
        except APIError as e:
            logger.warning("Failed to fetch todos: %s", e)
            raise
        self.set_todos(todos)
        logger.debug("Fetched %d todos", len(self._todos))
        return self._todos

    async def create_todo(self, todo: Todo) -> Todo:
        """Create a todo remotely.

        The cache is not updated; call get_todos to see the new record.

        Returns:
            Remote representation, with the server-assigned id.
        """
        try:
            created = await self._client.create(todo)
        except APIError as e:
            logger.warning("Failed to create todo: %s", e)
            raise
        logger.debug("Created todo %s", created.id)
        return created

    async def delete_todo(self, todo: Todo) -> None:
        """Delete a todo remotely. The cache is not updated."""
        # An id of None is passed through; the transport decides how to fail.
        try:
            await self._client.delete(todo.id)  # type: ignore[arg-type]
        except APIError as e:
            logger.warning("Failed to delete todo %s: %s", todo.id, e)
            raise
        logger.debug("Deleted todo %s", todo.id)

    async def set_todo_complete(self, todo_id: str, data: dict[str, Any]) -> None:
        """Apply a partial update remotely. The cache is not updated.

        Args:
            todo_id: Id of the todo to update.
            data: Wire fields to change, e.g. ``{"isComplete": True}``.
        """
        try:
            await self._client.update(todo_id, data)
        except APIError as e:
            logger.warning("Failed to update todo %s: %s", todo_id, e)
            raise
        logger.debug("Updated todo %s: %s", todo_id, sorted(data))


def create_store(config: AppConfig | None = None) -> TodoStore:
    """Create a store bound to the transport selected by configuration.

    Args:
        config: Application configuration. Resolved from environment
            variables when omitted.

    Returns:
        A new store with an empty cache.
    """
    if config is None:
        config = AppConfig.from_env()
    return TodoStore(create_transport(config))
