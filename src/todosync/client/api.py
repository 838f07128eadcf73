"""HTTP client for the todo collection API.

This module provides:
- TodoTransport: the contract the store depends on (list, create, update, delete)
- HTTPClient: live implementation on top of httpx
- APIError and subclasses: the single failure kind surfaced to the store
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from todosync.core.config import ServerConfig
from todosync.core.types import Todo

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base exception for transport failures."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(APIError):
    """Resource not found."""


class ConnectionFailedError(APIError):
    """Server could not be reached."""


class MalformedResponseError(APIError):
    """Response body could not be decoded into the expected shape."""


class TodoTransport(Protocol):
    """Remote operations on a single todo collection."""

    async def list(self) -> list[Todo]: ...

    async def create(self, todo: Todo) -> Todo: ...

    async def update(self, todo_id: str, patch: dict[str, Any]) -> None: ...

    async def delete(self, todo_id: str) -> None: ...


class HTTPClient:
    """Async HTTP client for the todo collection API."""

    def __init__(
        self,
        config: ServerConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Server configuration (URL, resource path, timeout, SSL).
            transport: Optional httpx transport, e.g. an ASGI transport bound
                to an in-process server.
        """
        self._config = config
        self._resource = config.resource
        headers = {}
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"
        self._client = httpx.AsyncClient(
            base_url=config.server_url,
            timeout=config.timeout,
            verify=config.verify_ssl,
            headers=headers,
            transport=transport,
        )

    @property
    def config(self) -> ServerConfig:
        """Get the server configuration."""
        return self._config

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request and map failures to APIError."""
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ConnectionFailedError(f"Cannot reach server: {e}") from e
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Handle API response and raise appropriate exceptions."""
        if response.status_code == 404:
            raise NotFoundError(self._error_detail(response, "Resource not found"), 404)
        if not response.is_success:
            detail = self._error_detail(response, "Unknown error")
            raise APIError(detail, response.status_code)
        return response

    @staticmethod
    def _error_detail(response: httpx.Response, default: str) -> str:
        """Extract the 'detail' field of an error body, if any."""
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return default

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError("Response is not valid JSON", response.status_code) from e

    @staticmethod
    def _to_todo(data: Any) -> Todo:
        try:
            return Todo.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"Invalid todo payload: {data!r}") from e

    # === Health check ===

    async def health_check(self) -> bool:
        """Check if the server is healthy.

        Returns:
            True if server is healthy.
        """
        try:
            response = await self._client.get("/health")
            return response.status_code == 200
        except httpx.RequestError:
            return False

    # === Collection operations ===

    async def list(self) -> list[Todo]:
        """List all todos in the collection.

        Returns:
            Todos in server order.

        Raises:
            MalformedResponseError: If the body is not a list of todos.
        """
        response = await self._request("GET", self._resource)
        data = self._decode(response)
        if not isinstance(data, list):
            raise MalformedResponseError("Expected a list of todos", response.status_code)
        return [self._to_todo(item) for item in data]

    async def create(self, todo: Todo) -> Todo:
        """Create a todo on the server.

        The server assigns the id; a client-supplied id is ignored.

        Args:
            todo: Todo to create.

        Returns:
            The server representation, including the assigned id.
        """
        response = await self._request("POST", self._resource, json=todo.to_dict())
        return self._to_todo(self._decode(response))

    async def update(self, todo_id: str, patch: dict[str, Any]) -> None:
        """Apply a partial update to a todo.

        Args:
            todo_id: Id of the todo to update.
            patch: Wire fields to change (e.g. ``{"isComplete": True}``).

        Raises:
            NotFoundError: If the todo does not exist.
        """
        await self._request("PUT", f"{self._resource}/{todo_id}", json=dict(patch))

    async def delete(self, todo_id: str) -> None:
        """Delete a todo.

        Args:
            todo_id: Id of the todo to delete.

        Raises:
            NotFoundError: If the todo does not exist.
        """
        await self._request("DELETE", f"{self._resource}/{todo_id}")
