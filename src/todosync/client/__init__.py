"""Client module - Todo store and the transports it talks through."""

from todosync.client.api import (
    APIError,
    ConnectionFailedError,
    HTTPClient,
    MalformedResponseError,
    NotFoundError,
    TodoTransport,
)
from todosync.client.store import TodoStore, create_store
from todosync.client.transports import (
    TRANSPORT_FACTORIES,
    create_live_transport,
    create_mock_transport,
    create_transport,
)

__all__ = [
    # API
    "APIError",
    "ConnectionFailedError",
    "HTTPClient",
    "MalformedResponseError",
    "NotFoundError",
    "TodoTransport",
    # Store
    "TodoStore",
    "create_store",
    # Transports
    "TRANSPORT_FACTORIES",
    "create_live_transport",
    "create_mock_transport",
    "create_transport",
]
