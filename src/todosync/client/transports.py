"""Transport selection per deployment environment.

The development and test environments talk to an in-process server over
an in-memory collection; production talks to the configured server URL.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from todosync.client.api import HTTPClient
from todosync.core.config import AppConfig, ServerConfig
from todosync.core.types import Environment
from todosync.server.app import create_app
from todosync.server.collection import TodoCollection

logger = logging.getLogger(__name__)

MOCK_SERVER_URL = "http://mock"

TransportFactory = Callable[[AppConfig], HTTPClient]


def create_mock_transport(
    config: AppConfig, collection: TodoCollection | None = None
) -> HTTPClient:
    """Create a client bound in-process to an in-memory collection.

    Args:
        config: Application configuration (only the timeout is used).
        collection: Collection to serve. A fresh empty one when omitted.

    Returns:
        HTTP client routed through httpx's ASGI transport.
    """
    app = create_app(collection)
    server = ServerConfig(server_url=MOCK_SERVER_URL, timeout=config.server.timeout)
    return HTTPClient(server, transport=httpx.ASGITransport(app=app))


def create_live_transport(config: AppConfig) -> HTTPClient:
    """Create a client for the configured server."""
    return HTTPClient(config.server)


TRANSPORT_FACTORIES: dict[Environment, TransportFactory] = {
    Environment.DEVELOPMENT: create_mock_transport,
    Environment.TEST: create_mock_transport,
    Environment.PRODUCTION: create_live_transport,
}


def create_transport(config: AppConfig) -> HTTPClient:
    """Create the transport selected by the configured environment."""
    factory = TRANSPORT_FACTORIES[config.environment]
    client = factory(config)
    logger.debug(
        "Using %s transport for %s environment",
        factory.__name__,
        config.environment.value,
    )
    return client
