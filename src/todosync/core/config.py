"""Shared configuration classes for todosync.

This module defines the configuration resolved once at application start
and handed to the transport factory. The store itself never reads it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from todosync.core.types import Environment

DEFAULT_SERVER_URL = "http://localhost:8000"
DEFAULT_RESOURCE = "/todos"


class ConfigError(Exception):
    """Invalid configuration value."""


@dataclass
class ServerConfig:
    """Configuration for connecting to a todo collection server.

    Attributes:
        server_url: Base URL of the server (e.g., "https://todos.example.com").
        resource: Path of the todo collection below the base URL.
        timeout: Request timeout in seconds.
        verify_ssl: Whether to verify SSL certificates (default True).
        token: Optional bearer token sent with every request.
    """

    server_url: str = DEFAULT_SERVER_URL
    resource: str = DEFAULT_RESOURCE
    timeout: float = 30.0
    verify_ssl: bool = True
    token: str | None = None

    def __post_init__(self) -> None:
        """Normalize server URL and resource path."""
        self.server_url = self.server_url.rstrip("/")
        self.resource = "/" + self.resource.strip("/")

    @property
    def is_secure(self) -> bool:
        """Check if using HTTPS."""
        return self.server_url.startswith("https://")


@dataclass
class AppConfig:
    """Application configuration.

    Attributes:
        environment: Selects which transport is injected into the store.
        server: Connection settings for the live transport.
    """

    environment: Environment = Environment.DEVELOPMENT
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build configuration from environment variables.

        Reads ``TODOSYNC_ENV``, ``TODOSYNC_SERVER_URL`` and
        ``TODOSYNC_TIMEOUT``.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).

        Returns:
            Resolved configuration.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        environment = parse_environment(environ.get("TODOSYNC_ENV", Environment.DEVELOPMENT.value))

        raw_timeout = environ.get("TODOSYNC_TIMEOUT", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"Invalid TODOSYNC_TIMEOUT: {raw_timeout!r}") from e

        server = ServerConfig(
            server_url=environ.get("TODOSYNC_SERVER_URL", DEFAULT_SERVER_URL),
            timeout=timeout,
        )
        return cls(environment=environment, server=server)


def parse_environment(name: str) -> Environment:
    """Resolve an environment name.

    Raises:
        ConfigError: If the name is not a known environment.
    """
    try:
        return Environment(name.strip().lower())
    except ValueError as e:
        valid = ", ".join(env.value for env in Environment)
        raise ConfigError(f"Unknown environment {name!r} (expected one of: {valid})") from e
