"""Tests for core configuration classes."""

from __future__ import annotations

import pytest

from todosync.core.config import (
    DEFAULT_SERVER_URL,
    AppConfig,
    ConfigError,
    ServerConfig,
    parse_environment,
)
from todosync.core.types import Environment


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_defaults(self) -> None:
        """Should initialize with sensible defaults."""
        config = ServerConfig()
        assert config.server_url == DEFAULT_SERVER_URL
        assert config.resource == "/todos"
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.token is None

    def test_url_trailing_slash_removed(self) -> None:
        """Should strip trailing slash from server URL."""
        config = ServerConfig(server_url="https://example.com/")
        assert config.server_url == "https://example.com"

    def test_resource_normalized(self) -> None:
        """Should add a leading slash and drop a trailing one."""
        config = ServerConfig(resource="api/todos/")
        assert config.resource == "/api/todos"

    def test_is_secure_https(self) -> None:
        """Should return True for HTTPS URLs."""
        assert ServerConfig(server_url="https://example.com").is_secure is True

    def test_is_secure_http(self) -> None:
        """Should return False for HTTP URLs."""
        assert ServerConfig(server_url="http://localhost:8000").is_secure is False


class TestAppConfig:
    """Tests for AppConfig resolution."""

    def test_defaults_to_development(self) -> None:
        """Should use development and the default URL with an empty environment."""
        config = AppConfig.from_env({})
        assert config.environment == Environment.DEVELOPMENT
        assert config.server.server_url == DEFAULT_SERVER_URL

    def test_reads_variables(self) -> None:
        """Should read environment, URL and timeout."""
        config = AppConfig.from_env(
            {
                "TODOSYNC_ENV": "production",
                "TODOSYNC_SERVER_URL": "https://todos.example.com/",
                "TODOSYNC_TIMEOUT": "5",
            }
        )
        assert config.environment == Environment.PRODUCTION
        assert config.server.server_url == "https://todos.example.com"
        assert config.server.timeout == 5.0

    def test_invalid_environment(self) -> None:
        """Should raise ConfigError for an unknown environment."""
        with pytest.raises(ConfigError, match="staging"):
            AppConfig.from_env({"TODOSYNC_ENV": "staging"})

    def test_invalid_timeout(self) -> None:
        """Should raise ConfigError for a non-numeric timeout."""
        with pytest.raises(ConfigError):
            AppConfig.from_env({"TODOSYNC_TIMEOUT": "soon"})


class TestParseEnvironment:
    """Tests for parse_environment."""

    def test_case_insensitive(self) -> None:
        """Should accept any casing and surrounding whitespace."""
        assert parse_environment(" Test ") == Environment.TEST
