"""Core module - Shared todo record and configuration."""

from todosync.core.config import AppConfig, ConfigError, ServerConfig, parse_environment
from todosync.core.types import Environment, Todo, parse_timestamp

__all__ = [
    # Config
    "AppConfig",
    "ConfigError",
    "ServerConfig",
    "parse_environment",
    # Types
    "Environment",
    "Todo",
    "parse_timestamp",
]
