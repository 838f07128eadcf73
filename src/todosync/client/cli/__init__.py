"""Command-line interface for todosync.

This module provides the main CLI entry point and assembles all commands.

Commands:
- list: Show the todos held by the server
- add: Create a todo
- complete: Mark a todo as complete (or incomplete with --undo)
- delete: Delete a todo
- serve: Run the todo collection server
"""

from __future__ import annotations

import logging
import sys

import click

from todosync import __version__
from todosync.client.cli.server import serve
from todosync.client.cli.todos import add, complete, delete, list_cmd
from todosync.core.config import AppConfig, ConfigError, ServerConfig, parse_environment
from todosync.server.app import setup_logging


@click.group()
@click.version_option(__version__)
@click.option(
    "--env",
    "env_name",
    default=None,
    help="Environment: development, test or production (default: TODOSYNC_ENV).",
)
@click.option(
    "--server-url",
    default=None,
    help="Server base URL for production (default: TODOSYNC_SERVER_URL).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    env_name: str | None,
    server_url: str | None,
    verbose: bool,
) -> None:
    """todosync - Todo list synchronized with a remote collection."""
    # stdout is reserved for command output
    setup_logging(logging.DEBUG if verbose else logging.WARNING, stream=sys.stderr)
    try:
        config = AppConfig.from_env()
        if env_name is not None:
            config.environment = parse_environment(env_name)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if server_url is not None:
        config.server = ServerConfig(
            server_url=server_url,
            resource=config.server.resource,
            timeout=config.server.timeout,
        )
    ctx.obj = config


# Todo commands
cli.add_command(list_cmd)
cli.add_command(add)
cli.add_command(complete)
cli.add_command(delete)

# Server command
cli.add_command(serve)


def main() -> None:
    """Entry point for the CLI."""
    cli()


__all__ = [
    "cli",
    "main",
]
