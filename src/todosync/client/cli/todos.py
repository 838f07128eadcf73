"""Todo commands for todosync CLI.

Each command opens a transport for the configured environment, runs one
store action followed by a refresh, and prints the resulting list.

Commands:
- list: Show todos
- add: Create a todo
- complete: Set the completion flag of a todo
- delete: Delete a todo
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TypeVar

import click

from todosync.client.api import APIError
from todosync.client.store import TodoStore
from todosync.client.transports import create_transport
from todosync.core.config import AppConfig
from todosync.core.types import Todo

T = TypeVar("T")


def run_with_store(config: AppConfig, action: Callable[[TodoStore], Awaitable[T]]) -> T:
    """Run an action against a store bound to a fresh transport.

    Raises:
        click.ClickException: On transport failure.
    """

    async def _run() -> T:
        async with create_transport(config) as client:
            return await action(TodoStore(client))

    try:
        return asyncio.run(_run())
    except APIError as e:
        raise click.ClickException(str(e)) from e


def format_todo(todo: Todo) -> str:
    """Format a todo as a single line."""
    mark = "x" if todo.is_complete else " "
    created = todo.time_created.strftime("%Y-%m-%d %H:%M")
    return f"[{mark}] {todo.id}  {todo.text}  ({created})"


def echo_todos(todos: list[Todo]) -> None:
    """Print todos, or a placeholder when empty."""
    if not todos:
        click.echo("No todos.")
        return
    for todo in todos:
        click.echo(format_todo(todo))


@click.command("list")
@click.pass_obj
def list_cmd(config: AppConfig) -> None:
    """List todos."""

    async def action(store: TodoStore) -> list[Todo]:
        return await store.get_todos()

    echo_todos(run_with_store(config, action))


@click.command()
@click.argument("text")
@click.pass_obj
def add(config: AppConfig, text: str) -> None:
    """Create a todo with TEXT."""

    async def action(store: TodoStore) -> Todo:
        created = await store.create_todo(Todo(text=text, time_created=datetime.now(UTC)))
        await store.get_todos()
        return created

    created = run_with_store(config, action)
    click.echo(f"Created {created.id}")


@click.command()
@click.argument("todo_id")
@click.option("--undo", is_flag=True, help="Mark the todo as not complete.")
@click.pass_obj
def complete(config: AppConfig, todo_id: str, undo: bool) -> None:
    """Mark the todo TODO_ID as complete."""

    async def action(store: TodoStore) -> list[Todo]:
        await store.set_todo_complete(todo_id, {"isComplete": not undo})
        return await store.get_todos()

    echo_todos(run_with_store(config, action))


@click.command()
@click.argument("todo_id")
@click.pass_obj
def delete(config: AppConfig, todo_id: str) -> None:
    """Delete the todo TODO_ID."""

    async def action(store: TodoStore) -> list[Todo]:
        await store.delete_todo(Todo(id=todo_id, text="", time_created=datetime.now(UTC)))
        return await store.get_todos()

    echo_todos(run_with_store(config, action))
