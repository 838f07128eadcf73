"""Server command for todosync CLI.

Commands:
- serve: Run the in-memory todo collection server
"""

from __future__ import annotations

import logging
from pathlib import Path

import click


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option("--port", "-p", type=int, default=8000, show_default=True, help="Port to listen on.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write server and uvicorn logs to this file.",
)
def serve(host: str, port: int, log_file: Path | None) -> None:
    """Run the todo collection server.

    Todos are kept in memory and lost when the server stops.

    Examples:

        # Serve on localhost:8000
        todosync serve

        # Point a client at it
        todosync --env production --server-url http://127.0.0.1:8000 list
    """
    import uvicorn

    from todosync.server.app import create_app, setup_logging

    setup_logging(logging.INFO, log_path=log_file)
    click.echo(f"Serving todos on http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port)
