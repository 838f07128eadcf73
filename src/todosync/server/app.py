"""FastAPI application for the todo collection server.

This module creates and configures the FastAPI application serving the
remote collection protocol over an in-memory collection. The same app is
mounted in-process (through httpx's ASGI transport) as the mock backend
for the development and test environments.

Usage:
    uvicorn todosync.server.app:app_factory --factory --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TextIO

from fastapi import FastAPI

from todosync import __version__
from todosync.server.api.router import router as api_router
from todosync.server.collection import TodoCollection

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_path: Path | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure logging to output to a stream and optionally a file.

    Args:
        level: Level for the todosync logger.
        log_path: Optional path to a log file. uvicorn logs are written
            there as well.
        stream: Stream for log records (defaults to stdout).
    """
    formatter = logging.Formatter(LOG_FORMAT)

    # Root logger for todosync
    root_logger = logging.getLogger("todosync")
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Stream handler
    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_path is None:
        return

    # File handler
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Also capture uvicorn logs to file
    for uvicorn_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(uvicorn_name)
        uvicorn_logger.addHandler(file_handler)


logger = logging.getLogger(__name__)


def create_app(collection: TodoCollection | None = None) -> FastAPI:
    """Create FastAPI application with a given collection.

    Args:
        collection: Todo collection to serve. A fresh empty one is created
            when omitted.

    Returns:
        Configured FastAPI application.
    """
    if collection is None:
        collection = TodoCollection()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info("todosync server starting (%d todos in memory)", len(collection))

        yield

        logger.info("todosync server shutting down")

    application = FastAPI(
        title="todosync Server",
        description="In-memory todo collection",
        version=__version__,
        lifespan=lifespan,
    )

    application.state.collection = collection

    application.include_router(api_router)

    return application


def app_factory() -> FastAPI:
    """Factory function for uvicorn --factory mode."""
    return create_app()
