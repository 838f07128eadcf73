"""todosync - Client-side todo store synchronized with a remote collection."""

__version__ = "0.1.0"
