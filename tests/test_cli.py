"""Tests for CLI commands - list, add, complete, delete, serve."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from todosync.client.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers the CLI installs on the todosync logger."""
    yield
    todosync_logger = logging.getLogger("todosync")
    for handler in todosync_logger.handlers[:]:
        todosync_logger.removeHandler(handler)


class TestListCommand:
    """Tests for 'todosync list' command."""

    def test_list_empty(self, runner: CliRunner) -> None:
        """A fresh development collection should be empty."""
        result = runner.invoke(cli, ["--env", "development", "list"])
        assert result.exit_code == 0
        assert "No todos." in result.output

    def test_unknown_environment(self, runner: CliRunner) -> None:
        """An unknown environment should fail with a clear message."""
        result = runner.invoke(cli, ["--env", "staging", "list"])
        assert result.exit_code != 0
        assert "staging" in result.output

    def test_env_variable(self, runner: CliRunner) -> None:
        """TODOSYNC_ENV should select the environment."""
        result = runner.invoke(cli, ["list"], env={"TODOSYNC_ENV": "test"})
        assert result.exit_code == 0


class TestAddCommand:
    """Tests for 'todosync add' command."""

    def test_add_prints_id(self, runner: CliRunner) -> None:
        """Should print the server-assigned id."""
        result = runner.invoke(cli, ["--env", "test", "add", "buy milk"])
        assert result.exit_code == 0
        assert result.output.startswith("Created ")


class TestCompleteCommand:
    """Tests for 'todosync complete' command."""

    def test_complete_unknown(self, runner: CliRunner) -> None:
        """Completing an unknown todo should fail with exit code 1."""
        result = runner.invoke(cli, ["--env", "test", "complete", "missing"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "not found" in result.output.lower()


class TestDeleteCommand:
    """Tests for 'todosync delete' command."""

    def test_delete_unknown(self, runner: CliRunner) -> None:
        """Deleting an unknown todo should fail with exit code 1."""
        result = runner.invoke(cli, ["--env", "test", "delete", "missing"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestProductionEnvironment:
    """Tests for commands against a live server."""

    def test_list_from_server(self, runner: CliRunner, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        """Should print todos returned by the server."""
        httpx_mock.add_response(
            url="http://todos.test/todos",
            json=[
                {"id": "1", "text": "done", "timeCreated": "2025-01-01T10:00:00", "isComplete": True},
                {"id": "2", "text": "open", "timeCreated": "2025-01-02T11:30:00"},
            ],
        )

        result = runner.invoke(
            cli, ["--env", "production", "--server-url", "http://todos.test", "list"]
        )

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "[x] 1  done  (2025-01-01 10:00)"
        assert lines[1] == "[ ] 2  open  (2025-01-02 11:30)"

    def test_complete_refreshes(self, runner: CliRunner, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        """Should update the todo, then refresh the list."""
        httpx_mock.add_response(method="PUT", url="http://todos.test/todos/1", text="ok")
        httpx_mock.add_response(
            method="GET",
            url="http://todos.test/todos",
            json=[{"id": "1", "text": "a", "timeCreated": "2025-01-01T10:00:00", "isComplete": False}],
        )

        result = runner.invoke(
            cli,
            ["--env", "production", "--server-url", "http://todos.test", "complete", "1", "--undo"],
        )

        assert result.exit_code == 0
        put = httpx_mock.get_request(method="PUT")
        assert json.loads(put.content) == {"isComplete": False}
        assert "[ ] 1  a" in result.output

    def test_server_unreachable(self, runner: CliRunner, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        """Network failures should be reported with exit code 1."""
        httpx_mock.add_exception(httpx.ConnectError("refused"))

        result = runner.invoke(
            cli, ["--env", "production", "--server-url", "http://todos.test", "list"]
        )

        assert result.exit_code == 1
        assert "Cannot reach server" in result.output


class TestServeCommand:
    """Tests for 'todosync serve' command."""

    def test_serve_runs_uvicorn(self, runner: CliRunner) -> None:
        """Should start uvicorn with the requested host and port."""
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(cli, ["serve", "--host", "0.0.0.0", "--port", "9000"])

        assert result.exit_code == 0
        assert "http://0.0.0.0:9000" in result.output
        _, kwargs = mock_run.call_args
        assert kwargs == {"host": "0.0.0.0", "port": 9000}

    def test_serve_log_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """--log-file should attach a file handler to the uvicorn loggers."""
        log_path = tmp_path / "server.log"
        with patch("uvicorn.run"):
            result = runner.invoke(cli, ["serve", "--log-file", str(log_path)])

        assert result.exit_code == 0
        uvicorn_logger = logging.getLogger("uvicorn")
        handlers = [h for h in uvicorn_logger.handlers if isinstance(h, logging.FileHandler)]
        try:
            assert str(log_path) in [h.baseFilename for h in handlers]
        finally:
            for handler in handlers:
                uvicorn_logger.removeHandler(handler)
                handler.close()
