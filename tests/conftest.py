"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem/network state.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import datetime
from unittest.mock import AsyncMock, patch

import pytest

from dayboard_cli.models import Task
from dayboard_cli.repositories import TaskRepository

# 2024-06-01 10:00 local time
NOW = datetime(2024, 6, 1, 10, 0, 0)


def _make_task(
    id_: str = "1",
    deadline: str = "2024-06-01T23:59",
    *,
    text: str | None = None,
    completed: bool = False,
) -> Task:
    return Task(id=id_, text=text or f"Task {id_}", deadline=deadline, completed=completed)


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Send the application log to tmp_path and reset the singleton."""
    import dayboard_cli.utils.logger as logger_mod

    def _reset():
        logger_mod._logger = None
        app_logger = logging.getLogger("dayboard_cli")
        for handler in list(app_logger.handlers):
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                handler.close()
                app_logger.removeHandler(handler)

    _reset()
    with patch(
        "dayboard_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield
    _reset()


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep config and credentials files under tmp_path, without env overrides."""
    import dayboard_cli.config as config_mod

    monkeypatch.delenv("DAYBOARD_STORE_URL", raising=False)
    monkeypatch.delenv("DAYBOARD_STORE_KEY", raising=False)
    config_mod._config_manager = None
    with patch(
        "dayboard_cli.config.user_config_dir", return_value=str(tmp_path / "config")
    ), patch("dayboard_cli.config.user_data_dir", return_value=str(tmp_path / "data")):
        yield tmp_path
    config_mod._config_manager = None


# ---------------------------------------------------------------------------
# Board fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_task():
    """Factory for Task rows: make_task("1", "2024-06-01T09:00", completed=True)."""
    return _make_task


@pytest.fixture()
def clock():
    return lambda: NOW


@pytest.fixture()
def repo():
    """AsyncMock standing in for a TaskRepository."""
    mock = AsyncMock(spec=TaskRepository)
    mock.list_all.return_value = []
    return mock


@pytest.fixture()
def configured_store(monkeypatch):
    """Point the default profile at a fake store through the environment."""
    monkeypatch.setenv("DAYBOARD_STORE_URL", "https://store.example.com")
    monkeypatch.setenv("DAYBOARD_STORE_KEY", "anon-key")


@pytest.fixture()
def cli_board(repo, clock):
    """Patch the command layer to build boards over the mock repository."""
    from dayboard_cli.commands.utils import raise_store_failure
    from dayboard_cli.services.board_service import TaskBoard

    board = TaskBoard(repo, clock=clock, on_error=raise_store_failure)
    with patch("dayboard_cli.commands.utils.build_board", return_value=board):
        yield board
