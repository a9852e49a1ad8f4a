"""Unit tests for the 'board' command (the view itself is not started)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from dayboard_cli.commands.board_command import app
from dayboard_cli.config import get_config_manager
from dayboard_cli.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()


@pytest.fixture()
def board():
    return MagicMock()


@pytest.fixture()
def run_view():
    with patch("dayboard_cli.commands.board_command.run_board_view") as mock:
        yield mock


def test_board_opens_view(board, run_view):
    with patch(
        "dayboard_cli.commands.board_command.build_board", return_value=board
    ) as build:
        result = runner.invoke(app, [], catch_exceptions=False)

    assert result.exit_code == 0
    build.assert_called_once_with("default", on_error=None)
    board.select_date.assert_not_called()
    run_view.assert_called_once_with(board, swipe_threshold=10)


def test_board_with_date_and_threshold(board, run_view):
    get_config_manager("default").set("board.swipe_threshold", 6)
    with patch("dayboard_cli.commands.board_command.build_board", return_value=board):
        result = runner.invoke(app, ["--date", "2024-06-03"], catch_exceptions=False)

    assert result.exit_code == 0
    board.select_date.assert_called_once_with("2024-06-03")
    run_view.assert_called_once_with(board, swipe_threshold=6)


def test_board_requires_configuration(run_view):
    result = runner.invoke(app, [])

    assert result.exit_code == ERROR_INVALID_ARGS
    run_view.assert_not_called()


def test_board_invalid_date(run_view):
    result = runner.invoke(app, ["--date", "June"])

    assert result.exit_code == ERROR_INVALID_ARGS
    run_view.assert_not_called()
