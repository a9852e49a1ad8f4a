"""Unit tests for the 'delete' command."""

from __future__ import annotations

from typer.testing import CliRunner

from dayboard_cli.commands.delete_command import app
from dayboard_cli.exceptions import StoreError
from dayboard_cli.utils.exit_codes import ERROR_NETWORK, ERROR_NOT_FOUND

runner = CliRunner()


def test_delete_task(cli_board, repo, make_task):
    repo.list_all.return_value = [make_task("1", text="Gym"), make_task("2")]

    result = runner.invoke(app, ["1"], catch_exceptions=False)

    assert result.exit_code == 0
    repo.delete_by_id.assert_awaited_once_with("1")
    assert "Deleted: Gym" in result.output
    assert [t.id for t in cli_board.tasks] == ["2"]


def test_delete_unknown_task(cli_board, repo):
    result = runner.invoke(app, ["404"])

    assert result.exit_code == ERROR_NOT_FOUND
    repo.delete_by_id.assert_not_awaited()


def test_delete_store_failure(cli_board, repo, make_task):
    repo.list_all.return_value = [make_task("1")]
    repo.delete_by_id.side_effect = StoreError("offline")

    result = runner.invoke(app, ["1"])

    assert result.exit_code == ERROR_NETWORK
    assert [t.id for t in cli_board.tasks] == ["1"]
