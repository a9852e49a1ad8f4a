"""Unit tests for the 'clear-day' command."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from dayboard_cli.commands.clear_day_command import app
from dayboard_cli.exceptions import StoreError
from dayboard_cli.utils.exit_codes import ERROR_NETWORK

runner = CliRunner()


@pytest.fixture()
def seeded(cli_board, repo, make_task):
    repo.list_all.return_value = [
        make_task("1", "2024-06-01T08:00"),
        make_task("2", "2024-06-02T09:00"),
        make_task("3", "2024-06-01T12:00"),
        make_task("4", "2024-06-01T18:00", completed=True),
    ]
    return cli_board


def test_clear_day_confirmed(seeded, repo):
    result = runner.invoke(app, [], input="y\n", catch_exceptions=False)

    assert result.exit_code == 0
    assert "Delete all 3 task(s) on 2024-06-01?" in result.output
    repo.delete_by_ids.assert_awaited_once_with({"1", "3", "4"})
    assert [t.id for t in seeded.tasks] == ["2"]
    assert "Deleted 3 task(s) on Today" in result.output


def test_clear_day_declined(seeded, repo):
    result = runner.invoke(app, [], input="n\n", catch_exceptions=False)

    assert result.exit_code == 0
    repo.delete_by_ids.assert_not_awaited()
    assert "Cancelled" in result.output
    assert len(seeded.tasks) == 4


def test_clear_day_yes_skips_prompt(seeded, repo):
    result = runner.invoke(app, ["--date", "2024-06-02", "--yes"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "Delete all" not in result.output
    repo.delete_by_ids.assert_awaited_once_with({"2"})


def test_clear_empty_day(seeded, repo):
    result = runner.invoke(app, ["--date", "2024-07-01"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "Nothing to delete on 01/07/2024" in result.output
    repo.delete_by_ids.assert_not_awaited()


def test_clear_day_store_failure(seeded, repo):
    repo.delete_by_ids.side_effect = StoreError("offline")

    result = runner.invoke(app, ["--yes"])

    assert result.exit_code == ERROR_NETWORK
    assert len(seeded.tasks) == 4
