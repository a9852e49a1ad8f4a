"""Unit tests for the 'show' command."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from dayboard_cli.commands.show_command import app
from dayboard_cli.exceptions import StoreError
from dayboard_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NETWORK

runner = CliRunner()


@pytest.fixture()
def seeded(cli_board, repo, make_task):
    repo.list_all.return_value = [
        make_task("1", "2024-06-01T08:00", text="Pay rent"),
        make_task("2", "2024-06-01T18:00", text="Gym", completed=True),
        make_task("3", "2024-06-02T09:00", text="Dentist"),
    ]
    return cli_board


def test_show_today_pretty(seeded, repo):
    result = runner.invoke(app, [], catch_exceptions=False)

    assert result.exit_code == 0
    assert "Today" in result.output
    assert "Pay rent" in result.output
    assert "Gym" in result.output
    assert "Dentist" not in result.output
    repo.close.assert_awaited_once()


def test_show_other_day_json(seeded):
    result = runner.invoke(app, ["--date", "2024-06-02", "--json"], catch_exceptions=False)

    assert result.exit_code == 0
    rows = json.loads(result.output)
    assert [r["id"] for r in rows] == ["3"]
    assert rows[0]["overdue"] is False


def test_show_marks_overdue(seeded):
    result = runner.invoke(app, ["-o", "json"], catch_exceptions=False)

    rows = {r["id"]: r for r in json.loads(result.output)}
    assert rows["1"]["overdue"] is True
    assert rows["2"]["overdue"] is False


def test_show_empty_day(seeded):
    result = runner.invoke(app, ["--date", "2024-07-01"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "Nothing planned" in result.output


def test_show_invalid_date(seeded):
    result = runner.invoke(app, ["--date", "tomorrow"])
    assert result.exit_code == ERROR_INVALID_ARGS


def test_show_store_failure(cli_board, repo):
    repo.list_all.side_effect = StoreError("store returned HTTP 401")

    result = runner.invoke(app, [])

    assert result.exit_code == ERROR_NETWORK
    assert "Could not load tasks" in result.output
    repo.close.assert_awaited_once()


def test_show_without_configuration():
    result = runner.invoke(app, [])

    assert result.exit_code == ERROR_INVALID_ARGS
    assert "Store URL is not configured" in result.output
