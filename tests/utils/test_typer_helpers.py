"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import click
import pytest
import typer

from dayboard_cli.utils.exit_codes import ERROR_INVALID_ARGS
from dayboard_cli.utils.typer_helpers import SuggestingGroup, suggest_commands


def _make_group(*names: str) -> SuggestingGroup:
    group = SuggestingGroup(name="dayboard")
    group.commands = {name: MagicMock() for name in names}
    return group


def _ctx():
    ctx = MagicMock()
    ctx.info_name = "dayboard"
    return ctx


def test_suggest_commands():
    assert suggest_commands("shwo", ["show", "add", "days"]) == ["show"]
    assert suggest_commands("zzz", ["show", "add"]) == []


def test_valid_command_passes_through():
    group = _make_group("add")
    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        return_value=("add", MagicMock(), []),
    ):
        assert group.resolve_command(_ctx(), ["add"])[0] == "add"


def test_unknown_command_with_suggestion_exits():
    group = _make_group("toggle", "delete", "days")
    mock_console = MagicMock()

    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        side_effect=click.UsageError("No such command 'togle'."),
    ), patch("dayboard_cli.utils.typer_helpers.get_console", return_value=mock_console):
        with pytest.raises(typer.Exit) as exc_info:
            group.resolve_command(_ctx(), ["togle"])

    assert exc_info.value.exit_code == ERROR_INVALID_ARGS
    printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
    assert "Did you mean this?" in printed
    assert "toggle" in printed


def test_unknown_command_without_suggestion_reraises():
    group = _make_group("toggle")
    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        side_effect=click.UsageError("No such command 'xyz'."),
    ):
        with pytest.raises(click.UsageError):
            group.resolve_command(_ctx(), ["xyz"])
