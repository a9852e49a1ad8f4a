"""Tests for CLI output formatters."""

from __future__ import annotations

import json

import pytest
import yaml
from rich.console import Console

from dayboard_cli.utils.ui import formatters

TASK_ROWS = [
    {
        "id": "1",
        "time": "09:00",
        "text": "Stand-up",
        "completed": True,
        "overdue": False,
        "deadline": "2024-06-01T09:00",
    },
    {
        "id": "2",
        "time": "08:00",
        "text": "Pay rent",
        "completed": False,
        "overdue": True,
        "deadline": "2024-06-01T08:00",
    },
]

DAY_ROWS = [
    {"date": "2024-05-31", "label": "31/05/2024", "unfinished": 2, "today": False,
     "selected": False, "urgent": True},
    {"date": "2024-06-01", "label": "Today", "unfinished": 0, "today": True,
     "selected": True, "urgent": False},
]


@pytest.fixture()
def console(monkeypatch):
    """Capture formatter output in a wide, colourless console."""
    test_console = Console(record=True, width=120, color_system=None)
    monkeypatch.setattr(formatters, "console", test_console)
    return test_console


def test_json_output(capsys):
    formatters.format_output(TASK_ROWS, "json")
    assert json.loads(capsys.readouterr().out) == TASK_ROWS


def test_yaml_output(capsys):
    formatters.format_output(TASK_ROWS, "yaml")
    assert yaml.safe_load(capsys.readouterr().out) == TASK_ROWS


def test_table_output(console):
    formatters.format_output(TASK_ROWS, "table")
    text = console.export_text()
    assert "Text" in text
    assert "Pay rent" in text
    assert "✓" in text


def test_empty_table(console):
    formatters.format_table([])
    assert "No items found" in console.export_text()


def test_single_item_flattens_nested_keys(console):
    formatters.format_output({"store": {"url": "https://x", "timeout": 30}}, "table")
    text = console.export_text()
    assert "store.url" in text
    assert "store.timeout" in text


def test_pretty_tasks(console):
    formatters.format_output(TASK_ROWS, "pretty", title="Today")
    text = console.export_text()
    assert "Today" in text
    assert "(1 open, 2 total)" in text
    assert formatters.CHECK_DONE in text
    assert formatters.CHECK_OPEN in text
    assert "#2" in text


def test_pretty_days(console):
    formatters.format_output(DAY_ROWS, "pretty")
    text = console.export_text()
    assert "31/05/2024  (2)" in text
    assert "past day with open tasks" in text
    assert "▸ Today" in text


def test_pretty_empty_list(console):
    formatters.format_output([], "pretty")
    assert "Nothing planned" in console.export_text()


@pytest.mark.parametrize(
    ("func", "prefix"),
    [
        (formatters.format_error, "Error:"),
        (formatters.format_success, "Success:"),
        (formatters.format_warning, "Warning:"),
        (formatters.format_info, "Info:"),
    ],
)
def test_message_helpers(console, func, prefix):
    func("something happened")
    assert f"{prefix} something happened" in console.export_text()
