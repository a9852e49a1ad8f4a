"""Output formatters for CLI commands."""

import json
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from dayboard_cli.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")

CHECK_OPEN = "☐"
CHECK_DONE = "☑"


def format_output(data: Any, output_format: str = "pretty", title: str = "") -> None:
    """Format and display data in the requested format.

    ``pretty`` renders lists of task rows (dicts with ``time``/``text``) as a
    day listing and lists of day rows (dicts with ``unfinished``) as a day
    summary; anything else falls back to a table.
    """
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data, title=title)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict, prefix: str = "") -> None:
    """Format a (possibly nested) dict as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    def add_rows(data: dict, path: str) -> None:
        for key, value in data.items():
            full_key = f"{path}{key}"
            if isinstance(value, dict):
                add_rows(value, f"{full_key}.")
            else:
                table.add_row(full_key, _cell(value))

    add_rows(item, prefix)
    console.print(table)


def format_pretty(data: Any, title: str = "") -> None:
    """Format day listings and day summaries with colors and icons."""
    if isinstance(data, list) and data and isinstance(data[0], dict):
        if "unfinished" in data[0]:
            format_days_pretty(data)
            return
        if "time" in data[0] and "text" in data[0]:
            format_tasks_pretty(data, title=title)
            return
    if isinstance(data, list) and not data:
        console.print("[dim]Nothing planned[/dim]")
        return
    format_table(data)


def format_tasks_pretty(tasks: list[dict], title: str = "") -> None:
    """Render one day's tasks: checkbox, time, text and short id."""
    open_count = sum(1 for t in tasks if not t.get("completed"))
    header = Text()
    header.append(f"📅 {title or 'Tasks'} ", style="bold cyan")
    header.append(f"({open_count} open, {len(tasks)} total)", style="dim")
    console.print(header)

    for task in tasks:
        line = Text("  ")
        if task.get("completed"):
            line.append(f"{CHECK_DONE} ", style="green")
        else:
            line.append(f"{CHECK_OPEN} ")
        time_style = "bold red" if task.get("overdue") else "dim"
        line.append(f"🕒 {task.get('time', '')}  ", style=time_style)
        text_style = "strike dim" if task.get("completed") else ""
        line.append(str(task.get("text", "")), style=text_style)
        line.append(f"  #{task.get('id')}", style="dim cyan")
        console.print(line)


def format_days_pretty(days: list[dict]) -> None:
    """Render the quick-jump day list with unfinished counts."""
    for day in days:
        line = Text("  ")
        style = "bold red" if day.get("urgent") else "bold"
        marker = "▸ " if day.get("selected") else "  "
        line.append(f"{marker}{day.get('label')}", style=style)
        unfinished = day.get("unfinished", 0)
        if unfinished > 0:
            line.append(f"  ({unfinished})", style="yellow")
        if day.get("urgent"):
            line.append("  past day with open tasks", style="dim red")
        console.print(line)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
