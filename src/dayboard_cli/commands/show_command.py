"""Command 'show' of dayboard-cli"""

from typing import Annotated

import typer

from dayboard_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import open_board, resolve_output, task_row, validate_date

app = typer.Typer()


@app.command("show")
@command_wrapper
async def show_command(
    date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Day to show (YYYY-MM-DD, default today)"),
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output format")
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
    profile: Annotated[
        str, typer.Option("--profile", help="Profile name")
    ] = "default",
) -> None:
    """Print the tasks of one day."""
    date = validate_date(date)
    output = resolve_output(profile, output, json_opt)

    async with open_board(profile, date=date) as board:
        rows = [task_row(board, task) for task in board.visible_tasks]
        title = board.label_for(board.selected_date)

    format_output(rows, output, title=title)
