"""Command 'add' of dayboard-cli"""

from typing import Annotated

import typer

from dayboard_cli.utils.exit_codes import ERROR_INVALID_ARGS
from dayboard_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper
from .utils import open_board, resolve_output, task_row, validate_date, validate_time

app = typer.Typer()


@app.command("add")
@command_wrapper
async def add_command(
    text: Annotated[str, typer.Argument(help="What needs to be done")],
    date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Day of the task (YYYY-MM-DD, default today)"),
    ] = None,
    time: Annotated[
        str | None,
        typer.Option("--time", "-t", help="Due time (HH:MM, default from config)"),
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output format")
    ] = None,
    profile: Annotated[
        str, typer.Option("--profile", help="Profile name")
    ] = "default",
) -> None:
    """Add a task to a day."""
    date = validate_date(date)
    time = validate_time(time)
    output = resolve_output(profile, output)

    if not text.strip():
        raise AppError("Task text cannot be empty", exit_code=ERROR_INVALID_ARGS)

    async with open_board(profile, date=date, load=False) as board:
        board.draft_text = text
        if time:
            board.draft_time = time
        await board.add_task()
        created = board.tasks[-1]
        row = task_row(board, created)
        label = board.label_for(created.day)

    if output == "pretty":
        format_success(f"Added to {label} at {created.time_of_day}: {created.text}")
        typer.echo(f"ID: {created.id}")
    else:
        format_output(row, output)
