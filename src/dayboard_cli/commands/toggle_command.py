"""Command 'toggle' of dayboard-cli"""

from typing import Annotated

import typer

from dayboard_cli.utils.exit_codes import ERROR_NOT_FOUND
from dayboard_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import open_board

app = typer.Typer()


@app.command("toggle")
@command_wrapper
async def toggle_command(
    task_id: Annotated[str, typer.Argument(help="Task ID")],
    profile: Annotated[
        str, typer.Option("--profile", help="Profile name")
    ] = "default",
) -> None:
    """Flip a task between open and done."""
    async with open_board(profile) as board:
        if board.find(task_id) is None:
            raise AppError(f"Task not found: {task_id}", exit_code=ERROR_NOT_FOUND)
        await board.toggle(task_id)
        task = board.find(task_id)

    state = "done" if task.completed else "open"
    format_success(f"Marked {state}: {task.text}")
