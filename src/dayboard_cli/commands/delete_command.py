"""Command 'delete' of dayboard-cli"""

from typing import Annotated

import typer

from dayboard_cli.utils.exit_codes import ERROR_NOT_FOUND
from dayboard_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import open_board

app = typer.Typer()


@app.command("delete")
@command_wrapper
async def delete_command(
    task_id: Annotated[str, typer.Argument(help="Task ID")],
    profile: Annotated[
        str, typer.Option("--profile", help="Profile name")
    ] = "default",
) -> None:
    """Delete a single task."""
    async with open_board(profile) as board:
        task = board.find(task_id)
        if task is None:
            raise AppError(f"Task not found: {task_id}", exit_code=ERROR_NOT_FOUND)
        await board.delete_one(task_id)

    format_success(f"Deleted: {task.text}")
