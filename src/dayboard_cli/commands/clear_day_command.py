"""Command 'clear-day' of dayboard-cli"""

from typing import Annotated

import typer

from dayboard_cli.utils.ui.formatters import format_info, format_success, format_warning

from .decorators import command_wrapper
from .utils import open_board, validate_date

app = typer.Typer()


@app.command("clear-day")
@command_wrapper
async def clear_day_command(
    date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Day to clear (YYYY-MM-DD, default today)"),
    ] = None,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
    profile: Annotated[
        str, typer.Option("--profile", help="Profile name")
    ] = "default",
) -> None:
    """Delete every task of one day."""
    date = validate_date(date)

    def confirm(message: str) -> bool:
        return yes or typer.confirm(message, default=False)

    async with open_board(profile, date=date) as board:
        count = len(board.visible_tasks)
        label = board.label_for(board.selected_date)
        if count == 0:
            format_info(f"Nothing to delete on {label}")
            return
        deleted = await board.delete_day(confirm)

    if deleted:
        format_success(f"Deleted {count} task(s) on {label}")
    else:
        format_warning("Cancelled")
