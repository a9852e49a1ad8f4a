"""Command 'board' of dayboard-cli"""

from typing import Annotated

import typer

from dayboard_cli.config import get_config_manager
from dayboard_cli.utils.ui.board_view import run_board_view

from .decorators import command_wrapper
from .utils import build_board, validate_date

app = typer.Typer()


@app.command("board")
@command_wrapper
def board_command(
    date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Day to open (YYYY-MM-DD, default today)"),
    ] = None,
    profile: Annotated[
        str, typer.Option("--profile", help="Profile name")
    ] = "default",
) -> None:
    """Open the interactive day board."""
    date = validate_date(date)
    # The view reports store failures as toasts instead of exiting.
    board = build_board(profile, on_error=None)
    if date:
        board.select_date(date)

    threshold = get_config_manager(profile).config.board.swipe_threshold
    run_board_view(board, swipe_threshold=threshold)
