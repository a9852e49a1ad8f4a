"""Command 'days' of dayboard-cli"""

from typing import Annotated

import typer

from dayboard_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import open_board, resolve_output

app = typer.Typer()


@app.command("days")
@command_wrapper
async def days_command(
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
    """List the days that have tasks, with their unfinished counts."""
    output = resolve_output(profile, output, json_opt)

    async with open_board(profile) as board:
        rows = [
            {
                "date": chip.date,
                "label": chip.label,
                "unfinished": chip.unfinished,
                "today": chip.is_today,
                "selected": chip.is_selected,
                "urgent": chip.is_urgent,
            }
            for chip in board.day_chips()
        ]

    if not rows and output == "pretty":
        typer.echo("No tasks yet.")
        return
    format_output(rows, output)
