"""Main entry point for Dayboard CLI."""

import typer

from dayboard_cli import __version__
from dayboard_cli.commands import config
from dayboard_cli.commands.add_command import add_command
from dayboard_cli.commands.board_command import board_command
from dayboard_cli.commands.clear_day_command import clear_day_command
from dayboard_cli.commands.days_command import days_command
from dayboard_cli.commands.delete_command import delete_command
from dayboard_cli.commands.show_command import show_command
from dayboard_cli.commands.toggle_command import toggle_command
from dayboard_cli.utils.typer_helpers import SuggestingGroup
from dayboard_cli.utils.ui.console import get_console

app = typer.Typer(
    name="dayboard",
    cls=SuggestingGroup,
    help="A day-by-day task board backed by a remote REST store",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")

app.command("board")(board_command)
app.command("days")(days_command)
app.command("show")(show_command)
app.command("add")(add_command)
app.command("toggle")(toggle_command)
app.command("delete")(delete_command)
app.command("clear-day")(clear_day_command)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Dayboard CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
