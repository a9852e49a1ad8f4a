"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from dayboard_cli.utils.exit_codes import ERROR_INVALID_ARGS
from dayboard_cli.utils.ui.console import get_console


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Close matches for a mistyped command name (at most three)."""
    return get_close_matches(attempted, available, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that answers an unknown command with "Did you mean ...?"."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if args:
                attempted = args[0]
                suggestions = suggest_commands(attempted, list(self.commands))
                if suggestions:
                    console = get_console()
                    console.print(
                        f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
                    )
                    console.print()
                    if len(suggestions) == 1:
                        console.print("[yellow]Did you mean this?[/yellow]")
                    else:
                        console.print("[yellow]Did you mean one of these?[/yellow]")
                    for suggestion in suggestions:
                        console.print(f"        {suggestion}")
                    raise typer.Exit(ERROR_INVALID_ARGS) from e
            raise
