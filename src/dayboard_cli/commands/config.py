"""Configuration management commands."""

from typing import Annotated

import typer

from dayboard_cli.config import get_config_manager, parse_config_value
from dayboard_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from dayboard_cli.utils.ui.console import get_console
from dayboard_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()

ProfileOption = Annotated[str, typer.Option("--profile", help="Profile name")]


@app.command("view")
@command_wrapper
def view_config(
    profile: ProfileOption = "default",
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "table",
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    config_dict = config_manager.config.model_dump()
    config_dict["store"]["key"] = "set" if config_manager.store_key() else "not set"
    format_output(config_dict, output)


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., store.url)")],
    profile: ProfileOption = "default",
) -> None:
    """Get a configuration value."""
    value = get_config_manager(profile).get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., store.url)")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
    profile: ProfileOption = "default",
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager(profile)
    current = config_manager.get(key)
    if current is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    # String settings keep the raw text; others are coerced to bool or int.
    parsed_value = value if isinstance(current, str) else parse_config_value(value)
    try:
        config_manager.set(key, parsed_value)
    except ValueError as e:
        raise AppError(
            f"Invalid value for '{key}': {value}", exit_code=ERROR_INVALID_ARGS
        ) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Annotated[
        str | None, typer.Argument(help="Configuration key to reset")
    ] = None,
    profile: ProfileOption = "default",
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    try:
        get_config_manager(profile).reset(key)
    except KeyError as e:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND
        ) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")


@app.command("set-key")
@command_wrapper
def set_store_key(
    key: Annotated[
        str | None, typer.Argument(help="Store API key (prompted if omitted)")
    ] = None,
    profile: ProfileOption = "default",
) -> None:
    """Save the store API key for a profile."""
    if key is None:
        key = typer.prompt("Store API key", hide_input=True)
    if not key.strip():
        raise AppError("Store API key cannot be empty", exit_code=ERROR_INVALID_ARGS)
    get_config_manager(profile).save_store_key(key.strip())
    format_success("Store API key saved")


@app.command("clear-key")
@command_wrapper
def clear_store_key(profile: ProfileOption = "default") -> None:
    """Remove the saved store API key."""
    get_config_manager(profile).clear_store_key()
    format_success("Store API key removed")
