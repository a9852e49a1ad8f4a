"""Shared helpers for board commands."""

import contextlib
from collections.abc import AsyncIterator
from datetime import date as date_cls
from datetime import time as time_cls

from dayboard_cli.adapters.rest_api import get_task_repository
from dayboard_cli.config import ENV_STORE_KEY, ENV_STORE_URL, get_config_manager
from dayboard_cli.models import Task
from dayboard_cli.services.board_service import TaskBoard
from dayboard_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NETWORK
from dayboard_cli.utils.logger import set_level
from dayboard_cli.utils.ui.console import get_console
from dayboard_cli.utils.ui.formatters import OUTPUT_FORMATS

from .decorators import AppError


def raise_store_failure(message: str) -> None:
    """Board error hook for one-shot commands: abort with a network exit code."""
    raise AppError(message, exit_code=ERROR_NETWORK)


def build_board(profile: str = "default", *, on_error=raise_store_failure) -> TaskBoard:
    """Create a TaskBoard bound to the profile's store.

    Raises:
        AppError: If the store URL or key is not configured
    """
    config_manager = get_config_manager(profile)
    if not config_manager.store_url():
        raise AppError(
            "Store URL is not configured. Run 'dayboard config set store.url <url>' "
            f"or set {ENV_STORE_URL}.",
            exit_code=ERROR_INVALID_ARGS,
        )
    if not config_manager.store_key():
        raise AppError(
            "Store key is not configured. Run 'dayboard config set-key <key>' "
            f"or set {ENV_STORE_KEY}.",
            exit_code=ERROR_INVALID_ARGS,
        )

    config = config_manager.config
    set_level(config.logging.level)
    return TaskBoard(
        get_task_repository(profile),
        default_time=config.board.default_time,
        on_error=on_error,
    )


@contextlib.asynccontextmanager
async def open_board(
    profile: str = "default", *, date: str | None = None, load: bool = True
) -> AsyncIterator[TaskBoard]:
    """Build a board, optionally load it, and close its connection on exit."""
    board = build_board(profile)
    try:
        if date:
            board.select_date(date)
        if load:
            await board.load()
        yield board
    finally:
        await board.repository.close()


def validate_date(value: str | None) -> str | None:
    """Check a ``YYYY-MM-DD`` option value."""
    if value is None:
        return None
    try:
        date_cls.fromisoformat(value)
    except ValueError as e:
        raise AppError(
            f"Invalid date '{value}', expected YYYY-MM-DD", exit_code=ERROR_INVALID_ARGS
        ) from e
    return value


def validate_time(value: str | None) -> str | None:
    """Check an ``HH:MM`` option value."""
    if value is None:
        return None
    try:
        parsed = time_cls.fromisoformat(value)
    except ValueError as e:
        raise AppError(
            f"Invalid time '{value}', expected HH:MM", exit_code=ERROR_INVALID_ARGS
        ) from e
    return parsed.strftime("%H:%M")


def resolve_output(profile: str, output: str | None, json_opt: bool = False) -> str:
    """Pick the output format: ``--json``, then ``--output``, then config."""
    config = get_config_manager(profile).config
    get_console().no_color = not config.output.color
    if json_opt:
        return "json"
    output = output or config.output.format
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}' (choose from {', '.join(OUTPUT_FORMATS)})",
            exit_code=ERROR_INVALID_ARGS,
        )
    return output


def task_row(board: TaskBoard, task: Task) -> dict:
    """Flat dict describing one task for listing output."""
    return {
        "id": task.id,
        "time": task.time_of_day,
        "text": task.text,
        "completed": task.completed,
        "overdue": board.is_overdue(task.deadline, task.completed),
        "deadline": task.deadline,
    }
