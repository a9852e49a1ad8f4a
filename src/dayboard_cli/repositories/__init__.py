"""Repository interfaces for Dayboard CLI.

The task store is reached only through ``TaskRepository``. The REST
implementation lives in dayboard_cli.adapters.rest_api.
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
