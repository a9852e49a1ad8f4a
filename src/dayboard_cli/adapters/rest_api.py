"""REST API adapter - TaskRepository backed by the remote task store.

Transport errors, non-2xx responses and rows that do not validate are all
raised as StoreError, chained from the original exception.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import httpx
from pydantic import ValidationError

from dayboard_cli.exceptions import StoreError
from dayboard_cli.models import Task, TaskCreate
from dayboard_cli.repositories.repository import TaskRepository
from dayboard_cli.services.api.client import APIClient
from dayboard_cli.services.api.tasks import TasksAPI


def _describe(error: httpx.HTTPError) -> tuple[str, int | None]:
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        detail = response.text.strip()
        message = f"store returned HTTP {response.status_code}"
        if detail:
            message = f"{message}: {detail[:200]}"
        return message, response.status_code
    return f"store request failed: {error}", None


class RestApiTaskRepository(TaskRepository):
    """Task repository implementation using the store's REST API."""

    def __init__(self, client: APIClient, table: str = "tasks"):
        self._client = client
        self.tasks_api = TasksAPI(client, table=table)

    async def _call(self, coro) -> Any:
        try:
            return await coro
        except httpx.HTTPError as e:
            message, status = _describe(e)
            raise StoreError(message, status_code=status) from e
        except ValueError as e:
            # response.json() on a body that is not JSON
            raise StoreError(f"store returned an unreadable response: {e}") from e

    @staticmethod
    def _parse(row: Any) -> Task:
        try:
            return Task.model_validate(row)
        except ValidationError as e:
            raise StoreError(f"store returned an invalid task row: {e}") from e

    async def list_all(self) -> list[Task]:
        """List all tasks ordered by deadline."""
        rows = await self._call(self.tasks_api.list_tasks())
        if not isinstance(rows, list):
            raise StoreError("store returned a non-list task collection")
        return [self._parse(row) for row in rows]

    async def insert(self, task_data: TaskCreate) -> Task:
        """Insert a task and return the persisted row."""
        rows = await self._call(self.tasks_api.create_task(task_data.model_dump()))
        if not isinstance(rows, list) or not rows:
            raise StoreError("store did not return the inserted task")
        return self._parse(rows[0])

    async def set_completed(self, task_id: str, value: bool) -> None:
        """Set the completion flag of a task."""
        await self._call(self.tasks_api.update_task(task_id, completed=value))

    async def delete_by_id(self, task_id: str) -> None:
        """Delete a task."""
        await self._call(self.tasks_api.delete_task(task_id))

    async def delete_by_ids(self, task_ids: Iterable[str]) -> None:
        """Delete several tasks with one request."""
        ids = set(task_ids)
        if not ids:
            return
        await self._call(self.tasks_api.delete_tasks(ids))

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()


def get_task_repository(profile: str = "default") -> RestApiTaskRepository:
    """Build the REST repository for a configuration profile."""
    client = APIClient(profile)
    return RestApiTaskRepository(client, table=client.config.store.table)
