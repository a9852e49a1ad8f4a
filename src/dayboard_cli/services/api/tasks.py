"""Tasks collection endpoints (PostgREST dialect)."""

from collections.abc import Iterable
from typing import Any

from dayboard_cli.services.api.client import APIClient

_RESERVED = set(',()"\\ ')


def _quote(value: str) -> str:
    """Quote a value for a PostgREST ``in.(...)`` list when needed."""
    if any(ch in _RESERVED for ch in value):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


class TasksAPI:
    """Tasks API client."""

    def __init__(self, client: APIClient, table: str = "tasks"):
        self.client = client
        self.table = table

    @property
    def path(self) -> str:
        return f"/rest/v1/{self.table}"

    async def list_tasks(self) -> list[dict[str, Any]]:
        """List every task, ascending by deadline."""
        response = await self.client.get(
            self.path, params={"select": "*", "order": "deadline.asc"}
        )
        return response.json()

    async def create_task(self, row: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert a task and return the persisted rows."""
        response = await self.client.post(
            self.path,
            json=[row],
            headers={"Prefer": "return=representation"},
        )
        return response.json()

    async def update_task(self, task_id: str, **updates: Any) -> None:
        """Update columns of the task with the given id."""
        await self.client.patch(
            self.path, json=updates, params={"id": f"eq.{task_id}"}
        )

    async def delete_task(self, task_id: str) -> None:
        """Delete a task."""
        await self.client.delete(self.path, params={"id": f"eq.{task_id}"})

    async def delete_tasks(self, task_ids: Iterable[str]) -> None:
        """Delete every task whose id is in ``task_ids`` with one request."""
        id_list = ",".join(_quote(tid) for tid in sorted(task_ids))
        await self.client.delete(self.path, params={"id": f"in.({id_list})"})
