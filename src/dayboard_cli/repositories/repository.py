"""Repository abstraction for the task store.

Every operation either succeeds or raises StoreError. Nothing is retried, so
each call is attempted at most once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from dayboard_cli.models import Task, TaskCreate


class TaskRepository(ABC):
    """Abstract base class for the single ``tasks`` collection."""

    @abstractmethod
    async def list_all(self) -> list[Task]:
        """List every task.

        Returns:
            Tasks sorted ascending by deadline

        Raises:
            StoreError: If the store cannot be queried
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def insert(self, task_data: TaskCreate) -> Task:
        """Insert a task.

        Args:
            task_data: Text, deadline and completion flag of the new task

        Returns:
            The persisted Task, including the id assigned by the store

        Raises:
            StoreError: If the insert is rejected
        """
        raise NotImplementedError(
            "TaskRepository.insert() must be implemented by adapter"
        )

    @abstractmethod
    async def set_completed(self, task_id: str, value: bool) -> None:
        """Set the completion flag of one task.

        Raises:
            StoreError: If the update is rejected
        """
        raise NotImplementedError(
            "TaskRepository.set_completed() must be implemented by adapter"
        )

    @abstractmethod
    async def delete_by_id(self, task_id: str) -> None:
        """Delete one task.

        Raises:
            StoreError: If the delete is rejected
        """
        raise NotImplementedError(
            "TaskRepository.delete_by_id() must be implemented by adapter"
        )

    @abstractmethod
    async def delete_by_ids(self, task_ids: Iterable[str]) -> None:
        """Delete a set of tasks in a single request.

        Raises:
            StoreError: If the delete is rejected
        """
        raise NotImplementedError(
            "TaskRepository.delete_by_ids() must be implemented by adapter"
        )

    async def close(self) -> None:
        """Release any connection held by the repository."""
        return None
