"""Adapters module - TaskRepository implementations.

- rest_api: PostgREST-style remote store over httpx
"""

from .rest_api import RestApiTaskRepository, get_task_repository

__all__ = ["RestApiTaskRepository", "get_task_repository"]
