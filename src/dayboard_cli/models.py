"""Dayboard domain models.

Tasks are stored as flat rows in a single ``tasks`` collection. The deadline
is kept as the ``YYYY-MM-DDTHH:MM`` string the store returns; its date portion
is the key that groups tasks into days.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from dayboard_cli.utils.dates import date_part, time_part


class Task(BaseModel):
    """Task model representing a persisted row.

    Attributes:
        id: Identifier assigned by the store (integer ids are kept as strings)
        text: Task description
        deadline: Combined date and time, ``YYYY-MM-DDTHH:MM``
        completed: Completion status
    """

    id: str
    text: str
    deadline: str
    completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def day(self) -> str:
        """Date portion of the deadline (the day group key)."""
        return date_part(self.deadline)

    @property
    def time_of_day(self) -> str:
        """``HH:MM`` portion of the deadline, for display."""
        return time_part(self.deadline)


class TaskCreate(BaseModel):
    """Model for inserting a new task.

    The store assigns the id, so none is sent.
    """

    text: str = Field(min_length=1)
    deadline: str
    completed: bool = False


__all__ = ["Task", "TaskCreate"]
