"""Task board - state container and operations behind the board view.

The board mirrors the store's ``tasks`` collection in memory and derives
every per-day view from it on read. Mutations are pessimistic: local state
changes only after the store has confirmed the request. A failed request
is logged, reported through ``on_error`` and leaves the board untouched.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from dayboard_cli.exceptions import StoreError
from dayboard_cli.models import Task, TaskCreate
from dayboard_cli.repositories import TaskRepository
from dayboard_cli.utils.dates import (
    Clock,
    date_part,
    day_label,
    parse_deadline,
    system_clock,
    today_iso,
)
from dayboard_cli.utils.logger import get_logger

DEFAULT_TIME = "23:59"

ConfirmCallback = Callable[[str], "bool | Awaitable[bool]"]
ErrorCallback = Callable[[str], None]


@dataclass(frozen=True)
class DayChip:
    """Quick-jump entry for a day that has at least one task."""

    date: str
    label: str
    unfinished: int
    is_today: bool
    is_selected: bool
    is_urgent: bool


class TaskBoard:
    """In-memory task board synchronised with a TaskRepository.

    Attributes:
        tasks: Every task, in the order loaded (ascending deadline) plus
            tasks added since, appended at the end
        selected_date: ``YYYY-MM-DD`` of the day on display
        draft_text: Pending text of the new-task form
        draft_time: Pending ``HH:MM`` of the new-task form
    """

    def __init__(
        self,
        repository: TaskRepository,
        *,
        clock: Clock = system_clock,
        default_time: str = DEFAULT_TIME,
        on_error: ErrorCallback | None = None,
    ):
        self.repository = repository
        self.clock = clock
        self.on_error = on_error
        self.tasks: list[Task] = []
        self.selected_date = today_iso(clock)
        self.draft_text = ""
        self.draft_time = default_time

    # ---- derived views ----

    @property
    def today(self) -> str:
        return today_iso(self.clock)

    @property
    def active_dates(self) -> list[str]:
        """Distinct days that have tasks, ascending."""
        return sorted({date_part(t.deadline) for t in self.tasks})

    @property
    def visible_tasks(self) -> list[Task]:
        """Tasks of the selected day, in collection order."""
        return [t for t in self.tasks if date_part(t.deadline) == self.selected_date]

    def unfinished_count(self, date: str) -> int:
        return sum(
            1 for t in self.tasks if date_part(t.deadline) == date and not t.completed
        )

    def is_overdue(self, deadline: str | None, completed: bool) -> bool:
        """True if the task is open and its deadline has passed."""
        if completed or not deadline:
            return False
        due = parse_deadline(deadline)
        if due is None:
            return False
        return due < self.clock()

    def is_past_date(self, date: str) -> bool:
        return date < self.today

    def label_for(self, date: str) -> str:
        return day_label(date, self.today)

    @property
    def submit_label(self) -> str:
        return f"+ Add to {self.label_for(self.selected_date)}"

    def day_chips(self) -> list[DayChip]:
        today = self.today
        chips = []
        for date in self.active_dates:
            unfinished = self.unfinished_count(date)
            chips.append(
                DayChip(
                    date=date,
                    label=day_label(date, today),
                    unfinished=unfinished,
                    is_today=date == today,
                    is_selected=date == self.selected_date,
                    is_urgent=self.is_past_date(date) and unfinished > 0,
                )
            )
        return chips

    def find(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    # ---- local actions ----

    def select_date(self, date: str) -> None:
        """Show another day. Any string is accepted."""
        self.selected_date = date

    def select_today(self) -> None:
        self.selected_date = self.today

    # ---- store-backed actions ----

    def _report_failure(self, action: str, error: StoreError) -> None:
        get_logger("board").error("%s failed: %s", action, error)
        if self.on_error is not None:
            self.on_error(f"Could not {action}: {error}")

    async def load(self) -> bool:
        """Replace local tasks with the store's full collection."""
        try:
            tasks = await self.repository.list_all()
        except StoreError as e:
            self._report_failure("load tasks", e)
            return False
        self.tasks = list(tasks)
        get_logger("board").info("loaded %d task(s)", len(self.tasks))
        return True

    async def add_task(self) -> bool:
        """Insert the draft as a task on the selected day.

        A blank draft is ignored. On success the draft text is cleared while
        the draft time and selected day are kept for the next entry.
        """
        if not self.draft_text.strip():
            return False

        task_data = TaskCreate(
            text=self.draft_text,
            deadline=f"{self.selected_date}T{self.draft_time}",
        )
        try:
            created = await self.repository.insert(task_data)
        except StoreError as e:
            self._report_failure("add task", e)
            return False

        self.tasks = [*self.tasks, created]
        self.draft_text = ""
        get_logger("board").info("added task %s due %s", created.id, created.deadline)
        return True

    async def toggle(self, task_id: str) -> bool:
        """Flip the completion flag of a task."""
        task = self.find(task_id)
        if task is None:
            return False

        try:
            await self.repository.set_completed(task_id, not task.completed)
        except StoreError as e:
            self._report_failure("update task", e)
            return False

        # Flip whatever is local now; another response may have landed meanwhile.
        self.tasks = [
            t.model_copy(update={"completed": not t.completed}) if t.id == task_id else t
            for t in self.tasks
        ]
        get_logger("board").info("toggled task %s", task_id)
        return True

    async def delete_one(self, task_id: str) -> bool:
        """Delete a single task."""
        try:
            await self.repository.delete_by_id(task_id)
        except StoreError as e:
            self._report_failure("delete task", e)
            return False

        self.tasks = [t for t in self.tasks if t.id != task_id]
        get_logger("board").info("deleted task %s", task_id)
        return True

    def delete_day_prompt(self) -> str:
        return (
            f"Delete all {len(self.visible_tasks)} task(s) on "
            f"{self.selected_date}?"
        )

    async def delete_day(self, confirm: ConfirmCallback) -> bool:
        """Delete every task of the selected day after confirmation.

        ``confirm`` receives a message naming the count and the day and may
        return a bool or an awaitable of one. Declining sends nothing.
        """
        visible = self.visible_tasks
        if not visible:
            return False

        date = self.selected_date
        answer = confirm(self.delete_day_prompt())
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            return False

        try:
            await self.repository.delete_by_ids({t.id for t in visible})
        except StoreError as e:
            self._report_failure("delete day", e)
            return False

        self.tasks = [t for t in self.tasks if date_part(t.deadline) != date]
        get_logger("board").info("deleted %d task(s) on %s", len(visible), date)
        return True
