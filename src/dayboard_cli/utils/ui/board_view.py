"""Textual TUI for the day-by-day task board."""

import asyncio
import contextlib

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, HorizontalScroll, Vertical, VerticalScroll
from textual.css.query import QueryError
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Input, Label, Static

from dayboard_cli.models import Task
from dayboard_cli.services.board_service import DayChip, TaskBoard

CHECK_OPEN = "☐"
CHECK_DONE = "☑"
URGENT_HINT = "Past day with open tasks"
EMPTY_TEXT = "Nothing planned"


def chip_label(chip: DayChip) -> str:
    """Button text for a day chip, with the unfinished count when non-zero."""
    if chip.unfinished > 0:
        return f"{chip.label} ({chip.unfinished})"
    return chip.label


def chip_classes(chip: DayChip) -> str:
    classes = ["date-chip"]
    if chip.is_selected:
        classes.append("active")
    if chip.is_urgent:
        classes.append("urgent")
    return " ".join(classes)


def row_classes(task: Task, overdue: bool) -> str:
    classes = ["task-row"]
    if overdue:
        classes.append("overdue")
    if task.completed:
        classes.append("completed")
    return " ".join(classes)


def is_swipe_delete(start_x: int, end_x: int, threshold: int) -> bool:
    """A drag counts as delete once it travels more than ``threshold`` cells left."""
    return start_x - end_x > threshold


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no dialog; dismisses with True only when confirmed."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-dialog"):
            yield Label(self.message, id="confirm-message")
            with Horizontal(id="confirm-buttons"):
                yield Button("Delete", variant="error", id="confirm")
                yield Button("Cancel", id="cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm")

    def action_cancel(self) -> None:
        self.dismiss(False)


class DayChipButton(Button):
    """Quick-jump button selecting one of the days that have tasks."""

    def __init__(self, chip: DayChip):
        super().__init__(chip_label(chip), classes=chip_classes(chip))
        self.date = chip.date
        if chip.is_urgent:
            self.tooltip = URGENT_HINT


class TaskCheckbox(Static):
    """Checkbox glyph; a click asks for a toggle and waits for the store."""

    def __init__(self, task: Task):
        super().__init__(CHECK_DONE if task.completed else CHECK_OPEN)
        self.task_id = task.id

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(TaskRow.ToggleRequested(self.task_id))


class TaskRow(Horizontal):
    """One task of the selected day.

    Dragging the row left past the swipe threshold and releasing deletes it,
    the same as pressing its delete button.
    """

    class ToggleRequested(Message):
        def __init__(self, task_id: str):
            super().__init__()
            self.task_id = task_id

    class DeleteRequested(Message):
        def __init__(self, task_id: str):
            super().__init__()
            self.task_id = task_id

    def __init__(self, task: Task, *, overdue: bool, swipe_threshold: int):
        super().__init__(classes=row_classes(task, overdue))
        self.model = task
        self.swipe_threshold = swipe_threshold
        self._drag_start: int | None = None

    def compose(self) -> ComposeResult:
        yield TaskCheckbox(self.model)
        yield Static(self.model.text, classes="task-text")
        yield Static(f"\U0001f552 {self.model.time_of_day}", classes="task-time")
        yield Button("✕", classes="delete-task")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.DeleteRequested(self.model.id))

    # Mouse events bubble up from the row's children; the mouse is not
    # captured so clicks still reach the checkbox and the delete button.
    def on_mouse_down(self, event: events.MouseDown) -> None:
        self._drag_start = event.screen_x

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self._drag_start is None:
            return
        start, self._drag_start = self._drag_start, None
        if is_swipe_delete(start, event.screen_x, self.swipe_threshold):
            self.post_message(self.DeleteRequested(self.model.id))


class BoardViewApp(App):
    """A Textual app showing one day of tasks at a time."""

    TITLE = "Dayboard"
    CSS_PATH = "board_view.tcss"
    BINDINGS = [
        Binding("t", "today", "Today"),
        Binding("r", "reload", "Reload"),
        Binding("d", "toggle_dark", "Toggle dark mode"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, board: TaskBoard, *, swipe_threshold: int = 10):
        super().__init__()
        self.board = board
        self.board.on_error = self.report_error
        self.swipe_threshold = swipe_threshold
        self._render_lock = asyncio.Lock()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="quick-jump"):
            yield Label("Days with tasks:", classes="quick-jump-label")
            yield HorizontalScroll(id="day-chips")
        with Horizontal(id="date-controls"):
            yield Label("Viewing:")
            yield Input(
                value=self.board.selected_date,
                placeholder="YYYY-MM-DD",
                id="date-picker",
                max_length=10,
            )
            yield Button("Delete day", variant="error", id="delete-day")
        with Vertical(id="task-form"):
            yield Input(placeholder="What needs to be done?", id="task-input")
            with Horizontal(id="task-form-bottom"):
                yield Label("Due at:")
                yield Input(
                    value=self.board.draft_time,
                    placeholder="HH:MM",
                    id="time-input",
                    max_length=5,
                    restrict=r"[0-9:]*",
                )
                yield Button(self.board.submit_label, variant="primary", id="add-task")
        yield VerticalScroll(id="task-list")
        yield Static(EMPTY_TEXT, id="empty-state")
        yield Footer()

    async def on_mount(self) -> None:
        await self.refresh_board()
        self.query_one("#task-input", Input).focus()
        self.load_tasks()

    async def on_unmount(self) -> None:
        await self.board.repository.close()

    def report_error(self, message: str) -> None:
        self.notify(message, title="Store error", severity="error")

    async def refresh_board(self) -> None:
        """Re-render every part of the view from the board state."""
        board = self.board
        async with self._render_lock:
            chips = board.day_chips()
            self.query_one("#quick-jump").display = bool(chips)
            chip_bar = self.query_one("#day-chips", HorizontalScroll)
            await chip_bar.remove_children()
            if chips:
                await chip_bar.mount_all([DayChipButton(chip) for chip in chips])

            picker = self.query_one("#date-picker", Input)
            if picker.value != board.selected_date:
                picker.value = board.selected_date

            visible = board.visible_tasks
            self.query_one("#delete-day", Button).display = bool(visible)
            self.query_one("#add-task", Button).label = board.submit_label

            task_list = self.query_one("#task-list", VerticalScroll)
            await task_list.remove_children()
            if visible:
                await task_list.mount_all(
                    [
                        TaskRow(
                            task,
                            overdue=board.is_overdue(task.deadline, task.completed),
                            swipe_threshold=self.swipe_threshold,
                        )
                        for task in visible
                    ]
                )
            self.query_one("#empty-state").display = not visible

    # ---- store-backed workers ----

    @work(group="store")
    async def load_tasks(self) -> None:
        await self.board.load()
        await self.refresh_board()

    @work(group="store")
    async def add_task(self) -> None:
        if await self.board.add_task():
            with contextlib.suppress(QueryError):
                self.query_one("#task-input", Input).value = ""
        await self.refresh_board()

    @work(group="store")
    async def toggle_task(self, task_id: str) -> None:
        await self.board.toggle(task_id)
        await self.refresh_board()

    @work(group="store")
    async def delete_task(self, task_id: str) -> None:
        await self.board.delete_one(task_id)
        await self.refresh_board()

    @work(group="store")
    async def delete_day(self) -> None:
        await self.board.delete_day(
            lambda message: self.push_screen_wait(ConfirmScreen(message))
        )
        await self.refresh_board()

    # ---- event handlers ----

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if isinstance(button, DayChipButton):
            self.board.select_date(button.date)
            await self.refresh_board()
        elif button.id == "add-task":
            self.add_task()
        elif button.id == "delete-day":
            self.delete_day()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "task-input":
            self.board.draft_text = event.value
        elif event.input.id == "time-input":
            self.board.draft_time = event.value

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "task-input":
            self.add_task()
        elif event.input.id == "date-picker":
            self.board.select_date(event.value)
            await self.refresh_board()

    def on_task_row_toggle_requested(self, message: TaskRow.ToggleRequested) -> None:
        self.toggle_task(message.task_id)

    def on_task_row_delete_requested(self, message: TaskRow.DeleteRequested) -> None:
        self.delete_task(message.task_id)

    # ---- actions ----

    async def action_today(self) -> None:
        self.board.select_today()
        await self.refresh_board()

    def action_reload(self) -> None:
        self.load_tasks()

    def action_toggle_dark(self) -> None:
        self.theme = (
            "textual-dark" if self.theme == "textual-light" else "textual-light"
        )


def run_board_view(board: TaskBoard, *, swipe_threshold: int = 10) -> None:
    """Run the board view app until the user quits."""
    app = BoardViewApp(board, swipe_threshold=swipe_threshold)
    app.run()
