"""Services module for Dayboard CLI - board state and store access."""

from .board_service import DayChip, TaskBoard

__all__ = ["TaskBoard", "DayChip"]
