"""Dayboard CLI - a day-by-day task board backed by a remote REST store."""

__version__ = "0.1.0"
