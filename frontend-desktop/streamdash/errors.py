"""Exceptions raised by the dashboard pipeline."""
from __future__ import annotations


class StreamDashError(Exception):
    """Base class so the window can catch every pipeline error in one place."""


class ResourceUnavailable(StreamDashError):
    """A CSV resource could not be fetched (bad status or transport error)."""

    def __init__(self, path: str, status_code: int | None = None, reason: str | None = None):
        self.path = path
        self.status_code = status_code
        self.reason = reason

        message = f"Failed to load CSV: {path}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        elif reason:
            message += f" ({reason})"
        super().__init__(message)


class MalformedNumeric(StreamDashError):
    """A cell that should hold a number could not be cast to one."""

    def __init__(self, field: str, row_index: int, text: str):
        self.field = field
        self.row_index = row_index
        self.text = text
        super().__init__(f"Row {row_index}: column {field!r} is not numeric: {text!r}")
