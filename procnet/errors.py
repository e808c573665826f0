"""Exceptions raised while reading proc files."""

from __future__ import annotations


class ProcError(Exception):
    """Base class for every error raised by this package."""


class ParseError(ProcError, ValueError):
    """A line or value in a proc file did not have the expected form."""


class IncompleteError(ProcError):
    """A record lacks a value it must carry, or the value is unusable."""

    def __init__(self, field: str | None = None) -> None:
        self.field = field
        if field is None:
            message = "incomplete data"
        else:
            message = f"incomplete data: missing or invalid {field!r}"
        super().__init__(message)