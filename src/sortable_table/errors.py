"""Structured setup errors for sortable tables."""

from __future__ import annotations
from typing import Any


class SortableTableError(Exception):
    """Base class for sortable table issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class SetupError(SortableTableError):
    """Raised when a table cannot be composed; the table must not render."""


class MissingRowBindingError(SetupError):
    """Raised when no row element carries the iteration binding attribute."""


class MalformedBindingError(SetupError):
    """Raised when a binding expression lacks the `item in collection` shape."""
