"""Per-column sort state.

A `SortField` only knows about itself: whether it drives the table order and
in which direction. Selection across columns is the coordinator's job.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Union

__all__ = ["SortField", "SortOrder", "SortExpression"]

# Field name / named key function, or a key callable
SortExpression = Union[str, Callable[[Any], Any]]


class SortOrder(str, Enum):
    UNSORTED = "unsorted"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortField:
    """Value object holding the state of one sortable column.

    Fields start inactive and ascending. Deactivation always resets the
    direction to ascending, so a column never remembers its previous
    direction once another column took over.
    """

    __slots__ = ("_sort_expression", "is_active", "is_descending")

    def __init__(self, sort_expression: SortExpression):
        self._sort_expression = sort_expression
        self.is_active = False
        self.is_descending = False

    @property
    def sort_expression(self) -> SortExpression:
        return self._sort_expression

    @property
    def direction(self) -> SortOrder:
        return SortOrder.DESCENDING if self.is_descending else SortOrder.ASCENDING

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_descending = False
        self.is_active = False

    def set_ascending(self) -> None:
        self.is_descending = False

    def set_descending(self) -> None:
        self.is_descending = True

    def toggle_sort(self) -> None:
        self.is_descending = not self.is_descending

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return (
            f"SortField({self._sort_expression!r}, active={self.is_active}, "
            f"descending={self.is_descending})"
        )
