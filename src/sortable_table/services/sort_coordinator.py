"""Table-wide sort selection.

`SortCoordinator` is the single owner of the "which column is active" decision.
Fields are registered with it (usually by `HeaderBinding`); the coordinator
keeps at most one of them active and derives the ordering parameters consumed
by row renderers.

Transitions:
 - clicking the active field toggles its direction
 - clicking any other field deactivates the current one (resetting it to
   ascending) and activates the clicked one with its own direction
 - `unregister` / `clear` drop back to the unsorted state
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, List, Optional

from .sort_field import SortExpression, SortField, SortOrder

__all__ = ["SortCoordinator", "SortState"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortState:
    order: SortOrder
    expression: Optional[SortExpression] = None

    UNSORTED: ClassVar["SortState"]

    @property
    def is_sorted(self) -> bool:
        return self.order is not SortOrder.UNSORTED

    @property
    def descending(self) -> Optional[bool]:
        if self.order is SortOrder.UNSORTED:
            return None
        return self.order is SortOrder.DESCENDING


SortState.UNSORTED = SortState(SortOrder.UNSORTED)


class SortCoordinator:
    def __init__(self) -> None:
        self._fields: List[SortField] = []
        self._active: Optional[SortField] = None

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    @property
    def fields(self) -> List[SortField]:
        return list(self._fields)

    @property
    def active_field(self) -> Optional[SortField]:
        return self._active

    def register(self, field: SortField) -> SortField:
        if not any(f is field for f in self._fields):
            self._fields.append(field)
        return field

    def unregister(self, field: SortField) -> None:
        """Remove a field; if it is the active one the table becomes unsorted."""
        if field is self._active:
            self.clear()
        self._fields = [f for f in self._fields if f is not field]

    def clear(self) -> None:
        if self._active is not None:
            _logger.debug("clearing active sort field %r", self._active.sort_expression)
            self._active.deactivate()
            self._active = None

    def active_fields(self) -> List[SortField]:
        return [f for f in self._fields if f.is_active]

    # ------------------------------------------------------------------
    # Selection policy
    # ------------------------------------------------------------------
    def set_active_sort_field(self, field: SortField) -> None:
        self.register(field)
        if field is self._active:
            field.toggle_sort()
            _logger.debug(
                "toggled %r -> %s", field.sort_expression, field.direction.value
            )
            return
        if self._active is not None:
            self._active.deactivate()
        self._active = field
        field.activate()
        _logger.debug("activated %r (%s)", field.sort_expression, field.direction.value)

    # ------------------------------------------------------------------
    # Derived ordering parameters
    # ------------------------------------------------------------------
    @property
    def state(self) -> SortState:
        if self._active is None:
            return SortState.UNSORTED
        return SortState(self._active.direction, self._active.sort_expression)

    def get_sort_expression(self) -> Optional[SortExpression]:
        return self.state.expression

    def get_sort_descending(self) -> Optional[bool]:
        return self.state.descending
