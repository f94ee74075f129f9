"""Wiring between column headers and the sort coordinator.

One `SortField` is created per header at construction time. Headers declaring
a `sort_default` become the initial active sort (descending for `"desc"` /
`"descending"`, ascending for any other token). Clicks are forwarded to the
coordinator and announced on an optional `EventBus`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import settings
from .event_bus import EventBus, SortEvent
from .sort_coordinator import SortCoordinator, SortState
from .sort_field import SortExpression, SortField

__all__ = ["HeaderBinding", "HeaderSpec", "HeaderState"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderSpec:
    sort_expression: SortExpression
    sort_default: Optional[str] = None
    label: str = ""


@dataclass(frozen=True)
class HeaderState:
    active: bool
    descending: bool


class HeaderBinding:
    def __init__(
        self,
        headers: Sequence[HeaderSpec],
        coordinator: SortCoordinator | None = None,
        bus: EventBus | None = None,
    ):
        self.coordinator = coordinator or SortCoordinator()
        self._bus = bus
        self.headers: List[HeaderSpec] = list(headers)
        self.fields: List[SortField] = []
        for spec in self.headers:
            field = self.coordinator.register(SortField(spec.sort_expression))
            self.fields.append(field)
            if spec.sort_default is None:
                continue
            if spec.sort_default in settings.DESCENDING_DEFAULTS:
                field.set_descending()
            self.coordinator.set_active_sort_field(field)
            _logger.debug(
                "default sort %r (%s)", spec.sort_expression, field.direction.value
            )

    def click(self, index: int) -> SortState:
        return self.click_field(self.fields[index])

    def click_field(self, field: SortField) -> SortState:
        self.coordinator.set_active_sort_field(field)
        state = self.coordinator.state
        if self._bus is not None:
            self._bus.publish(SortEvent.SORT_CHANGED, state)
        return state

    def index_of(self, field: SortField) -> int:
        for i, f in enumerate(self.fields):
            if f is field:
                return i
        raise ValueError(f"{field!r} is not bound to a header")

    def header_state(self, index: int) -> HeaderState:
        field = self.fields[index]
        return HeaderState(active=field.is_active, descending=field.is_descending)

    def active_index(self) -> Optional[int]:
        active = self.coordinator.active_field
        return None if active is None else self.index_of(active)

    def get_sort_expression(self) -> Optional[SortExpression]:
        return self.coordinator.get_sort_expression()

    def get_sort_descending(self) -> Optional[bool]:
        return self.coordinator.get_sort_descending()
