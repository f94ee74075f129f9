"""ViewModel for sortable tables.

Holds the raw rows and a `HeaderBinding`; `rows()` always reflects the live
sort state, so views only need to repopulate after a click.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence

from sortable_table.services.event_bus import EventBus, SortEvent
from sortable_table.services.header_binding import HeaderBinding, HeaderSpec
from sortable_table.services.row_ordering import RowOrderer
from sortable_table.services.sort_coordinator import SortState

__all__ = ["SortableTableViewModel", "SortableTableSummary"]


@dataclass
class SortableTableSummary:
    row_count: int = 0
    state: SortState = SortState.UNSORTED
    label: str = ""

    def as_text(self) -> str:
        if self.row_count == 0:
            return "No rows"
        if not self.state.is_sorted:
            return f"{self.row_count} rows"
        arrow = "desc" if self.state.descending else "asc"
        return f"{self.row_count} rows | Sorted by {self.label} ({arrow})"


class SortableTableViewModel:
    def __init__(
        self,
        headers: Sequence[HeaderSpec],
        key_functions: Optional[Mapping[str, Callable[[Any], Any]]] = None,
        bus: EventBus | None = None,
        binding: HeaderBinding | None = None,
    ):
        self.bus = bus
        self.binding = binding or HeaderBinding(headers, bus=bus)
        self._orderer = RowOrderer(key_functions)
        self._raw: List[Any] = []
        self.summary = SortableTableSummary()
        self._recompute_summary()

    @property
    def headers(self) -> List[HeaderSpec]:
        return list(self.binding.headers)

    def set_rows(self, rows: Sequence[Any]) -> None:
        self._raw = list(rows)
        self._recompute_summary()
        if self.bus is not None:
            self.bus.publish(SortEvent.ROWS_CHANGED, len(self._raw))

    def rows(self) -> List[Any]:
        return self._orderer.order_by_state(self._raw, self.binding.coordinator.state)

    def click(self, index: int) -> SortState:
        state = self.binding.click(index)
        self._recompute_summary()
        return state

    def _recompute_summary(self) -> None:
        state = self.binding.coordinator.state
        active = self.binding.active_index()
        label = ""
        if active is not None:
            spec = self.binding.headers[active]
            label = spec.label or str(spec.sort_expression)
        self.summary = SortableTableSummary(row_count=len(self._raw), state=state, label=label)
