"""Synchronous publish/subscribe for sort notifications.

Renderers subscribe to `SortEvent.SORT_CHANGED` to re-order their rows when a
header is activated. Dispatch is synchronous: by the time `publish` returns,
every handler has seen the new state.

A failing handler does not break the publish cycle; the failure is logged and
kept in `EventBus.errors`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Callable, Dict, List, Optional, Union

from .sort_coordinator import SortState

__all__ = ["SortEvent", "Event", "EventBus", "EventHandler", "Subscription"]

_logger = logging.getLogger(__name__)


class SortEvent(str, Enum):
    SORT_CHANGED = "sort_changed"  # payload: SortState after the click
    ROWS_CHANGED = "rows_changed"  # payload: new row count


# SortState for SORT_CHANGED, row count for ROWS_CHANGED
EventPayload = Optional[Union[SortState, int]]


@dataclass(frozen=True)
class Event:
    name: str
    payload: EventPayload
    timestamp: float


EventHandler = Callable[[Event], None]


@dataclass
class Subscription:
    """Handle returned by `EventBus.subscribe`; pass it to `unsubscribe`."""

    event: str
    handler: EventHandler
    once: bool = False
    active: bool = True


def _key(name: str | SortEvent) -> str:
    return name.value if isinstance(name, SortEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Handlers are invoked on a snapshot of the subscriber list, outside the
    lock, so they may subscribe or unsubscribe while being dispatched.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    def subscribe(
        self, name: str | SortEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = _key(name)
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                bucket[:] = [s for s in bucket if s is not sub]
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def publish(self, name: str | SortEvent, payload: EventPayload = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                _logger.warning("handler for %s failed: %s", key, exc, exc_info=True)
                with self._lock:
                    self._errors.append((evt, exc))
            else:
                if sub.once:
                    self.unsubscribe(sub)
        return evt

    def subscriber_count(self, name: str | SortEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
