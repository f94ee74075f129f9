"""Headless sort services.

Responsibilities:
 - `SortField` per-column state and `SortCoordinator` selection policy
 - Binding expression rewriting (ordering filter injection)
 - `HeaderBinding` glue and `RowOrderer` for renderers
 - `EventBus` publish/subscribe for sort change notifications

Nothing here imports Qt; views build on top of these modules.
"""

from .sort_field import SortField, SortOrder  # noqa: F401
from .sort_coordinator import SortCoordinator, SortState  # noqa: F401
from .binding_expression import (  # noqa: F401
    BindingExpression,
    OrderFilter,
    rewrite_binding_expression,
)
from .event_bus import EventBus, SortEvent, Event  # noqa: F401
from .header_binding import HeaderBinding, HeaderSpec, HeaderState  # noqa: F401
from .row_ordering import RowOrderer  # noqa: F401
