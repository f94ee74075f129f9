"""Sortable table public API.

Small, stable surface for callers composing sortable tables: the headless
sort services, setup-time markup composition and the error types. Qt views
are not imported here (no implicit QApplication requirements); import them
from `sortable_table.views`.
"""

from __future__ import annotations

from .errors import (  # noqa: F401
    SortableTableError,
    SetupError,
    MalformedBindingError,
    MissingRowBindingError,
)
from .services import (  # noqa: F401
    SortField,
    SortOrder,
    SortCoordinator,
    SortState,
    BindingExpression,
    OrderFilter,
    rewrite_binding_expression,
    EventBus,
    SortEvent,
    HeaderBinding,
    HeaderSpec,
    RowOrderer,
)
from .parsing.table_markup import ComposedTable, compose_sortable_table  # noqa: F401
