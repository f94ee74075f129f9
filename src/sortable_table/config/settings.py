"""Global configuration and constants for sortable tables."""

from __future__ import annotations

import os
from typing import Final

# Markup attributes recognised during table composition
ROW_BINDING_ATTRIBUTE: Final = os.environ.get("SORTABLE_TABLE_ROW_ATTRIBUTE", "ng-repeat")
HEADER_ATTRIBUTE: Final = "sortable-header"
SORT_DEFAULT_ATTRIBUTE: Final = "sort-default"

# Ordering clause injected into binding expressions
ORDER_FILTER_NAME: Final = "orderBy"
SORT_KEY_ACCESSOR: Final = "getSortExpression()"
SORT_DIRECTION_ACCESSOR: Final = "isSortDescending()"

# Exact, case-sensitive tokens; anything else means ascending
DESCENDING_DEFAULTS: Final = frozenset({"desc", "descending"})
