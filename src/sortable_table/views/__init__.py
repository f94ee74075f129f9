"""Qt view layer for sortable tables.

Exports:
 - SortableTableView
"""

from .sortable_table_view import SortableTableView  # noqa: F401
