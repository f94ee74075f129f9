"""SortableTableView

QTableWidget-based view whose header clicks drive a `SortableTableViewModel`.
Each column shows one header; cell text comes from the header's sort
expression when it is a field path, or from an explicit cell formatter.
"""

from __future__ import annotations
from typing import Any, Callable, List, Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from sortable_table.services.header_binding import HeaderSpec
from sortable_table.services.row_ordering import resolve_path, split_direction_prefix
from sortable_table.viewmodels.sortable_table_viewmodel import SortableTableViewModel

__all__ = ["SortableTableView"]

CellFormatter = Callable[[Any], str]


class SortableTableView(QWidget):
    def __init__(
        self,
        headers: Sequence[HeaderSpec],
        formatters: Optional[Sequence[Optional[CellFormatter]]] = None,
        viewmodel: SortableTableViewModel | None = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.viewmodel = viewmodel or SortableTableViewModel(headers)
        specs = self.viewmodel.headers
        self._formatters: List[Optional[CellFormatter]] = list(formatters or [None] * len(specs))
        self._build_ui(specs)
        self._sync_indicator()

    def _build_ui(self, specs: List[HeaderSpec]):
        root = QVBoxLayout(self)
        self.table = QTableWidget(0, len(specs))
        self.table.setHorizontalHeaderLabels(
            [spec.label or str(spec.sort_expression) for spec in specs]
        )
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.setSortIndicatorShown(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        root.addWidget(self.table)
        self.summary_label = QLabel(self.viewmodel.summary.as_text())
        self.summary_label.setObjectName("sortableTableSummary")
        root.addWidget(self.summary_label)

    def set_rows(self, rows: Sequence[Any]):
        self.viewmodel.set_rows(rows)
        self._populate()

    def _cell_text(self, column: int, row: Any) -> str:
        formatter = self._formatters[column] if column < len(self._formatters) else None
        if formatter is not None:
            return formatter(row)
        expression = self.viewmodel.headers[column].sort_expression
        if callable(expression):
            value = expression(row)
        else:
            value = resolve_path(row, split_direction_prefix(expression)[0])
        return "" if value is None else str(value)

    def _populate(self):
        rows = self.viewmodel.rows()
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            for c in range(self.table.columnCount()):
                self.table.setItem(r, c, QTableWidgetItem(self._cell_text(c, row)))
        self.summary_label.setText(self.viewmodel.summary.as_text())

    def _sync_indicator(self):
        header = self.table.horizontalHeader()
        active = self.viewmodel.binding.active_index()
        if active is None:
            header.setSortIndicator(-1, Qt.SortOrder.AscendingOrder)
            return
        order = (
            Qt.SortOrder.DescendingOrder
            if self.viewmodel.binding.header_state(active).descending
            else Qt.SortOrder.AscendingOrder
        )
        header.setSortIndicator(active, order)

    def _on_header_clicked(self, logical_index: int):
        self.viewmodel.click(logical_index)
        self._sync_indicator()
        self._populate()

    def column_texts(self, column: int) -> List[str]:
        """Testing helper: current cell texts of one column, top to bottom."""
        out: List[str] = []
        for r in range(self.table.rowCount()):
            item = self.table.item(r, column)
            out.append(item.text() if item else "")
        return out
