"""Raw-data grid showing one row per spatial record."""

from __future__ import annotations

from typing import List, Optional, Sequence

from PySide6.QtWidgets import QAbstractItemView, QTableWidgetItem, QWidget
from qfluentwidgets import TableWidget


class RawDataTable(TableWidget):
    """
    Read-only table sink for tabulated meter values.

    Parameters
    ----------
    parent : QWidget, optional
        Parent widget.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.verticalHeader().hide()

    def clear_table(self) -> None:
        self.setRowCount(0)
        self.setColumnCount(0)

    def set_columns(self, headers: Sequence[str]) -> None:
        self.setColumnCount(len(headers))
        self.setHorizontalHeaderLabels(list(headers))

    def append_row(self, values: Sequence[str]) -> None:
        row = self.rowCount()
        self.insertRow(row)
        for column, value in enumerate(values):
            self.setItem(row, column, QTableWidgetItem(value))

    def headers(self) -> List[str]:
        """Return column header texts."""
        return [
            self.horizontalHeaderItem(column).text()
            for column in range(self.columnCount())
        ]

    def row_values(self, row: int) -> List[str]:
        """Return cell texts of one row."""
        values = []
        for column in range(self.columnCount()):
            item = self.item(row, column)
            values.append(item.text() if item is not None else "")
        return values
