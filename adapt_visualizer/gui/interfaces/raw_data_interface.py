"""
Raw-data interface listing meter values of one logged operation.
"""

from typing import List, Optional, Sequence

from PySide6.QtWidgets import QHBoxLayout, QVBoxLayout, QWidget
from qfluentwidgets import BodyLabel, ComboBox, StrongBodyLabel

from adapt_visualizer.adm.logged_data import LoggedData
from adapt_visualizer.core.data_processor import DataProcessor
from adapt_visualizer.gui.components.raw_data_table import RawDataTable


class RawDataInterface(QWidget):
    """
    Operation selector above a :class:`RawDataTable`.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.table = RawDataTable(self)
        self.processor: Optional[DataProcessor] = None
        self._operations: List[tuple] = []
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        selector_layout = QHBoxLayout()
        selector_layout.addWidget(StrongBodyLabel("Operation"))
        self.combo_operation = ComboBox(self)
        self.combo_operation.setMinimumWidth(320)
        self.combo_operation.currentIndexChanged.connect(self._on_operation_selected)
        selector_layout.addWidget(self.combo_operation)
        self.label_summary = BodyLabel("")
        selector_layout.addWidget(self.label_summary)
        selector_layout.addStretch()

        layout.addLayout(selector_layout)
        layout.addWidget(self.table, 1)

    def set_processor(self, processor: DataProcessor) -> None:
        self.processor = processor

    def set_logged_data(self, logged_data: Sequence[LoggedData]) -> None:
        """List every operation of every work record."""
        self._operations = [
            (logged, index)
            for logged in logged_data
            for index in range(len(logged.operation_data))
        ]
        labels = [
            f"{logged.description} / {logged.operation_data[index].operation_type or index}"
            for logged, index in self._operations
        ]
        self.combo_operation.blockSignals(True)
        self.combo_operation.clear()
        self.combo_operation.addItems(labels)
        self.combo_operation.blockSignals(False)
        if self._operations:
            self.combo_operation.setCurrentIndex(0)
            self.show_operation(0)

    def show_operation(self, position: int) -> bool:
        """Tabulate one listed operation into the table."""
        if self.processor is None or not 0 <= position < len(self._operations):
            return False
        logged, index = self._operations[position]
        table = self.processor.process_logged_data(logged, index)
        self.label_summary.setText(
            f"{len(table.rows)} records, {len(table.columns)} meters"
        )
        return True

    def _on_operation_selected(self, position: int) -> None:
        self.show_operation(position)
