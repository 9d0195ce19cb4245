"""
Table of one page of resource records.

Columns come from the schema's ColumnDef list. The first column carries the
record's index in UserRole so selection maps back to the page's records.
"""

from typing import Any, Dict, List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QStackedLayout,
    QTableWidget,
    QTableWidgetItem,
    QWidget,
)

from academic_console.forms.field_codec import format_cell
from academic_console.forms.field_schema import ResourceSchema
from academic_console.theming import ColorScheme, StyleSheetGenerator


class ResourceTableWidget(QWidget):
    """
    Read-only, single-selection table with loading and empty states.

    Signals:
        record_selected(dict): Newly selected record
        record_activated(dict): Double-clicked record (opens the editor)
    """

    record_selected = pyqtSignal(object)
    record_activated = pyqtSignal(object)

    def __init__(self, schema: ResourceSchema, color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self.schema = schema
        self.color_scheme = color_scheme or ColorScheme()
        self.style_gen = StyleSheetGenerator(self.color_scheme)
        self._records: List[Dict[str, Any]] = []

        self._stack = QStackedLayout(self)

        self.table_widget = QTableWidget()
        self._configure_table()
        self._stack.addWidget(self.table_widget)

        self.placeholder_label = QLabel()
        self.placeholder_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.placeholder_label.setStyleSheet(self.style_gen.generate_placeholder_style())
        self._stack.addWidget(self.placeholder_label)

        self.table_widget.itemSelectionChanged.connect(self._on_selection_changed)
        self.table_widget.itemDoubleClicked.connect(self._on_double_click)
        self.set_records([])

    def _configure_table(self):
        columns = self.schema.columns
        self.table_widget.setColumnCount(len(columns))
        self.table_widget.setHorizontalHeaderLabels([col.name for col in columns])
        self.table_widget.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table_widget.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table_widget.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table_widget.verticalHeader().setVisible(False)
        self.table_widget.setAlternatingRowColors(True)

        header = self.table_widget.horizontalHeader()
        for i, col in enumerate(columns):
            header.setSectionResizeMode(i, QHeaderView.ResizeMode.Interactive)
            if col.width:
                self.table_widget.setColumnWidth(i, col.width)
        header.setStretchLastSection(True)
        self.table_widget.setStyleSheet(self.style_gen.generate_table_widget_style())

    # --- Data -----------------------------------------------------------

    @property
    def records(self) -> List[Dict[str, Any]]:
        return list(self._records)

    def set_records(self, records: List[Dict[str, Any]]) -> None:
        self._records = list(records)
        self.populate_table()
        if records:
            self._stack.setCurrentWidget(self.table_widget)
        else:
            self.placeholder_label.setText(f"No {self.schema.plural} found")
            self._stack.setCurrentWidget(self.placeholder_label)

    def set_loading(self, loading: bool) -> None:
        self.table_widget.setEnabled(not loading)
        if loading and not self._records:
            self.placeholder_label.setText(f"Loading {self.schema.plural}...")
            self._stack.setCurrentWidget(self.placeholder_label)

    def populate_table(self):
        self.table_widget.setRowCount(len(self._records))
        for row, record in enumerate(self._records):
            for col, column in enumerate(self.schema.columns):
                table_item = QTableWidgetItem(format_cell(column.render(record)))
                if col == 0:
                    table_item.setData(Qt.ItemDataRole.UserRole, row)
                self.table_widget.setItem(row, col, table_item)

    # --- Selection ------------------------------------------------------

    def selected_record(self) -> Optional[Dict[str, Any]]:
        rows = {item.row() for item in self.table_widget.selectedItems()}
        if not rows:
            return None
        return self._record_at(min(rows))

    def _record_at(self, row: int) -> Optional[Dict[str, Any]]:
        key_item = self.table_widget.item(row, 0)
        if key_item is None:
            return None
        return self._records[key_item.data(Qt.ItemDataRole.UserRole)]

    def _on_selection_changed(self):
        record = self.selected_record()
        if record is None:
            return  # Valid: user clicked empty area
        self.record_selected.emit(record)

    def _on_double_click(self, table_item: QTableWidgetItem):
        record = self._record_at(table_item.row())
        if record is not None:
            self.record_activated.emit(record)
