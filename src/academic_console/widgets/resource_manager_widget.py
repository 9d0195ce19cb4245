"""
One resource screen: header, scope filter, search, actions, notification
banner, table and pagination, all driven by a ResourceManager.
"""

from typing import Any, Dict, List, Optional, Tuple
import logging

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from academic_console.core import DebounceTimer
from academic_console.forms.field_schema import Option
from academic_console.protocols import ComboBoxAdapter, get_console_config
from academic_console.services.resource_manager import ResourceManager
from academic_console.theming import ColorScheme, StyleSheetGenerator
from .notification_banner import NotificationBanner
from .pagination_bar import PaginationBar
from .resource_form_dialog import ResourceFormDialog
from .resource_table_widget import ResourceTableWidget

logger = logging.getLogger(__name__)


class ResourceManagerWidget(QWidget):
    """
    Generic CRUD screen for one ResourceSchema.

    Call load() once the widget is shown; closing the widget tears down the
    manager's timers and background work.
    """

    # (label, action id, tooltip, button style variant)
    BUTTON_CONFIGS: List[Tuple[str, str, str, str]] = [
        ("Add", "add", "Add a new record", "primary"),
        ("Edit", "edit", "Edit the selected record", "secondary"),
        ("Delete", "delete", "Delete the selected record", "danger"),
        ("Refresh", "refresh", "Reload the current page", "secondary"),
    ]
    ACTION_REGISTRY: Dict[str, str] = {
        "add": "action_add",
        "edit": "action_edit",
        "delete": "action_delete",
        "refresh": "action_refresh",
    }

    def __init__(self, manager: ResourceManager, color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self.manager = manager
        self.schema = manager.schema
        self.color_scheme = color_scheme or ColorScheme()
        self.style_gen = StyleSheetGenerator(self.color_scheme)
        self.buttons: Dict[str, QPushButton] = {}
        self.scope_combo: Optional[ComboBoxAdapter] = None

        self._search_debounce = DebounceTimer(
            delay_ms=get_console_config().search_debounce_ms,
            handler=self._apply_search,
        )

        self.setup_ui()
        self._setup_connections()
        self.dialog = ResourceFormDialog(manager, color_scheme=self.color_scheme, parent=self)

    def setup_ui(self) -> None:
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(6)

        main_layout.addWidget(self._create_header())
        main_layout.addLayout(self._create_toolbar())

        self.banner = NotificationBanner(self.manager.notifications, self.color_scheme)
        main_layout.addWidget(self.banner)

        self.table = ResourceTableWidget(self.schema, self.color_scheme)
        main_layout.addWidget(self.table, 1)

        self.pagination_bar = PaginationBar(self.manager.pagination, self.color_scheme)
        main_layout.addWidget(self.pagination_bar)

    def _create_header(self) -> QWidget:
        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(0, 0, 0, 0)

        title_label = QLabel(self.schema.title)
        title_label.setFont(QFont("Arial", 12, QFont.Weight.Bold))
        title_label.setStyleSheet(f"color: {self.color_scheme.to_hex(self.color_scheme.text_accent)};")
        header_layout.addWidget(title_label)
        header_layout.addStretch()

        self.status_label = QLabel("Ready")
        self.status_label.setStyleSheet(f"color: {self.color_scheme.to_hex(self.color_scheme.text_secondary)};")
        header_layout.addWidget(self.status_label)
        return header

    def _create_toolbar(self) -> QHBoxLayout:
        toolbar = QHBoxLayout()

        scope = self.schema.scope
        if scope is not None:
            toolbar.addWidget(QLabel(f"{scope.label.capitalize()}:"))
            self.scope_combo = ComboBoxAdapter()
            placeholder = f"Select a {scope.label}..." if scope.required else f"All {scope.label}s"
            self.scope_combo.set_placeholder(placeholder)
            self.scope_combo.setMinimumWidth(260)
            self.scope_combo.setStyleSheet(self.style_gen.generate_combobox_style())
            toolbar.addWidget(self.scope_combo)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText(self.schema.search_placeholder)
        self.search_input.setClearButtonEnabled(True)
        toolbar.addWidget(self.search_input, 1)

        for label, action_id, tooltip, variant in self.BUTTON_CONFIGS:
            button = QPushButton(label)
            button.setToolTip(tooltip)
            button.setStyleSheet(self.style_gen.generate_button_style(variant))
            button.clicked.connect(lambda checked, a=action_id: self.handle_button_action(a))
            self.buttons[action_id] = button
            toolbar.addWidget(button)
        return toolbar

    def _setup_connections(self) -> None:
        store = self.manager.store
        store.items_changed.connect(self.table.set_records)
        store.items_changed.connect(lambda items: self._update_status())
        store.loading_changed.connect(self.table.set_loading)
        store.loading_changed.connect(lambda loading: self._update_status())

        self.manager.search_changed.connect(self._on_search_reset)
        self.manager.scope_options_changed.connect(self._set_scope_options)

        self.search_input.textChanged.connect(lambda _text: self._search_debounce.trigger())
        self.search_input.returnPressed.connect(self._search_debounce.force)
        if self.scope_combo is not None:
            self.scope_combo.connect_change_signal(self.manager.set_scope)

        self.table.record_activated.connect(self._open_editor)

    # --- Actions --------------------------------------------------------

    def handle_button_action(self, action: str) -> None:
        """Dispatch a toolbar action through ACTION_REGISTRY."""
        method_name = self.ACTION_REGISTRY.get(action)
        if method_name is None:
            logger.warning(f"Unknown action: {action}")
            return
        getattr(self, method_name)()

    def action_add(self) -> None:
        if self.manager.open_add():
            self.dialog.open()

    def action_edit(self) -> None:
        record = self.table.selected_record()
        if record is None:
            self.manager.notifications.error(f"No {self.schema.noun_lower} selected")
            return
        self._open_editor(record)

    def action_delete(self) -> None:
        record = self.table.selected_record()
        if record is None:
            self.manager.notifications.error(f"No {self.schema.noun_lower} selected")
            return
        self.manager.delete(record.get("id"), confirm=self._confirm)

    def action_refresh(self) -> None:
        self.manager.refresh()

    def _open_editor(self, record: Dict[str, Any]) -> None:
        if self.manager.open_edit(record):
            self.dialog.open()

    def _confirm(self, text: str) -> bool:
        answer = QMessageBox.question(
            self,
            f"Delete {self.schema.singular}",
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    # --- Search / scope -------------------------------------------------

    def _apply_search(self) -> None:
        self.manager.search(self.search_input.text())

    def _on_search_reset(self, text: str) -> None:
        self._search_debounce.cancel()
        self.search_input.blockSignals(True)
        try:
            self.search_input.setText(text)
        finally:
            self.search_input.blockSignals(False)

    def _set_scope_options(self, options: List[Option]) -> None:
        if self.scope_combo is None:
            return
        scope = self.schema.scope
        if not scope.required:
            # Blank value lifts the scope and brings back the paged, searchable list
            options = [("", f"All {scope.label}s"), *options]
        self.scope_combo.set_options(options)

    # --- Status / lifetime ----------------------------------------------

    def _update_status(self) -> None:
        store = self.manager.store
        if store.loading:
            self.status_label.setText(f"Loading {self.schema.plural}...")
        else:
            self.status_label.setText(f"Total: {store.pagination.total_count} items")

    def load(self) -> None:
        self.manager.load()

    def teardown(self) -> None:
        self._search_debounce.cancel()
        self.manager.teardown()

    def closeEvent(self, event):
        self.teardown()
        super().closeEvent(event)
