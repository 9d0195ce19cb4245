"""
Add/edit dialog generated from a ResourceSchema.

The dialog owns no state of its own: every edit goes to the manager's
FormLifecycle, and the dialog follows the lifecycle's signals (draft,
field errors, saving flag, mode).
"""

from typing import Any, Dict, List, Optional
import logging

from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from academic_console.forms.field_schema import FieldKind, Option
from academic_console.forms.widget_factory import WidgetFactory
from academic_console.protocols import FieldWidget
from academic_console.services.form_lifecycle import FormMode
from academic_console.services.resource_manager import ResourceManager
from academic_console.theming import ColorScheme, StyleSheetGenerator
from .notification_banner import NotificationBanner

logger = logging.getLogger(__name__)


class ResourceFormDialog(QDialog):
    """Modal form bound to one ResourceManager."""

    def __init__(self, manager: ResourceManager, color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self.manager = manager
        self.schema = manager.schema
        self.style_gen = StyleSheetGenerator(color_scheme or ColorScheme())
        self.widgets: Dict[str, FieldWidget] = {}
        self.error_labels: Dict[str, QLabel] = {}
        self._populating = False

        self.setModal(True)
        self.setMinimumWidth(520)
        self.setStyleSheet(self.style_gen.generate_dialog_style())
        self._setup_ui()
        self._setup_connections()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        self.subtitle_label = QLabel(f"Enter {self.schema.noun_lower} details below")
        layout.addWidget(self.subtitle_label)

        # Errors raised while the dialog is open are shown inside it
        self.banner = NotificationBanner(self.manager.notifications, parent=self)
        layout.addWidget(self.banner)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        body = QWidget()
        form_layout = QFormLayout(body)
        factory = WidgetFactory()

        for spec in self.schema.fields:
            widget = factory.create_widget(spec)
            if spec.kind is FieldKind.CHOICE and not spec.choices:
                widget.set_options(self.manager.field_options(spec.name))
            self.widgets[spec.name] = widget

            error_label = QLabel()
            error_label.setProperty("role", "field-error")
            error_label.hide()
            self.error_labels[spec.name] = error_label

            cell = QWidget()
            cell_layout = QVBoxLayout(cell)
            cell_layout.setContentsMargins(0, 0, 0, 0)
            cell_layout.setSpacing(2)
            cell_layout.addWidget(widget)
            cell_layout.addWidget(error_label)

            label = f"{spec.label} *" if spec.required else spec.label
            form_layout.addRow(label, cell)

        scroll.setWidget(body)
        layout.addWidget(scroll, 1)

        self.button_box = QDialogButtonBox()
        self.save_button = self.button_box.addButton("Save", QDialogButtonBox.ButtonRole.AcceptRole)
        self.cancel_button = self.button_box.addButton("Cancel", QDialogButtonBox.ButtonRole.RejectRole)
        self.save_button.setStyleSheet(self.style_gen.generate_button_style())
        self.cancel_button.setStyleSheet(self.style_gen.generate_button_style("secondary"))
        layout.addWidget(self.button_box)

    def _setup_connections(self):
        form = self.manager.form
        form.draft_changed.connect(self._populate)
        form.field_errors_changed.connect(self._show_errors)
        form.saving_changed.connect(self._set_saving)
        form.mode_changed.connect(self._on_mode_changed)
        self.manager.field_options_changed.connect(self._set_field_options)

        self.save_button.clicked.connect(self.manager.submit)
        self.cancel_button.clicked.connect(self.manager.cancel)

        for name, widget in self.widgets.items():
            widget.connect_change_signal(lambda value, name=name: self._on_widget_changed(name, value))

    # --- Lifecycle → widgets --------------------------------------------

    def _populate(self, draft: Dict[str, Any]) -> None:
        self._populating = True
        try:
            for name, widget in self.widgets.items():
                widget.set_value(draft.get(name))
            file_spec = self.schema.file_field
            original = self.manager.form.state.original or {}
            if file_spec is not None:
                existing = original.get(file_spec.name)
                self.widgets[file_spec.name].set_placeholder(
                    f"Current file: {existing}" if existing else "No file chosen"
                )
        finally:
            self._populating = False

    def _show_errors(self, errors: Dict[str, str]) -> None:
        for name, label in self.error_labels.items():
            message = errors.get(name)
            label.setText(message or "")
            label.setVisible(bool(message))
            self.widgets[name].set_invalid(bool(message))

    def _set_saving(self, saving: bool) -> None:
        self.save_button.setEnabled(not saving)
        self.cancel_button.setEnabled(not saving)
        self.save_button.setText("Saving..." if saving else "Save")

    def _on_mode_changed(self, mode: FormMode) -> None:
        if mode is FormMode.ADD:
            self.setWindowTitle(f"Add new {self.schema.singular}")
        elif mode is FormMode.EDIT:
            self.setWindowTitle(f"Edit {self.schema.singular}")
        elif mode is FormMode.CLOSED and self.isVisible():
            super().accept()

    def _set_field_options(self, name: str, options: List[Option]) -> None:
        widget = self.widgets.get(name)
        if widget is None:
            return
        self._populating = True
        try:
            widget.set_options(options)
            widget.set_value(self.manager.form.state.draft.get(name))
        finally:
            self._populating = False

    # --- Widgets → lifecycle --------------------------------------------

    def _on_widget_changed(self, name: str, value: Any) -> None:
        if self._populating:
            return
        self.manager.set_field(name, value)

    def reject(self) -> None:
        """Escape / window close behave like Cancel; ignored while saving."""
        if self.manager.cancel():
            super().reject()
