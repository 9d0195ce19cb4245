"""
Widget adapters that wrap Qt widgets to implement the field ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QComboBox.currentData()
- QLineEdit.setText() vs QSpinBox.setValue() vs QComboBox.setCurrentIndex()
- textChanged vs valueChanged vs currentIndexChanged

Every adapter is a FieldWidget (get/set value, change signal, invalid
flag); PlaceholderCapable and RangeConfigurable where Qt supports them.

Values are always in draft form: text as str, numbers as int, flags as bool,
list fields as list[str]. Joining and splitting of list fields happens here,
at the display edge, and nowhere else in the form.
"""

from typing import Any, Callable, Dict, Iterable, Tuple
from abc import ABCMeta
from pathlib import Path

from PyQt6.QtWidgets import (
    QLineEdit, QPlainTextEdit, QSpinBox, QComboBox, QCheckBox,
    QWidget, QHBoxLayout, QPushButton, QFileDialog
)
from PyQt6.QtCore import QObject

from academic_console.forms.field_codec import split_list, join_list
from .widget_protocols import FieldWidget, PlaceholderCapable, RangeConfigurable

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class _FieldWidgetBase:
    """
    Shared behaviour of every field adapter.

    Remembers the wrapper connected for each callback so disconnect really
    disconnects, and flags invalid inputs through the ``invalid`` dynamic
    property the dialog stylesheet keys on.
    """

    def set_invalid(self, invalid: bool) -> None:
        self.setProperty("invalid", "true" if invalid else "false")
        self.style().unpolish(self)
        self.style().polish(self)

    def _wrappers(self) -> Dict[Callable, Callable]:
        if not hasattr(self, "_change_wrappers"):
            self._change_wrappers = {}
        return self._change_wrappers

    def _connect(self, signal, callback: Callable[[Any], None]) -> None:
        wrapper = lambda *_: callback(self.get_value())
        self._wrappers()[callback] = wrapper
        signal.connect(wrapper)

    def _disconnect(self, signal, callback: Callable[[Any], None]) -> None:
        wrapper = self._wrappers().pop(callback, None)
        if wrapper is None:
            return
        try:
            signal.disconnect(wrapper)
        except TypeError:
            # Signal not connected - ignore
            pass


class LineEditAdapter(QLineEdit, _FieldWidgetBase, FieldWidget,
                      PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    Text is returned as typed (validation decides what blank means).
    """

    _widget_id = "line_edit"

    def get_value(self) -> Any:
        return self.text()

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._connect(self.textChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._disconnect(self.textChanged, callback)


class ListLineEditAdapter(LineEditAdapter):
    """
    Line edit for list fields.

    Displays the list comma-joined and hands back the re-split list on
    every edit, so the draft never holds the delimited string.
    """

    _widget_id = "list_line_edit"

    def get_value(self) -> Any:
        return split_list(self.text())

    def set_value(self, value: Any) -> None:
        self.setText(join_list(value or []))


class TextEditAdapter(QPlainTextEdit, _FieldWidgetBase, FieldWidget,
                      PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """Adapter for multi-line text."""

    _widget_id = "text_edit"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setTabChangesFocus(True)
        self.setFixedHeight(80)

    def get_value(self) -> Any:
        return self.toPlainText()

    def set_value(self, value: Any) -> None:
        self.setPlainText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._connect(self.textChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._disconnect(self.textChanged, callback)


class SpinBoxAdapter(QSpinBox, _FieldWidgetBase, FieldWidget,
                     RangeConfigurable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QSpinBox.

    The range is wide open by default so out-of-range input reaches the
    validation engine instead of being silently clamped by Qt.
    """

    _widget_id = "spin_box"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRange(-2147483648, 2147483647)  # Default int range

    def wheelEvent(self, event):
        """Ignore wheel events to prevent accidental value changes."""
        event.ignore()

    def get_value(self) -> Any:
        return self.value()

    def set_value(self, value: Any) -> None:
        try:
            self.setValue(int(value) if value not in (None, "") else 0)
        except (TypeError, ValueError):
            self.setValue(0)

    def configure_range(self, minimum: float, maximum: float) -> None:
        self.setRange(int(minimum), int(maximum))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._connect(self.valueChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._disconnect(self.valueChanged, callback)


class ComboBoxAdapter(QComboBox, _FieldWidgetBase, FieldWidget,
                      PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox.

    Stores actual values in itemData, not just display text. Values are
    compared as strings so an id loaded as int matches a draft holding "3".
    """

    _widget_id = "combo_box"

    def wheelEvent(self, event):
        """Ignore wheel events to prevent accidental value changes."""
        event.ignore()

    def get_value(self) -> Any:
        if self.currentIndex() < 0:
            return ""
        data = self.itemData(self.currentIndex())
        return "" if data is None else data

    def set_value(self, value: Any) -> None:
        wanted = "" if value is None else str(value)
        for i in range(self.count()):
            if str(self.itemData(i)) == wanted:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def set_options(self, options: Iterable[Tuple[Any, str]]) -> None:
        """Replace the option list, keeping the current selection when it still exists."""
        current = self.get_value()
        self.blockSignals(True)
        try:
            self.clear()
            for value, label in options:
                self.addItem(label, value)
            self.set_value(current)
        finally:
            self.blockSignals(False)

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._connect(self.currentIndexChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._disconnect(self.currentIndexChanged, callback)


class CheckBoxAdapter(QCheckBox, _FieldWidgetBase, FieldWidget,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Returns bool values, treats None as False.
    """

    _widget_id = "check_box"

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._connect(self.stateChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._disconnect(self.stateChanged, callback)


class FilePickerAdapter(QWidget, _FieldWidgetBase, FieldWidget,
                        PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """
    Attachment chooser: read-only path display with Browse and Clear buttons.

    The value is the local path of a newly chosen file, or "" for none.
    The placeholder is used to show the file already stored on the server.
    """

    _widget_id = "file_picker"

    def __init__(self, parent=None, file_filter: str = "All files (*)"):
        super().__init__(parent)
        self._file_filter = file_filter

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self._path_edit = QLineEdit()
        self._path_edit.setReadOnly(True)
        layout.addWidget(self._path_edit, 1)

        self._browse_button = QPushButton("Browse...")
        self._browse_button.clicked.connect(self._browse)
        layout.addWidget(self._browse_button)

        self._clear_button = QPushButton("Clear")
        self._clear_button.clicked.connect(lambda: self.set_value(""))
        layout.addWidget(self._clear_button)

    def _browse(self):
        path, _ = QFileDialog.getOpenFileName(self, "Select file", "", self._file_filter)
        if path:
            self.set_value(path)

    def get_value(self) -> Any:
        return self._path_edit.text()

    def set_value(self, value: Any) -> None:
        self._path_edit.setText("" if not value else str(Path(value)))
        self._path_edit.setToolTip(self._path_edit.text())

    def set_placeholder(self, text: str) -> None:
        self._path_edit.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._connect(self._path_edit.textChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._disconnect(self._path_edit.textChanged, callback)
