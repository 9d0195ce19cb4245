"""
QStyleSheet generator for the console widgets.

Turns a ColorScheme into stylesheet strings so no widget hardcodes colors.
"""

import logging
from typing import Dict, Tuple

from .color_scheme import ColorScheme, RGB

logger = logging.getLogger(__name__)

BUTTON_VARIANTS = ("primary", "secondary", "danger")


class StyleSheetGenerator:
    """Generates QStyleSheet strings from a ColorScheme."""

    def __init__(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def update_color_scheme(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def _darker(self, color: RGB, factor: int) -> str:
        return self.color_scheme.to_qcolor(color).darker(factor).name()

    def _button_palette(self, variant: str) -> Dict[str, str]:
        cs = self.color_scheme
        if variant == "primary":
            return {
                "bg": cs.to_hex(cs.button_normal_bg),
                "hover": cs.to_hex(cs.button_hover_bg),
                "pressed": cs.to_hex(cs.button_pressed_bg),
                "text": cs.to_hex(cs.button_text),
                "border": "none",
            }
        if variant == "secondary":
            return {
                "bg": cs.to_hex(cs.panel_bg),
                "hover": cs.to_hex(cs.hover_bg),
                "pressed": cs.to_hex(cs.selection_bg),
                "text": cs.to_hex(cs.text_primary),
                "border": f"1px solid {cs.to_hex(cs.border_color)}",
            }
        if variant == "danger":
            return {
                "bg": cs.to_hex(cs.status_error),
                "hover": self._darker(cs.status_error, 115),
                "pressed": self._darker(cs.status_error, 130),
                "text": cs.to_hex(cs.button_text),
                "border": "none",
            }
        raise ValueError(f"Unknown button variant {variant!r}; expected one of {BUTTON_VARIANTS}")

    def generate_dialog_style(self) -> str:
        """
        Generate QStyleSheet for the add/edit dialog.

        Inputs flagged with the dynamic property ``invalid=true`` get the
        error border; labels with ``role=field-error`` show the message.
        """
        cs = self.color_scheme
        return f"""
            QDialog {{
                background-color: {cs.to_hex(cs.panel_bg)};
                color: {cs.to_hex(cs.text_primary)};
            }}
            QLabel {{
                color: {cs.to_hex(cs.text_primary)};
            }}
            QLabel[role="field-error"] {{
                color: {cs.to_hex(cs.status_error)};
                font-size: 11px;
            }}
            QLineEdit, QPlainTextEdit, QSpinBox {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 4px;
                padding: 4px 6px;
            }}
            QLineEdit:focus, QPlainTextEdit:focus, QSpinBox:focus {{
                border: 1px solid {cs.to_hex(cs.input_focus_border)};
            }}
            *[invalid="true"] {{
                border: 1px solid {cs.to_hex(cs.input_error_border)};
            }}
        """

    def generate_table_widget_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QTableWidget {{
                background-color: {cs.to_hex(cs.panel_bg)};
                alternate-background-color: {cs.to_hex(cs.hover_bg)};
                color: {cs.to_hex(cs.text_primary)};
                border: 1px solid {cs.to_hex(cs.border_color)};
                gridline-color: {cs.to_hex(cs.border_color)};
            }}
            QTableWidget::item:selected {{
                background-color: {cs.to_hex(cs.selection_bg)};
                color: {cs.to_hex(cs.selection_text)};
            }}
            QHeaderView::section {{
                background-color: {cs.to_hex(cs.window_bg)};
                color: {cs.to_hex(cs.text_secondary)};
                padding: 6px;
                border: none;
                border-bottom: 1px solid {cs.to_hex(cs.border_color)};
                font-weight: bold;
                text-transform: uppercase;
            }}
        """

    def generate_placeholder_style(self) -> str:
        """Muted centered text shown while loading or when a list is empty."""
        cs = self.color_scheme
        return f"color: {cs.to_hex(cs.text_secondary)}; font-style: italic; padding: 24px;"

    def generate_button_style(self, variant: str = "primary") -> str:
        """
        Generate QStyleSheet for a toolbar or dialog button.

        Args:
            variant: "primary" for the main action, "secondary" for neutral
                actions, "danger" for destructive ones

        Raises:
            ValueError: for an unknown variant
        """
        cs = self.color_scheme
        p = self._button_palette(variant)
        return f"""
            QPushButton {{
                background-color: {p['bg']};
                color: {p['text']};
                border: {p['border']};
                border-radius: 4px;
                padding: 5px 12px;
            }}
            QPushButton:hover {{
                background-color: {p['hover']};
            }}
            QPushButton:pressed {{
                background-color: {p['pressed']};
            }}
            QPushButton:disabled {{
                background-color: {cs.to_hex(cs.button_disabled_bg)};
                color: {cs.to_hex(cs.button_disabled_text)};
                border: none;
            }}
        """

    def generate_page_button_style(self) -> str:
        """Numbered page buttons: neutral until checked as the current page."""
        cs = self.color_scheme
        return self.generate_button_style("secondary") + f"""
            QPushButton {{
                min-width: 28px;
                padding: 4px 6px;
            }}
            QPushButton:checked {{
                background-color: {cs.to_hex(cs.button_normal_bg)};
                color: {cs.to_hex(cs.button_text)};
                border: none;
            }}
        """

    def generate_combobox_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QComboBox {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 4px;
                padding: 4px 6px;
            }}
            QComboBox QAbstractItemView {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                selection-background-color: {cs.to_hex(cs.selection_bg)};
            }}
        """

    def _status_colors(self, is_error: bool) -> Tuple[RGB, RGB]:
        cs = self.color_scheme
        if is_error:
            return cs.status_error, cs.status_error_bg
        return cs.status_success, cs.status_success_bg

    def generate_notification_style(self, is_error: bool) -> str:
        """Banner frame for success/error notifications."""
        cs = self.color_scheme
        fg, bg = self._status_colors(is_error)
        return f"""
            QFrame {{
                background-color: {cs.to_hex(bg)};
                border: 1px solid {cs.to_hex(fg)};
                border-radius: 4px;
            }}
            QLabel {{
                color: {cs.to_hex(fg)};
                border: none;
            }}
            QLabel[role="title"] {{
                font-weight: bold;
            }}
        """

    def generate_progress_bar_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QProgressBar {{
                border: none;
                max-height: 4px;
                background-color: {cs.to_hex(cs.progress_bg)};
            }}
            QProgressBar::chunk {{
                background-color: {cs.to_hex(cs.progress_fill)};
            }}
        """

    def get_status_color_hex(self, status_type: str) -> str:
        """Hex color for "success" or "error"; anything else gets the accent color."""
        cs = self.color_scheme
        if status_type not in ("success", "error"):
            return cs.to_hex(cs.text_accent)
        fg, _ = self._status_colors(status_type == "error")
        return cs.to_hex(fg)
