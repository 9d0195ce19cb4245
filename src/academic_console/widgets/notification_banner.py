"""Inline banner showing the screen's current notification."""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QProgressBar, QPushButton, QVBoxLayout

from academic_console.services.notification_service import Notification, NotificationController
from academic_console.theming import ColorScheme, StyleSheetGenerator


class NotificationBanner(QFrame):
    """
    Renders a NotificationController.

    Success messages show a shrinking progress bar until they dismiss
    themselves; error messages stay with a close button.
    """

    def __init__(self, controller: NotificationController, color_scheme: Optional[ColorScheme] = None,
                 parent=None):
        super().__init__(parent)
        self._controller = controller
        self.style_gen = StyleSheetGenerator(color_scheme or ColorScheme())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(4)

        row = QHBoxLayout()
        self.title_label = QLabel()
        self.title_label.setProperty("role", "title")
        row.addWidget(self.title_label)
        self.message_label = QLabel()
        self.message_label.setWordWrap(True)
        self.message_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        row.addWidget(self.message_label, 1)
        self.close_button = QPushButton("×")
        self.close_button.setFlat(True)
        self.close_button.setFixedWidth(24)
        self.close_button.clicked.connect(controller.dismiss)
        row.addWidget(self.close_button)
        layout.addLayout(row)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(4)
        self.progress_bar.setStyleSheet(self.style_gen.generate_progress_bar_style())
        layout.addWidget(self.progress_bar)

        controller.notification_changed.connect(self._render)
        controller.progress_changed.connect(self._set_progress)
        self._render(controller.current)

    def _render(self, notification: Optional[Notification]) -> None:
        if notification is None:
            self.hide()
            return
        self.setStyleSheet(self.style_gen.generate_notification_style(notification.is_error))
        self.title_label.setText("Operation Failed" if notification.is_error else "Operation Successful")
        self.message_label.setText(notification.text)
        self.progress_bar.setVisible(not notification.is_error)
        self._set_progress(notification.progress)
        self.show()

    def _set_progress(self, progress: float) -> None:
        self.progress_bar.setValue(round(progress))
