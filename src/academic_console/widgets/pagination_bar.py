"""Previous / page numbers / next controls bound to a PaginationController."""

from typing import List, Optional

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from academic_console.services.pagination_service import PaginationController, PaginationInfo
from academic_console.theming import ColorScheme, StyleSheetGenerator

# Page buttons shown on each side of the current page
PAGE_WINDOW = 2


def visible_pages(info: PaginationInfo, window: int = PAGE_WINDOW) -> List[int]:
    first = max(1, info.current_page - window)
    last = min(info.total_pages, info.current_page + window)
    return list(range(first, last + 1))


class PaginationBar(QWidget):
    """Hidden while everything fits on one page."""

    def __init__(self, controller: PaginationController, color_scheme: Optional[ColorScheme] = None,
                 parent=None):
        super().__init__(parent)
        self._controller = controller
        self.style_gen = StyleSheetGenerator(color_scheme or ColorScheme())

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

        self.summary_label = QLabel()
        self._layout.addWidget(self.summary_label)
        self._layout.addStretch()

        self.prev_button = QPushButton("Previous")
        self.prev_button.clicked.connect(controller.prev_page)
        self._layout.addWidget(self.prev_button)

        self._pages_layout = QHBoxLayout()
        self._layout.addLayout(self._pages_layout)
        self.page_buttons: List[QPushButton] = []

        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(controller.next_page)
        self._layout.addWidget(self.next_button)

        for button in (self.prev_button, self.next_button):
            button.setStyleSheet(self.style_gen.generate_button_style("secondary"))

        controller.info_changed.connect(self._render)
        self._render(controller.info)

    def _render(self, info: PaginationInfo) -> None:
        self.summary_label.setText(f"Page {info.current_page} of {info.total_pages} ({info.total_count} items)")
        self.prev_button.setEnabled(info.has_prev)
        self.next_button.setEnabled(info.has_next)

        for button in self.page_buttons:
            self._pages_layout.removeWidget(button)
            button.deleteLater()
        self.page_buttons = []
        for page in visible_pages(info):
            button = QPushButton(str(page))
            button.setCheckable(True)
            button.setStyleSheet(self.style_gen.generate_page_button_style())
            button.setChecked(page == info.current_page)
            button.clicked.connect(lambda _checked, p=page: self._controller.go_to(p))
            self._pages_layout.addWidget(button)
            self.page_buttons.append(button)

        self.setVisible(info.total_pages > 1)
