"""Trailing debounce for the search box."""

from typing import Callable

from PyQt6.QtCore import QTimer


class DebounceTimer:
    """
    Fires handler once input has been quiet for delay_ms.

    Every trigger() restarts the wait. Pressing Return calls force(); closing
    the screen calls cancel() so nothing fires into a torn-down manager.

        self._search_debounce = DebounceTimer(delay_ms=300, handler=self._apply_search)
        self.search_input.textChanged.connect(lambda _: self._search_debounce.trigger())
        self.search_input.returnPressed.connect(self._search_debounce.force)
    """

    def __init__(self, delay_ms: int, handler: Callable[[], None]):
        self._handler = handler
        self._timer = QTimer()
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(handler)

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    @property
    def pending(self) -> bool:
        return self._timer.isActive()

    def trigger(self) -> None:
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()

    def force(self) -> None:
        """Fire now; a pending trigger is consumed, not repeated."""
        self._timer.stop()
        self._handler()
