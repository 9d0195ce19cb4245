"""
Single transient notification per screen.

Success notifications count down and dismiss themselves; error notifications
stay until dismissed or until the user edits a form field.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from academic_console.core import CountdownTimer
from academic_console.protocols import get_console_config

logger = logging.getLogger(__name__)


class NotificationKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """
    One visible message.

    progress is meaningful for success notifications only; it runs from 100
    down to 0 over the countdown window.
    """
    kind: NotificationKind
    text: str
    progress: float = 100.0

    @property
    def is_error(self) -> bool:
        return self.kind is NotificationKind.ERROR


class NotificationController(QObject):
    """
    Owns the current notification and its countdown.

    A new notification always cancels the previous countdown first, so an
    older timer can never clear a newer message.
    """

    notification_changed = pyqtSignal(object)  # Notification or None
    progress_changed = pyqtSignal(float)

    def __init__(self, interval_ms: Optional[int] = None, ticks: Optional[int] = None, parent=None):
        super().__init__(parent)
        config = get_console_config()
        self._current: Optional[Notification] = None
        self._countdown = CountdownTimer(
            on_tick=self._on_progress,
            on_expired=self._on_expired,
            interval_ms=interval_ms if interval_ms is not None else config.notification_interval_ms,
            ticks=ticks if ticks is not None else config.notification_ticks,
        )

    @property
    def current(self) -> Optional[Notification]:
        return self._current

    @property
    def countdown(self) -> CountdownTimer:
        return self._countdown

    def notify(self, kind: NotificationKind, text: str) -> Notification:
        """Replace any current notification."""
        self._countdown.stop()
        self._current = Notification(kind=kind, text=text)
        if kind is NotificationKind.SUCCESS:
            self._countdown.start()
        logger.debug(f"Notification {kind.value}: {text}")
        self.notification_changed.emit(self._current)
        return self._current

    def success(self, text: str) -> Notification:
        return self.notify(NotificationKind.SUCCESS, text)

    def error(self, text: str) -> Notification:
        return self.notify(NotificationKind.ERROR, text)

    def dismiss(self) -> None:
        self._countdown.stop()
        if self._current is None:
            return
        self._current = None
        self.notification_changed.emit(None)

    def clear_error(self) -> None:
        """Drop the notification only if it is an error (stale after a field edit)."""
        if self._current is not None and self._current.is_error:
            self.dismiss()

    def teardown(self) -> None:
        """Stop timers; call when the owning view closes."""
        self._countdown.stop()

    def _on_progress(self, progress: float) -> None:
        if self._current is None:
            return
        self._current = replace(self._current, progress=progress)
        self.progress_changed.emit(progress)

    def _on_expired(self) -> None:
        self.dismiss()
