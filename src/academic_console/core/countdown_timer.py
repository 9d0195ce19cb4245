"""Owned countdown timer that reports percentage progress and expires once."""

from typing import Callable, Optional
import logging

from PyQt6.QtCore import QTimer

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 100
DEFAULT_TICKS = 30


class CountdownTimer:
    """
    Repeating timer that counts a fixed number of ticks down to zero.

    Progress is derived from the remaining tick count, so it starts at 100,
    drops by 100/ticks per tick and lands exactly on 0 at the last tick.
    The owner must call stop() on supersession or teardown; a stopped timer
    never calls back again.

    Usage:
        self._countdown = CountdownTimer(
            on_tick=self._set_progress,
            on_expired=self.dismiss,
        )
        self._countdown.start()
    """

    def __init__(
        self,
        on_tick: Callable[[float], None],
        on_expired: Callable[[], None],
        interval_ms: int = DEFAULT_INTERVAL_MS,
        ticks: int = DEFAULT_TICKS,
    ):
        if ticks < 1:
            raise ValueError(f"ticks must be >= 1, got {ticks}")
        self._on_tick = on_tick
        self._on_expired = on_expired
        self._interval_ms = interval_ms
        self._ticks = ticks
        self._remaining = ticks
        self._timer: Optional[QTimer] = None

    @property
    def active(self) -> bool:
        return self._timer is not None

    @property
    def remaining_ticks(self) -> int:
        return self._remaining

    @property
    def progress(self) -> float:
        return 100.0 * self._remaining / self._ticks

    @property
    def duration_ms(self) -> int:
        return self._interval_ms * self._ticks

    def start(self) -> None:
        """(Re)start from full progress, dropping any previous run."""
        self.stop()
        self._remaining = self._ticks
        self._timer = QTimer()
        self._timer.setInterval(self._interval_ms)
        self._timer.timeout.connect(self.tick)
        self._timer.start()

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def tick(self) -> None:
        """Advance one step. Public so callers can drive the countdown without an event loop."""
        if self._timer is None:
            return
        self._remaining = max(0, self._remaining - 1)
        self._on_tick(self.progress)
        if self._remaining == 0:
            self.stop()
            logger.debug(f"Countdown expired after {self.duration_ms}ms")
            self._on_expired()
