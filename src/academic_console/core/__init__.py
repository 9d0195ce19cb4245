"""
Core PyQt6 utilities.

Timers, background execution and logging setup with no domain-specific logic.
"""

from .debounce_timer import DebounceTimer
from .countdown_timer import CountdownTimer
from .background_task import (
    TaskRunner,
    BackgroundTask,
    BackgroundTaskManager,
    ImmediateTaskRunner,
)

__all__ = [
    "DebounceTimer",
    "CountdownTimer",
    "TaskRunner",
    "BackgroundTask",
    "BackgroundTaskManager",
    "ImmediateTaskRunner",
]
