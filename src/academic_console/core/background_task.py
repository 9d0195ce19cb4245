"""Background task execution for API calls, with cancellation and a synchronous twin."""

from abc import ABC, abstractmethod
from typing import Callable, Any, List, Optional, Tuple
from PyQt6.QtCore import QThread, pyqtSignal
import logging

logger = logging.getLogger(__name__)

# --- Module-level constants ---
CANCEL_WAIT_MS = 100      # Wait time when cancelling previous task
CLEANUP_WAIT_MS = 200     # Wait time during widget close cleanup


class TaskRunner(ABC):
    """
    Contract for anything that executes a callable and reports back.

    Services never call the network directly; they hand the call to a runner.
    The Qt implementation runs it on a worker thread, the immediate one runs it
    inline (tests, scripting).
    """

    @abstractmethod
    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
    ) -> Any:
        """Execute target and route its result or exception to the callbacks."""

    def cleanup(self) -> None:
        """Release any in-flight work. Default: nothing to release."""


class BackgroundTask(QThread):
    """
    Unified background task with cancellation.

    Usage:
        task = BackgroundTask(target=api.list, args=(page,))
        task.result_ready.connect(on_success)
        task.error_occurred.connect(on_error)  # Receives Exception, not str
        task.start()

        # Later:
        task.cancel()  # Signals won't emit after this
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)  # Full exception, caller decides

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self.cancelled = False

    def run(self):
        """Execute target in background, respecting cancellation."""
        try:
            result = self._target(*self._args, **self._kwargs)
            if not self.cancelled:
                self.result_ready.emit(result)
        except Exception as e:
            if not self.cancelled:
                self.error_occurred.emit(e)  # Full exception object

    def cancel(self):
        """Mark cancelled; neither signal is emitted afterwards."""
        self.cancelled = True


class BackgroundTaskManager(TaskRunner):
    """
    Runs API calls on worker threads for one screen.

    Single-flight managers (list fetches) cancel the previous call when a new
    one starts; its late result is never delivered. Concurrent managers
    (saves, deletes, option lookups) let every call finish. Either way a
    thread that is still running is kept referenced until Qt reports it
    finished.

    Usage:
        self._fetches = BackgroundTaskManager(single_flight=True, name="departments.list")
        self._fetches.run(
            target=self.api.list,
            args=(page, limit, search),
            on_success=self._on_page,
            on_error=self._on_fetch_failed,
        )

        # closeEvent / teardown
        self._fetches.cleanup()
    """

    def __init__(self, single_flight: bool = True, name: str = "tasks"):
        self._single_flight = single_flight
        self._name = name
        self._current_task: Optional[BackgroundTask] = None
        self._retired: List[BackgroundTask] = []

    @property
    def busy(self) -> bool:
        tasks = [self._current_task, *self._retired]
        return any(task is not None and task.isRunning() for task in tasks)

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
    ) -> BackgroundTask:
        """
        Start target on a worker thread.

        Args:
            target: Blocking callable, usually a ResourceApi method
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_success: Receives the return value on the GUI thread
            on_error: Receives the raised Exception on the GUI thread

        Returns:
            The started BackgroundTask
        """
        if self._single_flight and self._current_task is not None and self._current_task.isRunning():
            logger.debug(f"{self._name}: superseding running task")
            self._current_task.cancel()
            if not self._current_task.wait(CANCEL_WAIT_MS):
                self._retire(self._current_task)

        def handle_error(error: Exception) -> None:
            if on_error is None:
                logger.error(f"{self._name}: background task failed", exc_info=error)
                return
            logger.debug(f"{self._name}: background task failed: {error!r}")
            on_error(error)

        task = BackgroundTask(target=target, args=args, kwargs=kwargs)
        if on_success:
            task.result_ready.connect(on_success)
        task.error_occurred.connect(handle_error)

        if self._single_flight:
            self._current_task = task
        else:
            self._retire(task)
        task.start()
        return task

    def _retire(self, task: BackgroundTask) -> None:
        """Hold a reference until the thread finishes so Qt never destroys a running thread."""
        self._retired.append(task)
        task.finished.connect(lambda: self._retired.remove(task) if task in self._retired else None)

    def cleanup(self):
        """Cancel and wait for outstanding work. Call from closeEvent."""
        for task in [self._current_task, *self._retired]:
            if task is not None and task.isRunning():
                task.cancel()
                if not task.wait(CLEANUP_WAIT_MS):
                    logger.warning(f"{self._name}: task still running after {CLEANUP_WAIT_MS} ms")
        self._current_task = None
        self._retired = []


class ImmediateTaskRunner(TaskRunner):
    """Runs the target inline on the calling thread. Used by tests and scripts."""

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
        **_ignored,
    ) -> None:
        try:
            result = target(*args, **(kwargs or {}))
        except Exception as e:
            if on_error is None:
                raise
            on_error(e)
            return None
        if on_success:
            on_success(result)
        return None
