"""Tests for the countdown timer and notification controller."""

import pytest


def test_countdown_progress_reaches_zero_on_last_tick(qapp):
    """Progress drops strictly each tick and expiry fires exactly once."""
    from academic_console.core import CountdownTimer

    progress = []
    expired = []
    timer = CountdownTimer(on_tick=progress.append, on_expired=lambda: expired.append(True))
    timer.start()
    for _ in range(40):
        timer.tick()

    assert len(progress) == 30
    assert all(a > b for a, b in zip(progress, progress[1:]))
    assert progress[-1] == 0
    assert expired == [True]
    assert not timer.active


def test_countdown_stop_prevents_callbacks(qapp):
    """A stopped countdown never calls back."""
    from academic_console.core import CountdownTimer

    calls = []
    timer = CountdownTimer(on_tick=calls.append, on_expired=lambda: calls.append("expired"), ticks=3)
    timer.start()
    timer.tick()
    timer.stop()
    timer.tick()
    timer.tick()
    assert len(calls) == 1


def test_countdown_rejects_zero_ticks():
    """Tick count must be positive."""
    from academic_console.core import CountdownTimer

    with pytest.raises(ValueError):
        CountdownTimer(on_tick=lambda p: None, on_expired=lambda: None, ticks=0)


def test_success_notification_dismisses_after_countdown(qapp):
    """Success messages count down and clear themselves on the 30th tick."""
    from academic_console.services import NotificationController

    controller = NotificationController()
    seen = []
    controller.progress_changed.connect(seen.append)
    controller.success("Department created successfully!")
    assert controller.current.progress == 100.0

    for _ in range(29):
        controller.countdown.tick()
    assert controller.current is not None
    assert controller.current.progress == pytest.approx(100.0 / 30)

    controller.countdown.tick()
    assert controller.current is None
    assert all(a > b for a, b in zip(seen, seen[1:]))


def test_error_notification_persists(qapp):
    """Errors have no countdown and stay until dismissed."""
    from academic_console.services import NotificationController

    controller = NotificationController()
    controller.error("Failed to fetch departments")
    assert not controller.countdown.active
    controller.countdown.tick()
    assert controller.current.text == "Failed to fetch departments"

    controller.dismiss()
    assert controller.current is None


def test_new_notification_cancels_previous_countdown(qapp):
    """An older success countdown never clears a newer error."""
    from academic_console.services import NotificationController

    controller = NotificationController(ticks=2)
    controller.success("Saved")
    controller.countdown.tick()
    controller.error("Broken")
    controller.countdown.tick()
    controller.countdown.tick()
    assert controller.current.is_error
    assert controller.current.text == "Broken"


def test_clear_error_leaves_success(qapp):
    """clear_error only removes error notifications."""
    from academic_console.services import NotificationController

    controller = NotificationController()
    changes = []
    controller.notification_changed.connect(changes.append)

    controller.success("Saved")
    controller.clear_error()
    assert controller.current.text == "Saved"

    controller.error("Invalid")
    controller.clear_error()
    assert controller.current is None
    assert changes[-1] is None
    controller.teardown()


def test_intervals_come_from_config(qapp):
    """Countdown window is read from ConsoleConfig."""
    from academic_console.protocols import ConsoleConfig, set_console_config
    from academic_console.services import NotificationController

    set_console_config(ConsoleConfig(notification_interval_ms=50, notification_ticks=4))
    controller = NotificationController()
    assert controller.countdown.duration_ms == 200
