"""Tests for core utilities."""

import logging

import pytest


def test_debounce_force_and_cancel(qapp):
    """force() fires now; cancel() drops a pending trigger."""
    from academic_console.core import DebounceTimer

    fired = []
    debounce = DebounceTimer(delay_ms=1000, handler=lambda: fired.append(True))
    debounce.trigger()
    assert debounce.pending
    debounce.cancel()
    assert not debounce.pending
    assert fired == []

    debounce.trigger()
    debounce.force()
    assert fired == [True]
    assert not debounce.pending


def test_immediate_runner_routes_results():
    from academic_console.core import ImmediateTaskRunner

    runner = ImmediateTaskRunner()
    results, errors = [], []
    runner.run(target=lambda a, b: a + b, args=(1, 2), on_success=results.append, on_error=errors.append)
    runner.run(target=lambda: 1 / 0, on_success=results.append, on_error=errors.append)
    assert results == [3]
    assert isinstance(errors[0], ZeroDivisionError)


def test_immediate_runner_raises_without_error_callback():
    from academic_console.core import ImmediateTaskRunner

    with pytest.raises(ZeroDivisionError):
        ImmediateTaskRunner().run(target=lambda: 1 / 0)


def test_background_task_emits_result(qapp):
    """BackgroundTask.run delivers the result through result_ready."""
    from academic_console.core import BackgroundTask

    task = BackgroundTask(target=lambda value: value * 2, args=(21,))
    received = []
    task.result_ready.connect(received.append)
    task.run()
    assert received == [42]

    task.cancel()
    task.run()
    assert received == [42]


def test_config_from_env():
    from academic_console.protocols import ConsoleConfig

    config = ConsoleConfig.from_env({
        "ACADEMIC_CONSOLE_API_URL": "https://console.example.edu/api",
        "ACADEMIC_CONSOLE_PAGE_SIZE": "25",
        "ACADEMIC_CONSOLE_TOKEN": "",
    })
    assert config.api_base_url == "https://console.example.edu/api"
    assert config.page_size == 25
    assert config.auth_token is None
    assert config.notification_ticks == 30


def test_setup_logging_writes_to_log_dir(tmp_path):
    from academic_console.core.log_utils import (
        ROOT_LOGGER_NAME,
        get_current_log_file_path,
        setup_logging,
    )
    from academic_console.protocols import ConsoleConfig, set_console_config

    set_console_config(ConsoleConfig(log_dir=str(tmp_path)))
    path = setup_logging(level=logging.DEBUG)
    try:
        assert path.parent == tmp_path
        assert path.name.startswith("academic_console_")
        assert get_current_log_file_path() == str(path)

        setup_logging(level=logging.DEBUG)
        file_handlers = [h for h in logging.getLogger(ROOT_LOGGER_NAME).handlers
                         if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
    finally:
        setup_logging(log_to_file=False)
