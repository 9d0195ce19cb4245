"""
Core log utilities for academic-console.

Log file placement, handler installation and lookup of the active log file.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from academic_console.protocols import get_console_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "academic_console"


def _get_log_dir() -> Path:
    """Return configured log directory or default."""
    config = get_console_config()
    if config.log_dir:
        return Path(config.log_dir)
    return Path.home() / ".local" / "share" / "academic_console" / "logs"


def build_log_file_path(log_dir: Optional[Path] = None) -> Path:
    """Return a fresh timestamped log file path inside the log directory."""
    log_dir = log_dir or _get_log_dir()
    prefix = get_console_config().log_prefix
    return log_dir / f"{prefix}{int(time.time())}.log"


def setup_logging(level: int = logging.INFO, log_to_file: bool = True) -> Optional[Path]:
    """
    Install console and file handlers on the package logger.

    Args:
        level: Logging level for the package logger
        log_to_file: Whether to also write to a timestamped file in the log directory

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    # Re-running setup replaces our handlers instead of stacking duplicates
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    package_logger.addHandler(stream_handler)

    if not log_to_file:
        return None

    log_path = build_log_file_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    package_logger.addHandler(file_handler)
    logger.info(f"Logging to {log_path}")
    return log_path


def get_current_log_file_path() -> str:
    """Get the current log file path from the logging system."""
    for name in (ROOT_LOGGER_NAME, None):
        for handler in logging.getLogger(name).handlers:
            if isinstance(handler, logging.FileHandler):
                return handler.baseFilename
    raise RuntimeError("No file handler installed; call setup_logging() first")
