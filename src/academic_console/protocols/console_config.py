"""Application configuration for the console.

Provides the knobs the services and widgets read at runtime: API location,
paging, timer windows, upload limits and log placement.
"""

from typing import Optional, List, Mapping
from dataclasses import dataclass, field
import os

ENV_PREFIX = "ACADEMIC_CONSOLE_"


@dataclass
class ConsoleConfig:
    """Base configuration for the console.

    Applications can subclass this or build one from the environment.

    Attributes:
        api_base_url: Root of the REST API (every endpoint path is relative to it)
        request_timeout: Seconds before an HTTP call is abandoned
        auth_token: Optional bearer token sent with every request
        page_size: Records per list page
        search_debounce_ms: Idle time before typed search text triggers a fetch
        notification_interval_ms: Countdown step for success notifications
        notification_ticks: Number of countdown steps before auto-dismiss
        max_upload_bytes: Largest attachment accepted by file-bearing forms
        allowed_upload_extensions: Attachment extensions accepted by file-bearing forms
        log_dir: Directory for log files (None = default per-user location)
        log_prefix: File name prefix for log files
    """

    api_base_url: str = "http://localhost:5000/api"
    request_timeout: float = 30.0
    auth_token: Optional[str] = None
    page_size: int = 10
    search_debounce_ms: int = 300
    notification_interval_ms: int = 100
    notification_ticks: int = 30
    max_upload_bytes: int = 5 * 1024 * 1024
    allowed_upload_extensions: List[str] = field(
        default_factory=lambda: [".jpeg", ".jpg", ".png", ".gif", ".pdf", ".doc", ".docx"]
    )
    log_dir: Optional[str] = None
    log_prefix: str = "academic_console_"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConsoleConfig":
        """Build a config from ACADEMIC_CONSOLE_* variables, defaults for the rest."""
        environ = os.environ if environ is None else environ
        config = cls()

        def read(name: str) -> Optional[str]:
            value = environ.get(f"{ENV_PREFIX}{name}")
            return value if value not in (None, "") else None

        if read("API_URL"):
            config.api_base_url = read("API_URL")
        if read("TOKEN"):
            config.auth_token = read("TOKEN")
        if read("TIMEOUT"):
            config.request_timeout = float(read("TIMEOUT"))
        if read("PAGE_SIZE"):
            config.page_size = int(read("PAGE_SIZE"))
        if read("LOG_DIR"):
            config.log_dir = read("LOG_DIR")
        return config


# Global config instance (set by application)
_console_config: Optional[ConsoleConfig] = None


def set_console_config(config: Optional[ConsoleConfig]) -> None:
    """Set the global console configuration.

    Args:
        config: ConsoleConfig instance, or None to fall back to defaults
    """
    global _console_config
    _console_config = config


def get_console_config() -> ConsoleConfig:
    """Get the current console configuration.

    Returns:
        Current ConsoleConfig or default if not set
    """
    if _console_config is None:
        return ConsoleConfig()
    return _console_config
