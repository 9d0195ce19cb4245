"""
Application shell and command line entry point.

    academic-console --api-url http://localhost:5000/api --resource peos
"""

from typing import List, Optional, Sequence
import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication, QMainWindow, QTabWidget

from academic_console import __version__
from academic_console.core.log_utils import setup_logging
from academic_console.protocols import ConsoleConfig, set_console_config
from academic_console.resources import RESOURCE_SCHEMAS, get_schema
from academic_console.services.api_client import ApiClient, HttpResourceApi
from academic_console.services.resource_manager import ResourceManager
from academic_console.theming import ColorScheme
from academic_console.widgets import ResourceManagerWidget

logger = logging.getLogger(__name__)


class ConsoleWindow(QMainWindow):
    """
    Main window with one tab per resource screen.

    Screens load lazily the first time their tab is shown.
    """

    def __init__(self, client: ApiClient, resource_keys: Sequence[str],
                 color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self.client = client
        self.setWindowTitle(f"Academic Console {__version__}")
        self.resize(1200, 760)

        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)
        self.screens: List[ResourceManagerWidget] = []
        self._loaded = set()

        for key in resource_keys:
            schema = get_schema(key)
            manager = ResourceManager(schema, HttpResourceApi(client, schema))
            screen = ResourceManagerWidget(manager, color_scheme=color_scheme)
            self.screens.append(screen)
            self.tabs.addTab(screen, schema.title)

        self.tabs.currentChanged.connect(self._load_tab)
        if self.screens:
            self._load_tab(0)

    def _load_tab(self, index: int) -> None:
        if index < 0 or index in self._loaded:
            return
        self._loaded.add(index)
        self.screens[index].load()

    def closeEvent(self, event):
        for screen in self.screens:
            screen.teardown()
        self.client.close()
        super().closeEvent(event)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="academic-console",
        description="Manage academic program configuration records.",
    )
    parser.add_argument("--api-url", help="REST API base URL (default: $ACADEMIC_CONSOLE_API_URL or localhost)")
    parser.add_argument("--token", help="Bearer token sent with every request")
    parser.add_argument("--log-dir", help="Directory for log files")
    parser.add_argument(
        "--resource",
        action="append",
        choices=sorted(RESOURCE_SCHEMAS),
        help="Open only this resource screen (repeatable)",
    )
    parser.add_argument("--dark", action="store_true", help="Use the dark color scheme")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ConsoleConfig:
    """Environment first, then command line overrides."""
    config = ConsoleConfig.from_env()
    if args.api_url:
        config.api_base_url = args.api_url
    if args.token:
        config.auth_token = args.token
    if args.log_dir:
        config.log_dir = args.log_dir
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = config_from_args(args)
    set_console_config(config)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO)
    logger.info(f"Academic Console {__version__} using {config.api_base_url}")

    app = QApplication.instance() or QApplication(sys.argv[:1])
    color_scheme = ColorScheme.create_dark_theme() if args.dark else ColorScheme.create_light_theme()
    window = ConsoleWindow(ApiClient(), args.resource or list(RESOURCE_SCHEMAS), color_scheme)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
