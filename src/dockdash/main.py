"""
Entry point for dockdash.

Sets up file logging, loads the configuration and runs the Textual app.
Logging never goes to the terminal, which belongs to the TUI while it runs.

Exit Status:
  - 0 after the quit command
  - 1 on an unrecoverable startup error, after printing "Error: <message>"
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from . import get_log_path
from .app import DashboardApp
from .config import ConfigManager, LogConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_config: LogConfig) -> None:
    path = log_config.file_path or get_log_path()
    handler = RotatingFileHandler(
        path,
        maxBytes=max(1, log_config.max_size_mb) * 1024 * 1024,
        backupCount=log_config.backup_count,
        encoding='utf-8',
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, log_config.level.upper(), logging.INFO))


def main() -> int:
    try:
        config = ConfigManager().get_config()
        setup_logging(config.logging)
        logging.info("dockdash started")
        DashboardApp(config).run()
    except Exception as e:
        logging.error(f"Fatal error: {e}", exc_info=True)
        print(f"Error: {e}")
        return 1
    logging.info("dockdash stopped")
    return 0


def run() -> None:
    sys.exit(main())
