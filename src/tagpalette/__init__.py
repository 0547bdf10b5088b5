"""tagpalette - ordered, colour-coded tag collections for NiceGUI apps.

Provides a tag collection manager that keeps names unique, hands out
palette colours in rotation, and reports every committed change, plus a
NiceGUI tags input built on top of it.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from tagpalette.manager import TagCollectionManager
from tagpalette.models import DELIMITERS, KeyCodes, ManagedTag, Tag, TagNotFoundError

__version__ = "0.1.0"

__all__ = [
    "DELIMITERS",
    "KeyCodes",
    "ManagedTag",
    "Tag",
    "TagCollectionManager",
    "TagNotFoundError",
    "main",
]


def _setup_logging(console_level: int = logging.INFO) -> None:
    """Configure logging to both console and rotating file.

    The console handler logs at ``console_level``; the file always gets DEBUG.
    """
    from tagpalette.config import get_settings

    log_dir = get_settings().app.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"tagpalette.{os.getpid()}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.info("Logging configured. Log file: %s", log_file.absolute())


def main(debug: bool = False) -> None:
    """Entry point for the tagpalette demo application.

    ``debug`` lowers console logging to DEBUG and turns on NiceGUI hot reload.
    """
    from nicegui import ui

    from tagpalette.config import get_settings

    _setup_logging(logging.DEBUG if debug else logging.INFO)
    # Third-party request and file-watch chatter stays out of debug output.
    for name in ("watchfiles", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    settings = get_settings()
    if settings.dev.enable_demo_pages:
        import tagpalette.pages  # noqa: F401 - registers routes

    ui.run(
        port=settings.app.port,
        title="tagpalette",
        storage_secret=settings.app.storage_secret.get_secret_value(),
        reload=debug,
    )
