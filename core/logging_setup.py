"""Logging configuration for rotating file (+ optional console) output."""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.paths import LOGS_DIR


def setup_logging(level=logging.INFO, console=False, logs_dir=None):
    """Configure global logging handlers (idempotent).

    The console handler is off by default: while curses owns the terminal,
    anything written to stderr corrupts the screen.
    """
    logs_dir = Path(logs_dir) if logs_dir else LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / "weight_tracker.log"

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    root_logger.setLevel(level)
