import argparse
import curses
import logging
import os
import sys

from app.app_state import AppState
from app.services.app_config import AppConfig
from app.ui.app_shell import AppShell
from core.errors import PersistenceIOError
from core.logging_setup import setup_logging
from core.storage import load_store, save_store

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Track body weight by date in the terminal.")
    ap.add_argument(
        "--data",
        default=None,
        help="Records file (default: env WEIGHT_TRACKER_DATA_PATH or ./Data/weights.csv)",
    )
    ap.add_argument("--log-level", default="INFO", help="Logging level for Data/Logs/weight_tracker.log")
    return ap.parse_args(argv)


def run_ui(state):
    # Short ESC delay so Esc closes popups immediately
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(lambda stdscr: AppShell(stdscr, state).run())


def save(state) -> int:
    try:
        save_store(state.store, state.config.data_path)
    except PersistenceIOError as exc:
        print(f"Failed to save records: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(level=getattr(logging, str(args.log_level).upper(), logging.INFO))

    config = AppConfig.from_env()
    if args.data:
        config = config.with_data_path(args.data)

    try:
        store = load_store(config.data_path)
    except PersistenceIOError as exc:
        print(f"Failed to load records: {exc}", file=sys.stderr)
        return 1

    state = AppState(store, config)
    try:
        run_ui(state)
    except KeyboardInterrupt:
        # SIGINT outside get_wch(), e.g. mid-draw
        logger.warning("Interrupted, saving records before exit")
        save(state)
        return 130
    except Exception:
        logger.exception("UI loop crashed, saving records before exit")
        save(state)
        raise
    return save(state)


# ---------------- ENTRY ----------------
if __name__ == "__main__":
    sys.exit(main())
