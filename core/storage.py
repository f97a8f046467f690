"""File persistence for the record store.

Design:
 - One plain text file (header + `date, weight` rows), read at startup and
   written at shutdown.
 - Writes go to a temporary sibling first and are moved into place, so a crash
   mid-write never truncates the existing file.
 - A file with a malformed header is moved aside instead of being overwritten.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from core.errors import InvalidHeader, PersistenceIOError
from core.paths import DEFAULT_RECORDS_PATH
from core.records import RecordStore

logger = logging.getLogger(__name__)

INVALID_SUFFIX = ".invalid"


def records_path() -> Path:
    """Resolve the records file path from environment or default."""
    return Path(os.environ.get("WEIGHT_TRACKER_DATA_PATH", DEFAULT_RECORDS_PATH))


def load_store(path: Path | None = None) -> RecordStore:
    """Return the store persisted at `path`.

    A missing file yields an empty store. An unreadable file raises
    PersistenceIOError. A malformed header is logged, the file is renamed with
    an `.invalid` suffix and an empty store is returned.
    """
    path = Path(path) if path is not None else records_path()
    store = RecordStore()
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        logger.info("No records file at %s, starting empty", path)
        return store
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read records file %s", path, exc_info=True)
        raise PersistenceIOError(f"Cannot read {path}: {exc}", path) from exc

    try:
        store.import_text(text)
    except InvalidHeader as exc:
        aside = path.with_name(path.name + INVALID_SUFFIX)
        logger.error("Ignoring %s (%s); moving it to %s", path, exc, aside)
        try:
            path.replace(aside)
        except OSError as move_exc:
            raise PersistenceIOError(f"Cannot move aside {path}: {move_exc}", path) from move_exc
        return RecordStore()
    return store


def save_store(store: RecordStore, path: Path | None = None) -> Path:
    """Atomically write the store to `path`."""
    path = Path(path) if path is not None else records_path()
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8", newline="\n") as f:
            f.write(store.export_text())
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
    except OSError as exc:
        logger.error("Failed to write records file %s", path, exc_info=True)
        raise PersistenceIOError(f"Cannot write {path}: {exc}", path) from exc
    logger.info("Saved %d records to %s", len(store), path)
    return path
