"""
JSON-backed session record store.

The whole collection lives in a single JSON document holding an array of
session records. Every mutation rewrites the full document through a
temporary file in the same directory that is then atomically renamed over
the target, so a failed write never leaves a truncated store behind.
"""

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from shadowscore.config import ShadowScoreSettings, get_settings
from shadowscore.exceptions import StoreCorruptError, StoreReadError, StoreWriteError
from shadowscore.models import SessionRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[SessionRecord])


class SessionStore:
    """
    Append-only store of practice session records.

    ``append`` is a read-modify-write of the whole document and is
    serialized per instance. Two instances (or processes) pointing at the
    same file must be coordinated by the caller.

    Example:
        store = SessionStore("sessions.json")
        store.append(record)
        history = store.load_all()
    """

    def __init__(
        self,
        path: str | Path | None = None,
        settings: ShadowScoreSettings | None = None,
    ):
        """
        Initialize the store.

        Args:
            path: Location of the JSON document (overrides settings)
            settings: Settings instance to use
        """
        self._settings = settings or get_settings()
        self._path = Path(path).expanduser() if path is not None else self._settings.store_path
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        """Location of the JSON document."""
        return self._path

    @property
    def exists(self) -> bool:
        return self._path.exists()

    def load_all(self) -> list[SessionRecord]:
        """
        Load every stored record.

        Returns:
            Records in document order; empty if the store does not exist yet

        Raises:
            StoreReadError: The document exists but cannot be read
            StoreCorruptError: The document is not a valid array of session
                records
        """
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning("Cannot read session store %s: %s", self._path, e)
            raise StoreReadError(self._path, str(e)) from e

        try:
            return _RECORDS.validate_json(data)
        except ValidationError as e:
            logger.warning(
                "Session store %s is corrupt (%d validation errors)",
                self._path, e.error_count(),
            )
            raise StoreCorruptError(self._path, str(e)) from e

    def append(self, record: SessionRecord) -> None:
        """
        Add a record to the end of the collection.

        Loads the full collection, appends and rewrites it.

        Raises:
            StoreReadError: The existing document cannot be read
            StoreCorruptError: The existing document cannot be parsed
            StoreWriteError: The rewrite failed; the previous document is intact
        """
        with self._lock:
            records = self.load_all()
            records.append(record)
            self._write(records)
        logger.info("Appended session %s to %s (%d total)", record.id, self._path, len(records))

    def replace_all(self, records: Iterable[SessionRecord]) -> None:
        """
        Replace the whole collection.

        Deleting records is expressed as replacing the collection with the
        records to keep.

        Raises:
            StoreWriteError: The rewrite failed; the previous document is intact
        """
        records = list(records)
        with self._lock:
            self._write(records)
        logger.info("Rewrote %s with %d sessions", self._path, len(records))

    def _write(self, records: list[SessionRecord]) -> None:
        """Write records to a temp file next to the target, then swap it in."""
        indent = self._settings.store_indent or None
        payload = _RECORDS.dump_json(records, indent=indent)

        directory = self._path.parent
        tmp_path: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
            tmp_path = None
        except OSError as e:
            logger.warning("Failed to write session store %s: %s", self._path, e)
            raise StoreWriteError(self._path, str(e)) from e
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    logger.debug("Could not remove temporary file %s", tmp_path)

    def __repr__(self) -> str:
        return f"SessionStore(path={str(self._path)!r})"
