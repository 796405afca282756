"""SQLite storage handle shared by the repositories."""

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from protein_tracker.errors import StorageUnavailableError

_logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


def _connect(db_path: str) -> sqlite3.Connection:
    if db_path != MEMORY_PATH:
        Path(db_path).expanduser().parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(
        db_path,
        check_same_thread=False,
        isolation_level=None,
    )
    conn.row_factory = sqlite3.Row
    return conn


@dataclass
class SqliteStore:
    """Lazily opened SQLite connection, created once and reused."""

    db_path: str
    _conn: sqlite3.Connection | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def connection(self) -> sqlite3.Connection:
        """Return the shared connection, opening it on first use."""
        if self._conn is None:
            with self._lock:
                if self._conn is None:
                    self._conn = _connect(self.db_path)
                    _logger.info("SQLite store opened: db_path=%s", self.db_path)
        return self._conn

    @contextmanager
    def get_conn(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection and report storage failures uniformly."""
        try:
            yield self.connection()
        except (sqlite3.Error, OSError) as exc:
            _logger.exception("SQLite store failed: db_path=%s", self.db_path)
            raise StorageUnavailableError(str(exc)) from exc

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


_default_store: SqliteStore | None = None
_default_lock = threading.Lock()


def get_default_store(db_path: str) -> SqliteStore:
    """Return the process-wide store, creating it on the first call."""
    global _default_store  # noqa: PLW0603
    with _default_lock:
        if _default_store is None:
            _default_store = SqliteStore(db_path)
        elif _default_store.db_path != db_path:
            _logger.warning(
                "Default store already bound: db_path=%s requested=%s",
                _default_store.db_path,
                db_path,
            )
        return _default_store


def reset_default_store() -> None:
    """Close and forget the process-wide store."""
    global _default_store  # noqa: PLW0603
    with _default_lock:
        if _default_store is not None:
            _default_store.close()
        _default_store = None
