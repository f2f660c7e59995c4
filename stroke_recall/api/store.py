"""Persistent session state for trace/memory practice.

The SessionStore keeps the last reference trace, the reference image and the
last analysis result between runs. State is passed around explicitly: a
controller loads it at startup and saves it after each comparison, instead
of reading or writing process-wide globals.

Values are stored as JSON text in a single key/value table::

    CREATE TABLE session_state (key TEXT PRIMARY KEY, value TEXT NOT NULL)

Example usage::

    from stroke_recall.api.store import SessionStore

    store = SessionStore('/data/stroke_recall.db')
    store.save_result(result)
    last = store.load_result()
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Optional

from ..config import DB_PATH
from ..domain.geometry import Stroke, StrokeLike
from ..domain.result import AnalysisResult
from ..exceptions import SessionStoreError

# Logger for store errors
_logger = logging.getLogger(__name__)

KEY_RESULT = 'last_result'
KEY_TRACE = 'trace_path'
KEY_IMAGE = 'ref_image'

SCHEMA = """
CREATE TABLE IF NOT EXISTS session_state (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class SessionStore:
    """SQLite-backed key/value store for practice session state.

    Attributes:
        db_path: Path to the SQLite database file. ``':memory:'`` is only
            useful together with ``connection_factory``, because every call
            opens a fresh connection.

    Example:
        # For testing with a shared in-memory database:
        >>> conn = sqlite3.connect(':memory:')
        >>> store = SessionStore(':memory:', connection_factory=lambda: conn)
    """

    def __init__(self, db_path: str = DB_PATH, connection_factory=None):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file. The table is created
                on first use.
            connection_factory: Optional callable returning a database
                connection. If None, uses sqlite3.connect(db_path). A
                connection returned by the factory is not closed by the
                store.
        """
        self.db_path = db_path
        self._connection_factory = connection_factory

    def _get_connection(self):
        if self._connection_factory:
            conn = self._connection_factory()
        else:
            conn = sqlite3.connect(self.db_path)
        conn.execute(SCHEMA)
        return conn

    def _release(self, conn) -> None:
        if conn is not None and not self._connection_factory:
            conn.close()

    # ------------------------------------------------------------------
    # Raw key/value access
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[Any]:
        """Load and decode the JSON value stored under ``key``.

        Returns:
            The decoded value, or None if the key is absent or its value is
            not valid JSON (logged as a warning).

        Raises:
            SessionStoreError: If the database cannot be read.
        """
        conn = None
        try:
            conn = self._get_connection()
            row = conn.execute(
                "SELECT value FROM session_state WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            raise SessionStoreError(f"cannot read '{key}' from {self.db_path}: {e}") from e
        finally:
            self._release(conn)

        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            _logger.warning("Invalid JSON in session state key=%s: %s", key, e)
            return None

    def put(self, key: str, value: Any) -> None:
        """Encode ``value`` as JSON and store it under ``key``.

        Raises:
            SessionStoreError: If the value cannot be encoded or the
                database cannot be written.
        """
        try:
            text = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise SessionStoreError(f"cannot encode value for '{key}': {e}") from e

        conn = None
        try:
            conn = self._get_connection()
            conn.execute(
                "INSERT OR REPLACE INTO session_state (key, value) VALUES (?, ?)",
                (key, text)
            )
            conn.commit()
        except sqlite3.Error as e:
            raise SessionStoreError(f"cannot write '{key}' to {self.db_path}: {e}") from e
        finally:
            self._release(conn)

    def delete(self, key: str) -> None:
        conn = None
        try:
            conn = self._get_connection()
            conn.execute("DELETE FROM session_state WHERE key = ?", (key,))
            conn.commit()
        except sqlite3.Error as e:
            raise SessionStoreError(f"cannot delete '{key}' from {self.db_path}: {e}") from e
        finally:
            self._release(conn)

    def clear(self) -> None:
        """Forget the stored trace, image and result."""
        for key in (KEY_RESULT, KEY_TRACE, KEY_IMAGE):
            self.delete(key)

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def save_result(self, result: AnalysisResult) -> None:
        self.put(KEY_RESULT, result.to_dict())

    def load_result(self) -> Optional[AnalysisResult]:
        """Last saved result, or None if absent or unreadable."""
        data = self.get(KEY_RESULT)
        if data is None:
            return None
        try:
            return AnalysisResult.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            _logger.warning("Failed to parse saved result: %s", e)
            return None

    def save_trace(self, trace: StrokeLike) -> None:
        self.put(KEY_TRACE, Stroke.coerce(trace).to_dicts())

    def load_trace(self) -> Optional[Stroke]:
        data = self.get(KEY_TRACE)
        if data is None:
            return None
        try:
            return Stroke.coerce(data)
        except (KeyError, TypeError, ValueError, IndexError) as e:
            _logger.warning("Failed to parse saved trace: %s", e)
            return None

    def save_image(self, image: str) -> None:
        """Store the reference image as an opaque string (e.g. a data URL)."""
        self.put(KEY_IMAGE, image)

    def load_image(self) -> Optional[str]:
        data = self.get(KEY_IMAGE)
        return data if isinstance(data, str) else None
