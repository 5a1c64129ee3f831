"""SQLite-backed release index.

This module provides the IndexStore class, the single owner of durable
state. Every mutation is committed before the call returns, and the
database runs in WAL mode so that searches are not blocked by a scan
running in another process.
"""

import logging
import sqlite3
from pathlib import Path
from types import TracebackType

from bobindex.index.models import Entry

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS release (path TEXT, lower TEXT, name TEXT, UNIQUE(path));
CREATE INDEX IF NOT EXISTS release_lower_path ON release (lower, path);
"""


class IndexStoreError(Exception):
    """Raised when the index database cannot be opened, read or written."""


class IndexStore:
    """Persistent mapping from site-relative path to release entry.

    The connection is acquired once and released when the store is
    closed. Use the store as a context manager to guarantee release.

    Args:
        db_file: Path to the SQLite database file. Created if missing.
        busy_timeout_ms: How long a writer waits on a locked database.
    """

    def __init__(self, db_file: Path, *, busy_timeout_ms: int = 5000) -> None:
        self._db_file = db_file
        self._busy_timeout_ms = busy_timeout_ms
        self._conn: sqlite3.Connection | None = None

    def open(self) -> "IndexStore":
        """Open the connection and create the schema if needed.

        Returns:
            The store itself, for chaining.

        Raises:
            IndexStoreError: If the database cannot be opened or initialized.
        """
        if self._conn is not None:
            return self

        try:
            if not self._db_file.exists():
                logger.info("Could not find database at %s, creating", self._db_file)
            conn = sqlite3.connect(self._db_file)
        except (OSError, sqlite3.Error) as e:
            raise IndexStoreError(f"Cannot open database {self._db_file}: {e}") from e

        try:
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute(f"PRAGMA busy_timeout={int(self._busy_timeout_ms)};")
            conn.executescript(_SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            conn.close()
            raise IndexStoreError(f"Cannot initialize database {self._db_file}: {e}") from e

        self._conn = conn
        return self

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "IndexStore":
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # === Mutations ===

    def upsert(self, path: str, display_name: str) -> bool:
        """Insert an entry unless one with the same path already exists.

        An existing entry keeps its stored name and casing.

        Args:
            path: Site-relative directory path.
            display_name: Directory base name.

        Returns:
            True if a new entry was created.

        Raises:
            IndexStoreError: If the write fails.
        """
        entry = Entry.create(path, display_name)
        cur = self._execute(
            "INSERT OR IGNORE INTO release(path, lower, name) VALUES (?, ?, ?)",
            (entry.path, entry.normalized_name, entry.display_name),
            commit=True,
        )
        created = cur.rowcount > 0
        if created:
            logger.debug("INSERT %s", path)
        return created

    def delete(self, path: str) -> bool:
        """Remove the entry with exactly this path.

        Args:
            path: Site-relative directory path.

        Returns:
            True if an entry was removed, False if none existed.

        Raises:
            IndexStoreError: If the write fails.
        """
        cur = self._execute("DELETE FROM release WHERE path = ?", (path,), commit=True)
        removed = cur.rowcount > 0
        if removed:
            logger.debug("DELETE %s", path)
        return removed

    # === Queries ===

    def find_exact(self, name: str, case_sensitive: bool = False) -> str | None:
        """Find the path of an entry by its full name.

        Args:
            name: Release name to look up.
            case_sensitive: Compare against the stored casing if True,
                otherwise against the normalized name.

        Returns:
            A matching path, or None if no entry has that name.
        """
        if case_sensitive:
            cur = self._execute("SELECT path FROM release WHERE name = ? LIMIT 1", (name,))
        else:
            cur = self._execute(
                "SELECT path FROM release WHERE lower = ? ORDER BY path DESC LIMIT 1",
                (name.lower(),),
            )
        row = cur.fetchone()
        return row[0] if row else None

    def find_substring(self, query: str) -> list[str]:
        """Find all entries whose name contains the query, ignoring case.

        Args:
            query: Substring to look for. Matched literally, no wildcards.

        Returns:
            Matching paths ordered by path descending.
        """
        cur = self._execute(
            "SELECT path FROM release WHERE instr(lower, ?) > 0 ORDER BY path DESC",
            (query.lower(),),
        )
        return [row[0] for row in cur.fetchall()]

    def list_all_paths(self) -> list[str]:
        """Return the path of every entry in the index."""
        cur = self._execute("SELECT path FROM release")
        return [row[0] for row in cur.fetchall()]

    def get(self, path: str) -> Entry | None:
        """Load a single entry by its path."""
        cur = self._execute("SELECT path, name, lower FROM release WHERE path = ?", (path,))
        row = cur.fetchone()
        if row is None:
            return None
        return Entry(path=row[0], display_name=row[1], normalized_name=row[2])

    def count(self) -> int:
        """Return the number of entries in the index."""
        cur = self._execute("SELECT COUNT(*) FROM release")
        return int(cur.fetchone()[0])

    def _execute(
        self,
        sql: str,
        params: tuple[object, ...] = (),
        *,
        commit: bool = False,
    ) -> sqlite3.Cursor:
        """Run a statement, wrapping driver errors in IndexStoreError."""
        if self._conn is None:
            raise IndexStoreError("Index store is not open")
        try:
            cur = self._conn.execute(sql, params)
            if commit:
                self._conn.commit()
        except sqlite3.Error as e:
            raise IndexStoreError(f"Database error on {self._db_file}: {e}") from e
        return cur
