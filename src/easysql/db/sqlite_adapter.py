"""SQLite driver adapter implementation.

This adapter wraps sqlite3. SQLite accepts MySQL's backtick identifiers and
integer truth values, so the default dialect applies unchanged.
"""

import sqlite3
from pathlib import Path

from .interface import DriverAdapter
from .types import ConnectionError as DBConnectionError
from .types import DatabaseError, Params
from .types import IntegrityError as DBIntegrityError


class SQLiteAdapter(DriverAdapter):
    """SQLite driver adapter.

    Wraps sqlite3 in autocommit mode to implement the DriverAdapter interface.
    """

    def __init__(self, db_path: str | Path):
        """Initialize SQLite adapter.

        Args:
            db_path: Path to SQLite database file, or ':memory:'
        """
        self.db_path = Path(db_path) if str(db_path) != ":memory:" else db_path
        self._conn: sqlite3.Connection | None = None

    def connect(self) -> sqlite3.Connection:
        """Open the database file."""
        try:
            if isinstance(self.db_path, Path):
                # Create parent directory if it doesn't exist
                self.db_path.parent.mkdir(parents=True, exist_ok=True)

            # isolation_level=None puts the connection in autocommit mode
            self._conn = sqlite3.connect(str(self.db_path), isolation_level=None)
        except (sqlite3.Error, OSError) as e:
            raise DBConnectionError(f"Failed to connect to SQLite database: {e}") from e
        return self._conn

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            try:
                self._conn.close()
            finally:
                self._conn = None

    def is_open(self) -> bool:
        if self._conn is None:
            return False
        try:
            self._conn.total_changes
        except sqlite3.ProgrammingError:
            # Closed through the handle returned by connect()
            return False
        return True

    def execute(self, sql: str, params: Params = ()) -> int:
        """Execute a statement that returns no rows."""
        if not self._conn:
            raise DatabaseError("No active connection")

        try:
            cursor = self._conn.execute(sql, params)
            return cursor.rowcount
        except sqlite3.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except sqlite3.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def query(self, sql: str, params: Params = ()) -> tuple[list[str], list[tuple]]:
        """Execute a statement and fetch every row."""
        if not self._conn:
            raise DatabaseError("No active connection")

        try:
            cursor = self._conn.execute(sql, params)
            labels = [desc[0] for desc in cursor.description or ()]
            return labels, cursor.fetchall()
        except sqlite3.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    @property
    def placeholder(self) -> str:
        """'?' for SQLite."""
        return "?"

    def __repr__(self) -> str:
        status = "connected" if self._conn else "disconnected"
        return f"SQLiteAdapter(db_path={self.db_path}, status={status})"
