"""MySQL driver adapter implementation.

This adapter wraps PyMySQL. Connections run in autocommit mode so every
statement takes effect as soon as it is executed.
"""

from typing import Any

import pymysql

from .interface import DriverAdapter
from .types import ConnectionError as DBConnectionError
from .types import DatabaseError, Params
from .types import IntegrityError as DBIntegrityError


class MySQLAdapter(DriverAdapter):
    """MySQL driver adapter backed by PyMySQL."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 3306,
        database: str = "",
        user: str = "root",
        password: str = "",
        connect_timeout: int = 10,
    ):
        """Initialize MySQL adapter.

        Args:
            host: MySQL server host
            port: MySQL server port
            database: Default schema, or empty string for none
            user: Database user
            password: Database password
            connect_timeout: Seconds to wait for the server when connecting
        """
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.connect_timeout = connect_timeout

        self._conn: Any = None  # pymysql.connections.Connection

    def connect(self) -> Any:
        """Open a PyMySQL connection."""
        try:
            self._conn = pymysql.connect(
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
                database=self.database or None,
                connect_timeout=self.connect_timeout,
                autocommit=True,
            )
        except pymysql.Error as e:
            raise DBConnectionError(f"Failed to connect to MySQL database: {e}") from e
        return self._conn

    def close(self) -> None:
        """Close the connection."""
        if self._conn is not None:
            try:
                if self._conn.open:
                    self._conn.close()
            finally:
                self._conn = None

    def is_open(self) -> bool:
        return self._conn is not None and bool(self._conn.open)

    def execute(self, sql: str, params: Params = ()) -> int:
        """Execute a statement that returns no rows."""
        if not self.is_open():
            raise DatabaseError("No active connection")

        try:
            with self._conn.cursor() as cursor:
                # PyMySQL only interpolates when args is not None
                if params:
                    cursor.execute(self._translate(sql), params)
                else:
                    cursor.execute(sql)
                return cursor.rowcount
        except pymysql.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except pymysql.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def query(self, sql: str, params: Params = ()) -> tuple[list[str], list[tuple]]:
        """Execute a statement and fetch every row."""
        if not self.is_open():
            raise DatabaseError("No active connection")

        try:
            with self._conn.cursor() as cursor:
                if params:
                    cursor.execute(self._translate(sql), params)
                else:
                    cursor.execute(sql)
                labels = [desc[0] for desc in cursor.description or ()]
                return labels, list(cursor.fetchall())
        except pymysql.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    @property
    def placeholder(self) -> str:
        """'%s' for PyMySQL (queries with ? are auto-converted)."""
        return "%s"

    def __repr__(self) -> str:
        status = "connected" if self.is_open() else "disconnected"
        return (
            f"MySQLAdapter(host={self.host}, port={self.port}, "
            f"database={self.database}, status={status})"
        )
