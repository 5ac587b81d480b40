"""PostgreSQL driver adapter implementation.

This adapter wraps psycopg3 and borrows its connection from a psycopg_pool
ConnectionPool. PostgreSQL quotes identifiers with double quotes and has no
integer truth value, so the adapter reports its own dialect details.
"""

from typing import Any

try:
    import psycopg
    from psycopg_pool import ConnectionPool
except ImportError as e:
    raise ImportError(
        "PostgreSQL dependencies not installed. "
        "Install with: pip install -e \".[postgresql]\""
    ) from e

from .interface import DriverAdapter
from .types import ConnectionError as DBConnectionError
from .types import DatabaseError, Params
from .types import IntegrityError as DBIntegrityError


class PostgreSQLAdapter(DriverAdapter):
    """PostgreSQL driver adapter.

    Uses connection pooling; the adapter holds one connection checked out from
    the pool between connect() and close(). The pool itself stays open until
    shutdown().
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5432,
        database: str = "postgres",
        user: str = "postgres",
        password: str = "",
        pool_size: int = 1,
        pool_max_overflow: int = 4,
        connect_timeout: float = 10.0,
    ):
        """Initialize PostgreSQL adapter.

        Args:
            host: PostgreSQL server host
            port: PostgreSQL server port
            database: Database name
            user: Database user
            password: Database password
            pool_size: Minimum number of connections in pool
            pool_max_overflow: Maximum overflow connections beyond pool_size
            connect_timeout: Seconds to wait for a pooled connection
        """
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.pool_size = pool_size
        self.pool_max_overflow = pool_max_overflow
        self.connect_timeout = connect_timeout

        self._pool: ConnectionPool | None = None
        self._conn: Any = None  # psycopg.Connection

    def connect(self) -> Any:
        """Create the pool (if needed) and check out a connection.

        A connection left over from an earlier checkout (for example one the
        server closed) is handed back to the pool first.
        """
        try:
            if self._pool is None:
                conninfo = (
                    f"host={self.host} port={self.port} dbname={self.database} "
                    f"user={self.user} password={self.password}"
                )
                self._pool = ConnectionPool(
                    conninfo,
                    min_size=self.pool_size,
                    max_size=self.pool_size + self.pool_max_overflow,
                    kwargs={"autocommit": True},
                    open=True,
                )
            self._release()
            self._conn = self._pool.getconn(timeout=self.connect_timeout)
        except psycopg.Error as e:
            raise DBConnectionError(f"Failed to connect to PostgreSQL database: {e}") from e
        return self._conn

    def close(self) -> None:
        """Return the connection to the pool; the pool stays open for reuse."""
        self._release()

    def shutdown(self) -> None:
        """Return the connection and close the pool."""
        try:
            self._release()
        finally:
            if self._pool is not None:
                pool, self._pool = self._pool, None
                pool.close()

    def _release(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        if self._pool is not None:
            # The pool discards connections that are closed or broken
            self._pool.putconn(conn)

    def is_open(self) -> bool:
        return self._conn is not None and not self._conn.closed

    def execute(self, sql: str, params: Params = ()) -> int:
        """Execute a statement that returns no rows."""
        if not self.is_open():
            raise DatabaseError("No active connection")

        try:
            with self._conn.cursor() as cursor:
                if params:
                    cursor.execute(self._translate(sql), params)
                else:
                    cursor.execute(sql)
                return cursor.rowcount
        except psycopg.errors.IntegrityError as e:
            raise DBIntegrityError(f"Integrity constraint violation: {e}") from e
        except psycopg.Error as e:
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
                labels = [desc.name for desc in cursor.description or ()]
                return labels, list(cursor.fetchall())
        except psycopg.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    @property
    def placeholder(self) -> str:
        """'%s' for PostgreSQL (queries with ? are auto-converted)."""
        return "%s"

    @property
    def identifier_quote(self) -> str:
        return '"'

    @property
    def true_literal(self) -> str:
        return "TRUE"

    def __repr__(self) -> str:
        status = "connected" if self.is_open() else "disconnected"
        return (
            f"PostgreSQLAdapter(host={self.host}, port={self.port}, "
            f"database={self.database}, status={status})"
        )
