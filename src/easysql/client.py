"""The easysql client.

``EasySQL`` owns one driver connection, opened lazily by the first statement
and reused while it stays open. Every statement method builds its SQL with
``easysql.statements``, runs it through the driver adapter and reports the
outcome as a record; driver failures never propagate to the caller.

Example:
    >>> from easysql import EasySQL, TableEntryPair
    >>>
    >>> db = EasySQL.from_host("localhost", "shop", "root", "secret")
    >>> db.insert("items", [TableEntryPair("name", "lamp"), TableEntryPair("price", 30)])
    >>> result = db.select(None, "items", [TableEntryPair("name", "lamp")])
    >>> result.table.rows()
    [{'name': 'lamp', 'price': 30}]
    >>> result.close()
"""

import time
from collections.abc import Sequence
from typing import Any

from common.logger import get_logger

from . import statements
from .db import DatabaseConfig, DatabaseError, DriverAdapter, config_from_env, create_adapter
from .db.factory import DEFAULT_PORTS
from .db.types import DatabaseType
from .records import (
    ConnectionResponse,
    Max,
    Min,
    QueryResponse,
    QueryResult,
    Table,
    TableDataObject,
    TableEntry,
    TableEntryPair,
)
from .statements import Statement

logger = get_logger(__name__)

NOT_CONNECTED = "not connected"


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class EasySQL:
    """Convenience wrapper around a single database connection.

    Build one from a connection URL::

        EasySQL("mysql://db.example.com:3306/shop", "root", "secret")

    or from a host and database name with :meth:`from_host`.
    """

    def __init__(
        self,
        url: str | None = None,
        user: str | None = None,
        password: str | None = None,
        *,
        adapter: DriverAdapter | None = None,
    ):
        """Initialize the client.

        Args:
            url: Connection URL, e.g. ``mysql://host:3306/db`` or ``jdbc:mysql://...``
            user: Username for database login
            password: Password for database login
            adapter: Pre-built driver adapter; takes the place of ``url``

        Raises:
            ValueError: If neither a URL nor an adapter is given, or the URL is invalid
        """
        if adapter is None:
            if not url:
                raise ValueError("Either url or adapter is required")
            config = DatabaseConfig.from_url(url, user, password)
            adapter = create_adapter(config)
            url = config.url

        self.url = url
        self.user = user
        self._adapter = adapter
        self.connection: Any = None

    @classmethod
    def from_host(cls, host: str, database: str, user: str, password: str) -> "EasySQL":
        """Create a MySQL client for ``database`` on ``host`` (port 3306).

        Args:
            host: The host of the server with the database on it
            database: The database to use, or "" to connect without one
            user: Username for database login
            password: Password for database login
        """
        port = DEFAULT_PORTS[DatabaseType.MYSQL]
        return cls(f"mysql://{host}:{port}/{database}", user, password)

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "EasySQL":
        """Create a client for an already validated configuration.

        Args:
            config: Backend type, server or file location and credentials
        """
        client = cls(adapter=create_adapter(config))
        client.url = config.url
        client.user = config.user
        return client

    @classmethod
    def from_env(cls) -> "EasySQL":
        """Create a client from DATABASE_URL / DATABASE_TYPE and the DB_* variables."""
        return cls.from_config(config_from_env())

    @property
    def adapter(self) -> DriverAdapter:
        return self._adapter

    def connect(self) -> ConnectionResponse:
        """Connect to the database.

        An open connection is reused; in that case no second attempt is made
        and the response reports a time of -1.

        Returns:
            Connection outcome (success, elapsed ms, errors, the connection)
        """
        start = time.perf_counter()
        if self.connection is not None and self._adapter.is_open():
            return ConnectionResponse(True, -1, (), self.connection)

        try:
            self.connection = self._adapter.connect()
        except Exception as e:
            self.connection = None
            logger.warning(f"Could not connect to {self.url}: {e}")
            return ConnectionResponse(False, _elapsed_ms(start), (str(e),), None)

        elapsed = _elapsed_ms(start)
        logger.debug(f"Connected to {self.url} in {elapsed}ms")
        return ConnectionResponse(True, elapsed, (), self.connection)

    def disconnect(self) -> None:
        """Disconnect from the database. Errors while closing are ignored."""
        try:
            self._adapter.close()
        except Exception:
            logger.debug("Ignoring error while disconnecting", exc_info=True)
        finally:
            self.connection = None

    def _execute(self, start: float, statement: Statement) -> QueryResponse:
        connection = self.connect()
        if not connection.connected:
            return QueryResponse(
                False, _elapsed_ms(start), (*connection.errors, NOT_CONNECTED), statement.sql, self
            )

        logger.debug(f"Executing SQL: {statement.sql}")
        try:
            self._adapter.execute(statement.sql, statement.params)
        except DatabaseError as e:
            logger.warning(f"Statement failed: {e}")
            return QueryResponse(False, _elapsed_ms(start), (str(e),), statement.sql, self)
        except Exception as e:
            logger.exception(f"Unexpected driver error for: {statement.sql}")
            return QueryResponse(False, _elapsed_ms(start), (str(e),), statement.sql, self)

        return QueryResponse(True, _elapsed_ms(start), (), statement.sql, self)

    def create_database(self, name: str) -> QueryResponse:
        """Create a new database.

        Args:
            name: The name of the new database
        """
        start = time.perf_counter()
        return self._execute(start, statements.create_database(name))

    def drop_database(self, name: str) -> QueryResponse:
        """Delete a database."""
        start = time.perf_counter()
        return self._execute(start, statements.drop_database(name))

    def backup_database(self, database: str, bak: str) -> QueryResponse:
        """Create a backup of a database.

        Args:
            database: The database to back up
            bak: Path to the .bak file the backup is written to
        """
        start = time.perf_counter()
        return self._execute(start, statements.backup_database(database, bak))

    def create_table(
        self, if_not_exists: bool, name: str, columns: Sequence[TableDataObject]
    ) -> QueryResponse:
        """Create a new table.

        Args:
            if_not_exists: Only create the table if it doesn't exist yet
            name: The name of the table
            columns: Every column with its data type and constraints
        """
        start = time.perf_counter()
        return self._execute(start, statements.create_table(if_not_exists, name, columns))

    def drop_table(self, name: str) -> QueryResponse:
        """Delete a table."""
        start = time.perf_counter()
        return self._execute(start, statements.drop_table(name))

    def insert(self, table: str, entries: Sequence[TableEntryPair]) -> QueryResponse:
        """Insert a new row into a table.

        Args:
            table: The table to insert into
            entries: The row as key-value pairs
        """
        start = time.perf_counter()
        return self._execute(start, statements.insert(table, entries))

    def update(
        self,
        table: str,
        values: Sequence[TableEntryPair],
        where: Sequence[TableEntryPair] | None = None,
    ) -> QueryResponse:
        """Update existing rows.

        Args:
            table: The table holding the rows
            values: Columns to change and their new values
            where: Columns that must equal the given values for a row to be updated
        """
        start = time.perf_counter()
        statement = statements.update(table, values, where, quote=self._adapter.identifier_quote)
        return self._execute(start, statement)

    def delete(self, table: str, where: Sequence[TableEntryPair] | None = None) -> QueryResponse:
        """Delete rows from a table; without conditions every row is deleted."""
        start = time.perf_counter()
        statement = statements.delete(table, where, true_literal=self._adapter.true_literal)
        return self._execute(start, statement)

    def select(
        self,
        columns: Sequence[str | Min | Max] | None,
        table: str,
        where: Sequence[TableEntryPair] | None = None,
    ) -> QueryResult:
        """Select rows from a table.

        Args:
            columns: Columns to select; None or empty selects everything
            table: The table to select from
            where: Columns that must equal the given values for a row to be selected

        Returns:
            Query result whose table holds every selected row
        """
        start = time.perf_counter()
        statement = statements.select(
            columns, table, where, true_literal=self._adapter.true_literal
        )

        connection = self.connect()
        if not connection.connected:
            return QueryResult(
                False,
                _elapsed_ms(start),
                Table((), self),
                (*connection.errors, NOT_CONNECTED),
                statement.sql,
                self,
            )

        logger.debug(f"Executing SQL: {statement.sql}")
        try:
            labels, rows = self._adapter.query(statement.sql, statement.params)
        except DatabaseError as e:
            logger.warning(f"Select failed: {e}")
            return QueryResult(
                False, _elapsed_ms(start), Table((), self), (str(e),), statement.sql, self
            )
        except Exception as e:
            logger.exception(f"Unexpected driver error for: {statement.sql}")
            return QueryResult(
                False, _elapsed_ms(start), Table((), self), (str(e),), statement.sql, self
            )

        entries = tuple(
            TableEntry(tuple(TableEntryPair(label, value) for label, value in zip(labels, row)))
            for row in rows
        )
        return QueryResult(True, _elapsed_ms(start), Table(entries, self), (), statement.sql, self)

    # Upper-case statement names
    CREATE_DATABASE = create_database
    DROP_DATABASE = drop_database
    BACKUP_DATABASE = backup_database
    CREATE_TABLE = create_table
    DROP_TABLE = drop_table
    INSERT = insert
    UPDATE = update
    DELETE = delete
    SELECT = select

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
        return False

    def __repr__(self) -> str:
        status = "connected" if self.connection is not None else "disconnected"
        return f"EasySQL(url={self.url}, status={status})"
