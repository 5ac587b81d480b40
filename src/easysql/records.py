"""Value types and outcome records.

Column descriptors and key-value pairs describe what a statement should do;
``ConnectionResponse``, ``QueryResponse`` and ``QueryResult`` describe what
happened. Every record is immutable.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import EasySQL


class Type(Enum):
    """All available MySQL column types."""

    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    MEDIUMINT = "MEDIUMINT"
    INT = "INT"
    BIGINT = "BIGINT"
    DECIMAL = "DECIMAL"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    REAL = "REAL"
    BIT = "BIT"
    BOOLEAN = "BOOLEAN"
    SERIAL = "SERIAL"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"
    TIME = "TIME"
    YEAR = "YEAR"
    CHAR = "CHAR"
    VARCHAR = "VARCHAR"
    TINYTEXT = "TINYTEXT"
    TEXT = "TEXT"
    MEDIUMTEXT = "MEDIUMTEXT"
    LONGTEXT = "LONGTEXT"
    BINARY = "BINARY"
    VARBINARY = "VARBINARY"
    TINYBLOB = "TINYBLOB"
    MEDIUMBLOB = "MEDIUMBLOB"
    BLOB = "BLOB"
    LONGBLOB = "LONGBLOB"
    ENUM = "ENUM"
    SET = "SET"
    GEOMETRY = "GEOMETRY"
    POINT = "POINT"
    LINESTRING = "LINESTRING"
    POLYGON = "POLYGON"
    MULTIPOINT = "MULTIPOINT"
    MULTILINESTRING = "MULTILINESTRING"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"
    JSON = "JSON"


class Argument(Enum):
    """Additional constraints for a column."""

    NOT_NULL = "NOT NULL"
    AUTO_INCREMENT = "AUTO_INCREMENT"


@dataclass(frozen=True)
class DataType:
    """A column's data type with an optional length.

    >>> str(DataType(Type.VARCHAR, 64))
    'VARCHAR(64)'
    """

    type: Type
    length: int = 0

    def __str__(self) -> str:
        if self.length > 0:
            return f"{self.type.value}({self.length})"
        return self.type.value


@dataclass(frozen=True)
class TableDataObject:
    """Column descriptor used when creating a table.

    Attributes:
        name: Column name
        type: Column data type
        arguments: Column constraints, rendered in order after the type
        primary: True if this column is the table's primary key
    """

    name: str
    type: DataType
    arguments: tuple[Argument, ...] | None = None
    primary: bool = False


@dataclass(frozen=True)
class Min:
    """``MIN(column) AS column`` select expression."""

    column: str

    def __str__(self) -> str:
        return f"MIN({self.column}) AS {self.column}"


@dataclass(frozen=True)
class Max:
    """``MAX(column) AS column`` select expression."""

    column: str

    def __str__(self) -> str:
        return f"MAX({self.column}) AS {self.column}"


@dataclass(frozen=True)
class TableEntryPair:
    """A column with a value."""

    key: str
    value: Any


@dataclass(frozen=True)
class TableEntry:
    """One result row: column/value pairs in select order."""

    pairs: tuple[TableEntryPair, ...] = ()

    def __iter__(self) -> Iterator[TableEntryPair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def keys(self) -> list[str]:
        return [pair.key for pair in self.pairs]

    def get(self, key: str, default: Any = None) -> Any:
        """Value of the first column labelled ``key``, or ``default``."""
        for pair in self.pairs:
            if pair.key == key:
                return pair.value
        return default

    def as_dict(self) -> dict[str, Any]:
        return {pair.key: pair.value for pair in self.pairs}


@dataclass(frozen=True)
class Table:
    """All rows returned by a select, plus the client that produced them."""

    entries: tuple[TableEntry, ...] = ()
    client: "EasySQL | None" = field(default=None, repr=False, compare=False)

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def rows(self) -> list[dict[str, Any]]:
        """Rows as dictionaries keyed by column label."""
        return [entry.as_dict() for entry in self.entries]


@dataclass(frozen=True)
class ConnectionResponse:
    """Outcome of a connection attempt.

    Attributes:
        connected: True if a connection is open
        time: Elapsed milliseconds, or -1 when an open connection was reused
        errors: Errors raised while connecting; empty if connected is True
        connection: The raw driver connection, or None on failure
    """

    connected: bool
    time: int
    errors: tuple[str, ...] = ()
    connection: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class QueryResponse:
    """Outcome of a statement that returns no rows.

    Attributes:
        success: True if the statement was executed
        time: Elapsed milliseconds, connection included
        errors: Errors that occurred; empty if success is True
        sql: The SQL text that was (or would have been) executed
        client: The client that ran the statement
    """

    success: bool
    time: int
    errors: tuple[str, ...]
    sql: str
    client: "EasySQL | None" = field(default=None, repr=False, compare=False)

    def close(self) -> None:
        """Close the client's connection to the database."""
        if self.client is not None:
            self.client.disconnect()


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a select.

    ``table`` is empty unless ``success`` is True.
    """

    success: bool
    time: int
    table: Table
    errors: tuple[str, ...]
    sql: str
    client: "EasySQL | None" = field(default=None, repr=False, compare=False)

    def close(self) -> None:
        """Close the client's connection to the database."""
        if self.client is not None:
            self.client.disconnect()
