"""easysql: build and run simple SQL statements from structured input.

Example:
    >>> from easysql import Argument, DataType, EasySQL, TableDataObject, TableEntryPair, Type
    >>>
    >>> with EasySQL("mysql://localhost:3306/shop", "root", "secret") as db:
    ...     db.create_table(True, "items", [
    ...         TableDataObject("id", DataType(Type.INT), (Argument.NOT_NULL,), primary=True),
    ...         TableDataObject("name", DataType(Type.VARCHAR, 64)),
    ...     ])
    ...     db.insert("items", [TableEntryPair("id", 1), TableEntryPair("name", "lamp")])
"""

from .client import NOT_CONNECTED, EasySQL
from .records import (
    Argument,
    ConnectionResponse,
    DataType,
    Max,
    Min,
    QueryResponse,
    QueryResult,
    Table,
    TableDataObject,
    TableEntry,
    TableEntryPair,
    Type,
)
from .statements import Statement

__all__ = [
    # Client
    "EasySQL",
    "NOT_CONNECTED",
    # Outcomes
    "ConnectionResponse",
    "QueryResponse",
    "QueryResult",
    "Table",
    "TableEntry",
    # Inputs
    "TableEntryPair",
    "TableDataObject",
    "DataType",
    "Type",
    "Argument",
    "Min",
    "Max",
    "Statement",
]
