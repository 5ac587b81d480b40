"""Driver adapter layer for easysql.

This package hides the differences between database drivers (PyMySQL,
psycopg, sqlite3) behind one small interface.

Example:
    >>> from easysql.db import DatabaseConfig, create_adapter
    >>>
    >>> config = DatabaseConfig.from_url("mysql://localhost/shop", "root", "secret")
    >>> adapter = create_adapter(config)
    >>> adapter.connect()
    >>> adapter.execute("INSERT INTO items (name) VALUES (?)", ("lamp",))
    >>> adapter.close()
"""

from .factory import DatabaseConfig, config_from_env, create_adapter, get_adapter
from .interface import DriverAdapter
from .types import (
    ConnectionError,
    DatabaseError,
    DatabaseType,
    IntegrityError,
    Params,
)

__all__ = [
    # Factory
    "DatabaseConfig",
    "config_from_env",
    "create_adapter",
    "get_adapter",
    # Interface
    "DriverAdapter",
    # Types and exceptions
    "DatabaseType",
    "DatabaseError",
    "ConnectionError",
    "IntegrityError",
    "Params",
]
