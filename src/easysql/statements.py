"""SQL text builders.

Each builder returns a ``Statement``: the SQL text with ``?`` placeholders and
the values to bind to them, in placeholder order. Builders never touch a
connection.

Identifier quoting (used by UPDATE) and the literal for an unconditional
WHERE clause default to MySQL's; driver adapters pass their own.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .records import Max, Min, TableDataObject, TableEntryPair

MYSQL_QUOTE = "`"
MYSQL_TRUE = "1"


@dataclass(frozen=True)
class Statement:
    """SQL text plus the values bound to its placeholders."""

    sql: str
    params: tuple[Any, ...] = ()


def create_database(name: str) -> Statement:
    return Statement(f"CREATE DATABASE {name}")


def drop_database(name: str) -> Statement:
    return Statement(f"DROP DATABASE {name}")


def backup_database(database: str, bak: str) -> Statement:
    """Back up ``database`` to the ``.bak`` file at ``bak``."""
    return Statement(f"BACKUP DATABASE {database} TO DISK = '{bak}'")


def create_table(
    if_not_exists: bool, name: str, columns: Sequence[TableDataObject]
) -> Statement:
    """Build a CREATE TABLE statement.

    Each column renders as ``name TYPE[ ARG...]``. If any column is marked
    primary, one ``PRIMARY KEY (col)`` clause is appended; when several are
    marked, the last one wins.
    """
    sql = "CREATE TABLE "
    if if_not_exists:
        sql += "IF NOT EXISTS "

    primary = ""
    definitions = []
    for column in columns:
        if column.primary:
            primary = column.name
        definition = f"{column.name} {column.type}"
        for argument in column.arguments or ():
            definition += f" {argument.value}"
        definitions.append(definition)

    sql += f"{name}({','.join(definitions)}"
    if primary:
        sql += f", PRIMARY KEY ({primary})"
    sql += ");"

    return Statement(sql)


def drop_table(name: str) -> Statement:
    return Statement(f"DROP TABLE {name}")


def insert(table: str, entries: Sequence[TableEntryPair]) -> Statement:
    """Build ``INSERT INTO table (k1,k2) VALUES (?,?);``."""
    keys = ",".join(entry.key for entry in entries)
    values = ",".join("?" for _ in entries)
    return Statement(
        f"INSERT INTO {table} ({keys}) VALUES ({values});",
        tuple(entry.value for entry in entries),
    )


def update(
    table: str,
    values: Sequence[TableEntryPair],
    where: Sequence[TableEntryPair] | None = None,
    quote: str = MYSQL_QUOTE,
) -> Statement:
    """Build ``UPDATE table SET `k`=?,... [WHERE `k`=? AND ...]``.

    Set values are bound first, then where values.
    """
    where = where or ()
    assignments = ",".join(f"{quote}{pair.key}{quote}=?" for pair in values)
    sql = f"UPDATE {table} SET {assignments}"
    if where:
        conditions = " AND ".join(f"{quote}{pair.key}{quote}=?" for pair in where)
        sql += f" WHERE {conditions}"

    return Statement(sql, tuple(pair.value for pair in (*values, *where)))


def _where_clause(where: Sequence[TableEntryPair] | None, true_literal: str) -> str:
    if not where:
        return true_literal
    return " AND ".join(f"{pair.key}=?" for pair in where)


def delete(
    table: str,
    where: Sequence[TableEntryPair] | None = None,
    true_literal: str = MYSQL_TRUE,
) -> Statement:
    """Build ``DELETE FROM table WHERE k=? AND ...``; no conditions deletes every row."""
    return Statement(
        f"DELETE FROM {table} WHERE {_where_clause(where, true_literal)}",
        tuple(pair.value for pair in where or ()),
    )


def select(
    columns: Sequence[str | Min | Max] | None,
    table: str,
    where: Sequence[TableEntryPair] | None = None,
    true_literal: str = MYSQL_TRUE,
) -> Statement:
    """Build ``SELECT c1,c2 FROM table WHERE k=? AND ...;``.

    >>> select(None, "users", None).sql
    'SELECT * FROM users WHERE 1;'
    """
    selected = ",".join(str(column) for column in columns) if columns else "*"
    return Statement(
        f"SELECT {selected} FROM {table} WHERE {_where_clause(where, true_literal)};",
        tuple(pair.value for pair in where or ()),
    )
