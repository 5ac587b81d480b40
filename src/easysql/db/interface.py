"""Abstract driver adapter interface.

This module defines the interface that every driver adapter implements. The
client builds SQL with ``?`` placeholders; each adapter translates them to its
driver's parameter style and reports the dialect details (identifier quoting,
always-true literal) that the statement builders need.
"""

from abc import ABC, abstractmethod
from typing import Any

from .types import Params


class DriverAdapter(ABC):
    """Abstract driver adapter.

    An adapter owns at most one open driver connection. All driver exceptions
    are re-raised as the ``easysql.db.types`` hierarchy.
    """

    @abstractmethod
    def connect(self) -> Any:
        """Open a driver connection.

        Returns:
            The raw driver connection

        Raises:
            ConnectionError: If the connection cannot be opened
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the driver connection, if any."""
        pass

    @abstractmethod
    def is_open(self) -> bool:
        """Check whether a connection is currently open."""
        pass

    @abstractmethod
    def execute(self, sql: str, params: Params = ()) -> int:
        """Execute a statement that returns no rows.

        Args:
            sql: SQL text using ``?`` placeholders
            params: Values bound positionally to the placeholders

        Returns:
            Number of affected rows as reported by the driver

        Raises:
            DatabaseError: If execution fails
            IntegrityError: If an integrity constraint is violated
        """
        pass

    @abstractmethod
    def query(self, sql: str, params: Params = ()) -> tuple[list[str], list[tuple]]:
        """Execute a statement and fetch every row.

        Args:
            sql: SQL text using ``?`` placeholders
            params: Values bound positionally to the placeholders

        Returns:
            Tuple of (column labels, rows) with each row a tuple ordered like the labels

        Raises:
            DatabaseError: If execution fails
        """
        pass

    @property
    @abstractmethod
    def placeholder(self) -> str:
        """Driver-specific parameter placeholder ('?' or '%s')."""
        pass

    @property
    def identifier_quote(self) -> str:
        """Character used to quote identifiers (backtick for MySQL)."""
        return "`"

    @property
    def true_literal(self) -> str:
        """Literal used for an unconditional WHERE clause."""
        return "1"

    def _translate(self, sql: str) -> str:
        if self.placeholder == "?":
            return sql
        return sql.replace("?", self.placeholder)
