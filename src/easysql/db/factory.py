"""Driver adapter factory.

This module provides the configuration class, connection-URL parsing and the
factory function that turn connection settings into a driver adapter.
"""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import parse_qs, unquote, urlsplit

from .interface import DriverAdapter
from .types import DatabaseType

DEFAULT_PORTS = {
    DatabaseType.MYSQL: 3306,
    DatabaseType.POSTGRESQL: 5432,
}

_SCHEME_ALIASES = {
    "mysql": DatabaseType.MYSQL,
    "mysql+pymysql": DatabaseType.MYSQL,
    "mariadb": DatabaseType.MYSQL,
    "postgresql": DatabaseType.POSTGRESQL,
    "postgres": DatabaseType.POSTGRESQL,
    "sqlite": DatabaseType.SQLITE,
}


@dataclass
class DatabaseConfig:
    """Database configuration container.

    Attributes:
        db_type: Type of database ('mysql', 'postgresql' or 'sqlite')
        host: Server host (MySQL/PostgreSQL)
        port: Server port, defaults to the backend's standard port
        database: Database name, may be empty for MySQL
        user: Username (MySQL/PostgreSQL)
        password: Password (MySQL/PostgreSQL)
        db_path: Path to database file (SQLite only)
        pool_size: Minimum pooled connections (PostgreSQL only)
        pool_max_overflow: Extra pooled connections (PostgreSQL only)
    """

    db_type: DatabaseType | str = DatabaseType.MYSQL
    host: str | None = None
    port: int | None = None
    database: str = ""
    user: str | None = None
    password: str | None = None
    # SQLite-specific
    db_path: Path | str | None = None
    # PostgreSQL-specific
    pool_size: int = 1
    pool_max_overflow: int = 4

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.db_type, str):
            try:
                self.db_type = DatabaseType(self.db_type.lower())
            except ValueError as e:
                raise ValueError(
                    f"Unsupported database type: {self.db_type}. "
                    f"Must be one of: {', '.join(t.value for t in DatabaseType)}"
                ) from e

        if self.db_type == DatabaseType.SQLITE:
            if self.db_path is None:
                raise ValueError("db_path is required for SQLite")
            if isinstance(self.db_path, str) and self.db_path != ":memory:":
                self.db_path = Path(self.db_path)
        else:
            if not self.host:
                raise ValueError(f"host is required for {self.db_type.value}")
            if self.port is None:
                self.port = DEFAULT_PORTS[self.db_type]

    @property
    def url(self) -> str:
        """Connection URL without credentials."""
        if self.db_type == DatabaseType.SQLITE:
            return f"sqlite:///{self.db_path}"
        return f"{self.db_type.value}://{self.host}:{self.port}/{self.database}"

    @classmethod
    def from_url(
        cls, url: str, user: str | None = None, password: str | None = None
    ) -> "DatabaseConfig":
        """Build a configuration from a connection URL.

        Accepts ``mysql://host[:port]/db``, the JDBC form ``jdbc:mysql://...``,
        ``postgresql://...`` and ``sqlite:///path``. Credentials may be embedded
        in the URL (``user:pass@host``) or passed as ``?user=..&password=..``;
        explicit ``user``/``password`` arguments win over both.

        Raises:
            ValueError: If the URL scheme is not supported
        """
        raw = url.strip()
        if raw.lower().startswith("jdbc:"):
            raw = raw[len("jdbc:") :]

        scheme = raw.split(":", 1)[0].lower()
        if scheme not in _SCHEME_ALIASES:
            raise ValueError(f"Unsupported connection URL: {url}")
        db_type = _SCHEME_ALIASES[scheme]

        if db_type == DatabaseType.SQLITE:
            prefix = "sqlite:///"
            if not raw.lower().startswith(prefix) or len(raw) == len(prefix):
                raise ValueError(f"SQLite URL must look like sqlite:///path: {url}")
            return cls(db_type=db_type, db_path=raw[len(prefix) :])

        parts = urlsplit(raw)
        query = parse_qs(parts.query)

        url_user = unquote(parts.username) if parts.username else None
        url_password = unquote(parts.password) if parts.password else None
        url_user = query.get("user", [url_user])[0]
        url_password = query.get("password", [url_password])[0]

        return cls(
            db_type=db_type,
            host=parts.hostname,
            port=parts.port,
            database=parts.path.lstrip("/"),
            user=user if user is not None else url_user,
            password=password if password is not None else url_password,
        )


def create_adapter(config: DatabaseConfig) -> DriverAdapter:
    """Factory function to create the appropriate driver adapter.

    Args:
        config: Database configuration

    Returns:
        Driver adapter instance (not yet connected)

    Raises:
        ValueError: If database type is unsupported
    """
    if config.db_type == DatabaseType.MYSQL:
        from .mysql_adapter import MySQLAdapter

        return MySQLAdapter(
            host=config.host,
            port=config.port,
            database=config.database,
            user=config.user or "",
            password=config.password or "",
        )

    elif config.db_type == DatabaseType.POSTGRESQL:
        # Import here to avoid requiring psycopg when not using PostgreSQL
        from .postgres_adapter import PostgreSQLAdapter

        return PostgreSQLAdapter(
            host=config.host,
            port=config.port,
            database=config.database or "postgres",
            user=config.user or "",
            password=config.password or "",
            pool_size=config.pool_size,
            pool_max_overflow=config.pool_max_overflow,
        )

    elif config.db_type == DatabaseType.SQLITE:
        from .sqlite_adapter import SQLiteAdapter

        return SQLiteAdapter(config.db_path)

    else:
        # This should never happen due to enum validation
        raise ValueError(f"Unsupported database type: {config.db_type}")


def config_from_env() -> DatabaseConfig:
    """Build a DatabaseConfig from environment variables.

    DATABASE_URL wins when set; otherwise DATABASE_TYPE selects the backend and
    the DB_* variables (or DATABASE_PATH for SQLite) supply the settings.
    """
    from common.env import env

    url = env.database_url()
    if url:
        config = DatabaseConfig.from_url(url)
        if config.user is None:
            config.user = env.db_user()
        if config.password is None:
            config.password = env.db_password()
    elif env.database_type().lower() == DatabaseType.SQLITE.value:
        config = DatabaseConfig(db_type="sqlite", db_path=env.database_path())
    else:
        config = DatabaseConfig(
            db_type=env.database_type(),
            host=env.db_host(),
            port=env.db_port(),
            database=env.db_name(),
            user=env.db_user(),
            password=env.db_password(),
        )

    config.pool_size = env.db_pool_size()
    config.pool_max_overflow = env.db_pool_max_overflow()
    return config


def get_adapter() -> DriverAdapter:
    """Get a driver adapter using environment configuration."""
    return create_adapter(config_from_env())
