"""Environment configuration interface for easysql.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def database_type() -> str:
        """Get the database type (mysql, postgresql or sqlite).

        Returns:
            Database type, defaults to 'mysql'
        """
        return os.getenv("DATABASE_TYPE", "mysql")

    @staticmethod
    def database_url() -> str | None:
        """Get a full connection URL, if one is configured.

        When set, it takes precedence over the individual DB_* settings.

        Returns:
            Connection URL (e.g. 'mysql://localhost:3306/app'), or None
        """
        return os.getenv("DATABASE_URL") or None

    @staticmethod
    def database_path() -> Path:
        """Get the SQLite database file path.

        Returns:
            Path to SQLite database file, defaults to ./data/easysql.db
        """
        return Path(os.getenv("DATABASE_PATH", "./data/easysql.db"))

    @staticmethod
    def db_host() -> str:
        """Get database server host.

        Returns:
            Host, defaults to 'localhost'
        """
        return os.getenv("DB_HOST", "localhost")

    @staticmethod
    def db_port() -> int | None:
        """Get database server port.

        Returns:
            Port, or None to use the backend default (3306 / 5432)
        """
        port = os.getenv("DB_PORT")
        return int(port) if port else None

    @staticmethod
    def db_name() -> str:
        """Get database name.

        Returns:
            Database name, defaults to empty string (no default schema)
        """
        return os.getenv("DB_NAME", "")

    @staticmethod
    def db_user() -> str:
        """Get database user.

        Returns:
            Database user, defaults to 'root'
        """
        return os.getenv("DB_USER", "root")

    @staticmethod
    def db_password() -> str:
        """Get database password.

        Returns:
            Database password, defaults to empty string
        """
        return os.getenv("DB_PASSWORD", "")

    @staticmethod
    def db_pool_size() -> int:
        """Get connection pool size (PostgreSQL only).

        Returns:
            Pool size, defaults to 1
        """
        return int(os.getenv("DB_POOL_SIZE", "1"))

    @staticmethod
    def db_pool_max_overflow() -> int:
        """Get connection pool max overflow (PostgreSQL only).

        Returns:
            Max overflow, defaults to 4
        """
        return int(os.getenv("DB_POOL_MAX_OVERFLOW", "4"))


# Singleton instance for convenient access
env = Environment()
