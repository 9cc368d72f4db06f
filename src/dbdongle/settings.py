"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for building a :class:`~dbdongle.dongle.Dongle`.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Connection
    db_driver: str = "mysql"  # mysql, pgsql, postgis, sqlite, sqlsrv
    db_table_prefix: str = ""
    db_strict: bool | None = None  # None defers to the connection's own "strict" config

    # Translation
    validate_sql: bool = True  # parse translated SQL with sqlglot in translate_checked()
