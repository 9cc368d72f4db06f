"""Connection-scoped schema administration for MySQL migrations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Any, Protocol

from dbdongle.dialect.base import DialectName
from dbdongle.dongle import Dongle

logger = logging.getLogger("dbdongle.admin")

_DEFAULT_TIMESTAMP_COLUMNS = ("created_at", "updated_at")


class Connection(Protocol):
    """The slice of a database connection that :class:`SchemaAdmin` needs."""

    def statement(self, sql: str) -> Any: ...

    def update(self, sql: str) -> int: ...

    def get_config(self, key: str) -> Any: ...


class SchemaAdmin:
    """One-shot administrative statements issued through a shared connection.

    Every operation is a no-op for drivers other than ``mysql``. Thread-safe.
    """

    def __init__(self, dongle: Dongle, connection: Connection, strict: bool | None = None) -> None:
        self._dongle = dongle
        self._connection = connection
        self._strict = strict
        self._lock = threading.Lock()
        self._strict_mode_disabled = False

    def _strict_configured(self) -> bool:
        """An explicit ``strict`` wins over the connection's own config."""
        if self._strict is not None:
            return self._strict
        return self._connection.get_config("strict") is not False

    @property
    def strict_mode_disabled(self) -> bool:
        return self._strict_mode_disabled

    def convert_timestamps(self, table: str, columns: str | Sequence[str] | None = None) -> None:
        """Make TIMESTAMP columns nullable and null out zero dates.

        Older schemas declared ``DEFAULT 0``, which NO_ZERO_DATE in MySQL's
        strict mode rejects.
        """
        if self._dongle.driver != DialectName.MYSQL:
            return

        if columns is None:
            columns = _DEFAULT_TIMESTAMP_COLUMNS
        elif isinstance(columns, str):
            columns = (columns,)

        prefixed_table = f"{self._dongle.table_prefix}{table}"
        for column in columns:
            logger.info("Converting %s.%s to nullable TIMESTAMP", prefixed_table, column)
            self._connection.statement(
                f"ALTER TABLE {prefixed_table} MODIFY `{column}` TIMESTAMP NULL DEFAULT NULL"
            )
            self._connection.update(
                f"UPDATE {prefixed_table} SET {column} = null WHERE {column} = 0"
            )

    def disable_strict_mode(self) -> bool:
        """Clear SQL_MODE for the rest of the session (used during migrations).

        Returns True when the statement was issued by this call.
        """
        if self._dongle.driver != DialectName.MYSQL:
            return False

        with self._lock:
            if self._strict_mode_disabled or not self._strict_configured():
                return False
            self._connection.statement("SET @@SQL_MODE=''")
            self._strict_mode_disabled = True

        logger.info("Strict mode disabled")
        return True
