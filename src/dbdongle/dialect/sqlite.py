"""SQLite dialect implementation."""

from __future__ import annotations

from dbdongle.dialect.base import Dialect, DialectCapabilities, DialectName
from dbdongle.dialect.registry import DialectRegistry


@DialectRegistry.register
class SQLiteDialect(Dialect):
    """SQLite dialect — native GROUP_CONCAT and IFNULL, integer booleans."""

    @property
    def name(self) -> DialectName:
        return DialectName.SQLITE

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            aggregate_function=None,
            inline_separator=True,
            cast_aggregate_args=False,
            concat_operator="||",
            coalesce_function=None,
            integer_booleans=True,
            explicit_casts=False,
        )
