"""SQL Server dialect implementation."""

from __future__ import annotations

from dbdongle.dialect.base import Dialect, DialectCapabilities, DialectName
from dbdongle.dialect.registry import DialectRegistry


@DialectRegistry.register
class SQLServerDialect(Dialect):
    """SQL Server dialect — ISNULL, CLR string aggregation."""

    @property
    def name(self) -> DialectName:
        return DialectName.SQLSRV

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            # No built-in equivalent; needs the GROUP_CONCAT CLR aggregate
            # installed under the dbo schema.
            aggregate_function="dbo.GROUP_CONCAT_D",
            inline_separator=True,
            cast_aggregate_args=False,
            concat_operator=None,
            coalesce_function="ISNULL",
            integer_booleans=False,
            explicit_casts=False,
        )
