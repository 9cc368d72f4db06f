"""PostgreSQL and PostGIS dialect implementations."""

from __future__ import annotations

from dbdongle.dialect.base import Dialect, DialectCapabilities, DialectName
from dbdongle.dialect.registry import DialectRegistry


@DialectRegistry.register
class PostgresDialect(Dialect):
    """PostgreSQL dialect — string_agg, || concatenation, strict typing."""

    @property
    def name(self) -> DialectName:
        return DialectName.PGSQL

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            aggregate_function="string_agg",
            inline_separator=True,
            # string_agg() rejects non-text arguments
            cast_aggregate_args=True,
            concat_operator="||",
            coalesce_function="COALESCE",
            integer_booleans=False,
            explicit_casts=True,
        )


@DialectRegistry.register
class PostGISDialect(PostgresDialect):
    """PostGIS — PostgreSQL syntax under its own driver name."""

    @property
    def name(self) -> DialectName:
        return DialectName.POSTGIS
