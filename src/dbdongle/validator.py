"""Post-translation SQL validation using sqlglot."""

from __future__ import annotations

import sqlglot
from sqlglot.errors import SqlglotError

from dbdongle.dialect.base import DialectName

# PostGIS is PostgreSQL as far as the parser is concerned.
SQLGLOT_DIALECTS: dict[DialectName, str] = {
    DialectName.MYSQL: "mysql",
    DialectName.PGSQL: "postgres",
    DialectName.POSTGIS: "postgres",
    DialectName.SQLITE: "sqlite",
    DialectName.SQLSRV: "tsql",
}


def sqlglot_dialect(name: str | DialectName) -> str | None:
    """The sqlglot ``read`` dialect for a driver name, or None if unknown."""
    try:
        return SQLGLOT_DIALECTS[DialectName(str(name).lower())]
    except ValueError:
        return None


def validate_sql(sql: str, dialect_name: str | DialectName) -> list[str]:
    """Parse translated SQL with sqlglot for the given driver.

    Returns a list of error messages (empty if valid). Never raises; callers
    treat the messages as warnings.
    """
    read = sqlglot_dialect(dialect_name)
    if read is None:
        return [f"Unknown dialect '{dialect_name}' — skipping SQL validation"]

    try:
        sqlglot.parse(sql, read=read)
    except SqlglotError as exc:
        return [str(exc)]
    return []
