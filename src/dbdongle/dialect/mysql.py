"""MySQL dialect — the reference dialect every fragment is written in."""

from __future__ import annotations

from dbdongle.dialect.base import Dialect, DialectCapabilities, DialectName
from dbdongle.dialect.registry import DialectRegistry


@DialectRegistry.register
class MySQLDialect(Dialect):
    """MySQL dialect — input syntax, nothing to rewrite."""

    @property
    def name(self) -> DialectName:
        return DialectName.MYSQL

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities()
