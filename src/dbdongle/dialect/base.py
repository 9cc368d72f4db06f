"""Abstract base dialect with capability flags driving the rewrite rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum


class DialectName(StrEnum):
    MYSQL = "mysql"
    PGSQL = "pgsql"
    POSTGIS = "postgis"
    SQLITE = "sqlite"
    SQLSRV = "sqlsrv"


REFERENCE_DIALECT = DialectName.MYSQL


@dataclass(frozen=True)
class DialectCapabilities:
    """Flags telling each rewrite rule what the target dialect needs.

    The defaults describe the reference (MySQL) dialect: every rule is a
    no-op.
    """

    aggregate_function: str | None = None
    inline_separator: bool = False
    cast_aggregate_args: bool = False
    concat_operator: str | None = None
    coalesce_function: str | None = None
    integer_booleans: bool = False
    explicit_casts: bool = False


class Dialect(ABC):
    """Abstract base for all target dialects."""

    @property
    @abstractmethod
    def name(self) -> DialectName: ...

    @property
    @abstractmethod
    def capabilities(self) -> DialectCapabilities: ...

    @property
    def is_reference(self) -> bool:
        return self.name == REFERENCE_DIALECT

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name.value!r})"
