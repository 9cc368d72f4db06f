"""SQL dialect plugin system for dbdongle."""

# Import dialects to trigger registration
import dbdongle.dialect.mysql as _mysql  # noqa: F401
import dbdongle.dialect.postgres as _postgres  # noqa: F401
import dbdongle.dialect.sqlite as _sqlite  # noqa: F401
import dbdongle.dialect.sqlsrv as _sqlsrv  # noqa: F401
from dbdongle.dialect.base import REFERENCE_DIALECT, Dialect, DialectCapabilities, DialectName
from dbdongle.dialect.registry import DialectRegistry, UnsupportedDialectError

__all__ = [
    "REFERENCE_DIALECT",
    "Dialect",
    "DialectCapabilities",
    "DialectName",
    "DialectRegistry",
    "UnsupportedDialectError",
]
