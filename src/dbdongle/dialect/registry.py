"""Dialect plugin registry — discover and register dialect implementations."""

from __future__ import annotations

import logging

from dbdongle.dialect.base import REFERENCE_DIALECT, Dialect, DialectName

logger = logging.getLogger("dbdongle.dialect")


class UnsupportedDialectError(Exception):
    """Raised when a requested dialect is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.dialect_name = name
        self.available = available
        super().__init__(f"Unsupported dialect '{name}'. Available: {', '.join(available)}")


class DialectRegistry:
    """Registry for SQL dialect plugins."""

    _dialects: dict[str, type[Dialect]] = {}

    @classmethod
    def register(cls, dialect_class: type[Dialect]) -> type[Dialect]:
        """Register a dialect class. Can be used as a decorator."""
        # Instantiate to read the name property
        instance = dialect_class()
        cls._dialects[instance.name.value] = dialect_class
        return dialect_class

    @classmethod
    def get(cls, name: str | DialectName) -> Dialect:
        """Get an instance of the named dialect."""
        key = str(name).lower()
        if key not in cls._dialects:
            raise UnsupportedDialectError(str(name), available=cls.available())
        return cls._dialects[key]()

    @classmethod
    def resolve(cls, name: str | DialectName | Dialect) -> Dialect:
        """Like :meth:`get`, but unknown names fall back to the reference dialect."""
        if isinstance(name, Dialect):
            return name
        try:
            return cls.get(name)
        except UnsupportedDialectError as exc:
            logger.warning("%s; falling back to '%s'", exc, REFERENCE_DIALECT.value)
            return cls.get(REFERENCE_DIALECT)

    @classmethod
    def available(cls) -> list[str]:
        """List registered dialect names."""
        return sorted(cls._dialects.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered dialects (for testing)."""
        cls._dialects.clear()
