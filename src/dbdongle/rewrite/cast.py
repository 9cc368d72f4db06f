"""Dialect-aware explicit casts."""

from __future__ import annotations

from dbdongle.dialect.base import Dialect


def cast(expression: str, dialect: Dialect, target_type: str = "INTEGER") -> str:
    """Wrap ``expression`` in ``CAST(... AS target_type)`` where the dialect needs it.

    PostgreSQL refuses implicit comparisons between mismatched types; other
    dialects get the expression back unchanged.
    """
    if not dialect.capabilities.explicit_casts:
        return expression
    return f"CAST({expression} AS {target_type})"
